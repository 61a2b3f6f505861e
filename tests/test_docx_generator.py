"""Tests for rendering the documentation model with python-docx."""

from pathlib import Path

from docx import Document

from dox2docx.doc_model import (
    Class,
    Descriptions,
    Function,
    Group,
    Macro,
    Parameter,
    Project,
    Variable,
)
from dox2docx.docx_generator import DocxGenerator
from dox2docx.load_config import load_config
from dox2docx.paragraph_model import (
    CodeParagraph,
    ListParagraph,
    ListParagraphType,
    ParagraphType,
    TextParagraph,
    TextRun,
    TextRunFormat,
)


def _text(text: str, fmt: TextRunFormat = TextRunFormat.NONE) -> TextParagraph:
    return TextParagraph(runs=[TextRun(text, fmt)])


def _project() -> Project:
    detailed = [
        TextParagraph(
            runs=[TextRun("Adds "), TextRun("two", TextRunFormat.BOLD | TextRunFormat.ITALIC)]
        ),
        ListParagraph(ListParagraphType.BULLET, [_text("first"), _text("second")]),
        CodeParagraph(["int x = add(1, 2);", "return x;"]),
        TextParagraph(ParagraphType.WARNING, [TextRun("overflow")]),
    ]
    add = Function(
        name="add",
        descriptions=Descriptions(brief=_text("Add numbers."), detailed=detailed),
        return_type="int",
        return_description=_text("The sum."),
        definition="int add",
        args_string="(int a, int b)",
        parameters=[
            Parameter("a", "int", _text("Left.")),
            Parameter("b", "int"),
        ],
    )
    point = Class(
        name="point",
        descriptions=Descriptions(brief=_text("A point.")),
        variables=[Variable("x", Descriptions(brief=_text("X.")), "int", "int point::x")],
    )
    sub = Group(name="Internals", descriptions=Descriptions())
    group = Group(
        name="Math",
        descriptions=Descriptions(brief=_text("Math helpers.")),
        sub_groups=[sub],
        files=["math.h"],
        classes=[point],
        functions=[add],
        macros=[Macro("MAX", Descriptions(), "((a) > (b))", parameters=[Parameter("a")])],
    )
    return Project(groups=[group])


def test_generate_document(tmp_path: Path) -> None:
    """Verify the rendered document structure."""
    out = tmp_path / "out" / "api.docx"
    DocxGenerator(load_config(None)).generate(_project(), out)

    assert out.exists()
    doc = Document(str(out))
    texts = [p.text for p in doc.paragraphs]

    assert texts[0] == "API Reference"
    for expected in [
        "Math",
        "Math helpers.",
        "math.h",
        "struct point",
        "Functions",
        "add",
        "Adds two",
        "first",
        "second",
        "Warning: overflow",
        "The sum.",
        "Macros",
        "#define MAX(a) ((a) > (b))",
        "Internals",
    ]:
        assert expected in texts
    assert "int add(int a, int b)" in texts

    styles = {p.text: p.style.name for p in doc.paragraphs}
    assert styles["Math"] == "Heading 1"
    assert styles["Internals"] == "Heading 2"
    assert styles["add"] == "Heading 3"
    assert styles["first"] == "List Bullet"

    # Struct fields, function parameters and macro parameters.
    assert len(doc.tables) == 3
    params = doc.tables[1]
    assert [c.text for c in params.rows[0].cells] == ["Name", "Type", "Description"]
    assert [c.text for c in params.rows[1].cells] == ["a", "int", "Left."]
    assert params.rows[2].cells[2].text == ""


def test_formatting_runs(tmp_path: Path) -> None:
    """Verify that run formats map onto Word run properties."""
    out = tmp_path / "fmt.docx"
    DocxGenerator(load_config(None)).generate(_project(), out)
    doc = Document(str(out))

    adds = next(p for p in doc.paragraphs if p.text == "Adds two")
    plain, styled = adds.runs
    assert not plain.bold
    assert styled.bold
    assert styled.italic

    code = next(p for p in doc.paragraphs if p.text.startswith("int x"))
    assert code.runs[0].font.name == "Consolas"
