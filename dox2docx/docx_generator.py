"""Logic for rendering the documentation model into a Word document."""

import logging
from pathlib import Path
from typing import Any

from docx import Document
from docx.shared import Pt, RGBColor
from docx.table import _Cell
from docx.text.paragraph import Paragraph as DocxParagraph

from dox2docx.doc_model import (
    Class,
    Descriptions,
    Function,
    Group,
    Macro,
    Parameter,
    Project,
    Typedef,
    Variable,
)
from dox2docx.paragraph_model import (
    CodeParagraph,
    ListParagraph,
    ListParagraphType,
    Paragraph,
    ParagraphKind,
    ParagraphType,
    TextParagraph,
    TextRunFormat,
)

logger = logging.getLogger(__name__)

MAX_HEADING_LEVEL = 9
MAX_LIST_LEVEL = 3


class DocxGenerator:
    """Renders a ``Project`` with python-docx using styles from the config."""

    def __init__(self, config: dict[str, Any]) -> None:
        self.config = config
        self.code_font = config["fonts"]["code"]
        self.code_size = Pt(config["fonts"]["code_size"])
        self.warning_color = RGBColor.from_string(config["warning"]["color"])
        self.doc: Any = None

    def generate(self, project: Project, output_path: Path) -> None:
        """Write the whole project to ``output_path``."""
        template = self.config["document"].get("template")
        self.doc = Document(template) if template else Document()
        self.doc.add_heading(self.config["document"]["title"], level=0)

        for group in project.groups:
            self._render_group(group, level=1)

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        self.doc.save(str(output_path))
        logger.info("Wrote %s", output_path)

    # -----------------------------
    # Paragraph model
    # -----------------------------

    def render_paragraphs(
        self, container: Any, paragraphs: list[Paragraph], list_level: int = 0
    ) -> None:
        """Append paragraphs to a document or table cell."""
        for paragraph in paragraphs:
            if paragraph.kind is ParagraphKind.TEXT:
                self._render_text(container.add_paragraph(), paragraph)
            elif paragraph.kind is ParagraphKind.LIST:
                self._render_list(container, paragraph, list_level)
            elif paragraph.kind is ParagraphKind.CODE:
                self._render_code(container.add_paragraph(), paragraph)

    def _render_text(self, p: DocxParagraph, paragraph: TextParagraph) -> None:
        warning = paragraph.type is ParagraphType.WARNING
        if warning:
            label = p.add_run(self.config["warning"]["label"] + " ")
            label.bold = True
            label.font.color.rgb = self.warning_color
        for text_run in paragraph.runs:
            run = p.add_run(text_run.text)
            if text_run.format & TextRunFormat.BOLD:
                run.bold = True
            if text_run.format & TextRunFormat.ITALIC:
                run.italic = True
            if text_run.format & TextRunFormat.MONOSPACE:
                run.font.name = self.code_font
            if warning:
                run.font.color.rgb = self.warning_color

    def _render_list(
        self, container: Any, paragraph: ListParagraph, list_level: int
    ) -> None:
        key = (
            "number_list"
            if paragraph.type is ListParagraphType.NUMBER
            else "bullet_list"
        )
        style = self.config["styles"][key]
        if list_level > 0:
            style = f"{style} {min(list_level, MAX_LIST_LEVEL - 1) + 1}"
        for item in paragraph.items:
            if item.kind is ParagraphKind.LIST:
                self._render_list(container, item, list_level + 1)
            elif item.kind is ParagraphKind.CODE:
                self._render_code(container.add_paragraph(), item)
            else:
                self._render_text(self._styled_paragraph(container, style), item)

    def _render_code(self, p: DocxParagraph, paragraph: CodeParagraph) -> None:
        for i, line in enumerate(paragraph.lines):
            if i > 0:
                p.add_run().add_break()
            run = p.add_run(line)
            run.font.name = self.code_font
            run.font.size = self.code_size

    def _styled_paragraph(self, container: Any, style: str) -> DocxParagraph:
        try:
            return container.add_paragraph(style=style)
        except KeyError:
            logger.warning("Style %r not found in document, using default", style)
            return container.add_paragraph()

    # -----------------------------
    # Documentation model
    # -----------------------------

    def _heading(self, text: str, level: int) -> None:
        self.doc.add_heading(text, level=min(level, MAX_HEADING_LEVEL))

    def _render_descriptions(self, descriptions: Descriptions) -> None:
        paragraphs = [descriptions.brief] if len(descriptions.brief) else []
        self.render_paragraphs(self.doc, paragraphs + descriptions.detailed)

    def _render_signature(self, signature: str) -> None:
        if signature.strip():
            self._render_code(self.doc.add_paragraph(), CodeParagraph([signature]))

    def _render_group(self, group: Group, level: int) -> None:
        logger.debug("Rendering group %s", group.name)
        self._heading(group.name, level)
        self._render_descriptions(group.descriptions)

        if group.files:
            self._heading("Files", level + 1)
            for name in group.files:
                p = self._styled_paragraph(self.doc, self.config["styles"]["bullet_list"])
                p.add_run(name).font.name = self.code_font

        for cls in group.classes:
            self._render_class(cls, level + 1)

        sections = [
            ("Functions", group.functions, self._render_function),
            ("Macros", group.macros, self._render_macro),
            ("Typedefs", group.typedefs, self._render_typedef),
            ("Global Variables", group.global_variables, self._render_variable),
        ]
        for title, items, render in sections:
            if items:
                self._heading(title, level + 1)
                for item in items:
                    render(item, level + 2)

        for sub_group in group.sub_groups:
            self._render_group(sub_group, level + 1)

    def _render_class(self, cls: Class, level: int) -> None:
        self._heading(f"struct {cls.name}", level)
        self._render_descriptions(cls.descriptions)
        if cls.variables:
            rows = [
                (v.name, v.type, v.descriptions.brief) for v in cls.variables
            ]
            self._render_table(["Name", "Type", "Description"], rows)

    def _render_function(self, function: Function, level: int) -> None:
        self._heading(function.name, level)
        self._render_signature(f"{function.definition}{function.args_string}")
        self._render_descriptions(function.descriptions)
        self._render_parameters(function.parameters)
        self._render_returns(function.return_description)

    def _render_macro(self, macro: Macro, level: int) -> None:
        self._heading(macro.name, level)
        signature = f"#define {macro.name}"
        if macro.parameters:
            signature += "(" + ", ".join(p.name for p in macro.parameters) + ")"
        if macro.initializer:
            signature += f" {macro.initializer}"
        self._render_signature(signature)
        self._render_descriptions(macro.descriptions)
        self._render_parameters(macro.parameters)
        self._render_returns(macro.return_description)

    def _render_typedef(self, typedef: Typedef, level: int) -> None:
        self._heading(typedef.name, level)
        self._render_signature(typedef.definition)
        self._render_descriptions(typedef.descriptions)

    def _render_variable(self, variable: Variable, level: int) -> None:
        self._heading(variable.name, level)
        self._render_signature(variable.definition)
        self._render_descriptions(variable.descriptions)

    def _render_parameters(self, parameters: list[Parameter]) -> None:
        if not parameters:
            return
        p = self.doc.add_paragraph()
        p.add_run("Parameters").bold = True
        rows = [(param.name, param.type or "", param.description) for param in parameters]
        self._render_table(["Name", "Type", "Description"], rows)

    def _render_returns(self, description: Paragraph) -> None:
        if not len(description):
            return
        p = self.doc.add_paragraph()
        p.add_run("Returns").bold = True
        self.render_paragraphs(self.doc, [description])

    def _render_table(
        self, headers: list[str], rows: list[tuple[str, str, Paragraph]]
    ) -> None:
        table = self.doc.add_table(rows=1, cols=len(headers))
        try:
            table.style = self.config["styles"]["table"]
        except KeyError:
            logger.warning("Table style %r not found", self.config["styles"]["table"])
        for cell, header in zip(table.rows[0].cells, headers):
            cell.paragraphs[0].add_run(header).bold = True
        for name, type_, description in rows:
            cells = table.add_row().cells
            cells[0].paragraphs[0].add_run(name).font.name = self.code_font
            cells[1].paragraphs[0].add_run(type_).font.name = self.code_font
            self._render_cell(cells[2], description)

    def _render_cell(self, cell: _Cell, paragraph: Paragraph) -> None:
        if paragraph.kind is ParagraphKind.TEXT:
            self._render_text(cell.paragraphs[0], paragraph)
        else:
            self.render_paragraphs(cell, [paragraph])
