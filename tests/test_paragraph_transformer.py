"""Tests for converting description markup into paragraphs."""

import logging

import pytest
from lxml import etree

from dox2docx.paragraph_model import (
    CodeParagraph,
    ListParagraph,
    ListParagraphType,
    ParagraphType,
    TextParagraph,
    TextRun,
    TextRunFormat,
)
from dox2docx.paragraph_transformer import (
    ContentKind,
    classify_content,
    description_paras,
    para_to_paragraph,
    para_to_paragraphs,
    paras_to_paragraph,
    paras_to_paragraphs,
)
from dox2docx.parser_error import ParserError

B = TextRunFormat.BOLD
I = TextRunFormat.ITALIC  # noqa: E741
M = TextRunFormat.MONOSPACE
N = TextRunFormat.NONE


def _para(xml: str) -> etree._Element:
    return etree.fromstring(xml)


def _text(*runs: TextRun, type_: ParagraphType = ParagraphType.NORMAL) -> TextParagraph:
    return TextParagraph(type_, list(runs))


def test_plain_text() -> None:
    """Verify that prose becomes a single normal paragraph."""
    assert para_to_paragraphs(_para("<para>Hello world</para>")) == [
        _text(TextRun("Hello world"))
    ]


def test_leading_newlines_are_stripped() -> None:
    """Verify that newlines at the start of a fragment are removed."""
    result = para_to_paragraphs(_para("<para>\n\nHello\nthere</para>"))
    assert result == [_text(TextRun("Hello\nthere"))]


def test_space_only_fragment_is_preserved() -> None:
    """Verify that a space-only fragment between markup is kept verbatim."""
    result = para_to_paragraphs(
        _para("<para>a<bold>b</bold>   <emphasis>c</emphasis></para>")
    )
    assert result == [
        _text(TextRun("a"), TextRun("b", B), TextRun("   "), TextRun("c", I))
    ]


def test_format_composition_and_restoration() -> None:
    """Verify nested formats combine and unnest back to the outer format."""
    result = para_to_paragraphs(
        _para(
            "<para>x<bold>b<emphasis>bi<computeroutput>bim</computeroutput>"
            "</emphasis>b2</bold>y</para>"
        )
    )
    assert result == [
        _text(
            TextRun("x", N),
            TextRun("b", B),
            TextRun("bi", B | I),
            TextRun("bim", B | I | M),
            TextRun("b2", B),
            TextRun("y", N),
        )
    ]


def test_warning_is_its_own_paragraph() -> None:
    """Verify that a warning splits the surrounding prose."""
    result = para_to_paragraphs(
        _para(
            '<para>before<simplesect kind="warning"><para>danger</para></simplesect>'
            "after</para>"
        )
    )
    assert result == [
        _text(TextRun("before")),
        _text(TextRun("danger"), type_=ParagraphType.WARNING),
        _text(TextRun("after")),
    ]


def test_trailing_warning_leaves_no_empty_paragraph() -> None:
    """Verify that the paragraph opened after a warning is dropped when empty."""
    result = para_to_paragraphs(
        _para('<para><simplesect kind="warning"><para>careful</para></simplesect></para>')
    )
    assert result == [_text(TextRun("careful"), type_=ParagraphType.WARNING)]


def test_other_admonitions_are_ignored() -> None:
    """Verify that notes, returns and parameter lists produce no output."""
    result = para_to_paragraphs(
        _para(
            '<para>text<simplesect kind="return"><para>ret</para></simplesect>'
            '<parameterlist kind="param"><parameteritem><parameternamelist>'
            "<parametername>a</parametername></parameternamelist>"
            "<parameterdescription><para>doc</para></parameterdescription>"
            "</parameteritem></parameterlist></para>"
        )
    )
    assert result == [_text(TextRun("text"))]


def test_unordered_list() -> None:
    """Verify that a two-item list keeps both items in source order."""
    result = para_to_paragraphs(
        _para(
            "<para><itemizedlist>"
            "<listitem><para>one</para></listitem>"
            "<listitem><para>two</para></listitem>"
            "</itemizedlist></para>"
        )
    )
    assert result == [
        ListParagraph(
            ListParagraphType.BULLET, [_text(TextRun("one")), _text(TextRun("two"))]
        )
    ]


def test_ordered_list_after_text() -> None:
    """Verify list type and that trailing newlines add no empty paragraph."""
    result = para_to_paragraphs(
        _para(
            "<para>Steps:\n<orderedlist>\n<listitem><para>first</para></listitem>\n"
            "</orderedlist>\n</para>"
        )
    )
    assert result == [
        _text(TextRun("Steps:\n")),
        ListParagraph(ListParagraphType.NUMBER, [_text(TextRun("first"))]),
    ]


def test_text_after_list_starts_new_paragraph() -> None:
    """Verify that prose after a list is not merged into it."""
    result = para_to_paragraphs(
        _para(
            "<para><itemizedlist><listitem><para>a</para></listitem></itemizedlist>"
            "tail</para>"
        )
    )
    assert len(result) == 2
    assert result[1] == _text(TextRun("tail"))


def test_warning_inside_list_item_is_dropped() -> None:
    """Verify that admonitions nested in list items are not kept."""
    result = para_to_paragraphs(
        _para(
            "<para><itemizedlist><listitem><para>item"
            '<simplesect kind="warning"><para>hidden</para></simplesect>'
            "</para></listitem></itemizedlist></para>"
        )
    )
    assert result == [
        ListParagraph(ListParagraphType.BULLET, [_text(TextRun("item"))])
    ]


def test_list_items_inherit_format() -> None:
    """Verify that a list inside bold markup carries the bold flag."""
    result = para_to_paragraphs(
        _para(
            "<para><bold><itemizedlist><listitem><para>x</para></listitem>"
            "</itemizedlist></bold></para>"
        )
    )
    assert result == [ListParagraph(ListParagraphType.BULLET, [_text(TextRun("x", B))])]


def test_code_listing() -> None:
    """Verify that code lines join highlights, spaces and references."""
    result = para_to_paragraphs(
        _para(
            "<para><programlisting>"
            '<codeline><highlight class="keywordtype">int</highlight>'
            '<highlight class="normal"><sp/>x<sp/>=<sp/>'
            '<ref refid="f" kindref="member">foo</ref>();</highlight></codeline>'
            '<codeline><highlight class="comment">//<sp/>done</highlight></codeline>'
            "</programlisting></para>"
        )
    )
    assert result == [CodeParagraph(["int x = foo();", "// done"])]


def test_code_listing_rejects_comments() -> None:
    """Verify that unexpected code parts are a parse error."""
    para = _para(
        "<para><programlisting><codeline><highlight>a<!-- c --></highlight>"
        "</codeline></programlisting></para>"
    )
    with pytest.raises(ParserError, match="code part"):
        para_to_paragraphs(para)


def test_entities() -> None:
    """Verify that empty entity elements become their characters."""
    result = para_to_paragraphs(_para("<para>a<copy/>b <bold><alpha/></bold></para>"))
    assert result == [
        _text(TextRun("a"), TextRun("©"), TextRun("b "), TextRun("α", B))
    ]


def test_unknown_inline_markup_is_flattened(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that unrecognised inline markup degrades to plain text."""
    para = _para(
        '<para>see <ref refid="x">foo</ref> and <mystery>bar <b>baz</b></mystery>'
        "</para>"
    )
    with caplog.at_level(logging.DEBUG):
        result = para_to_paragraphs(para)

    assert result == [
        _text(TextRun("see "), TextRun("foo"), TextRun(" and "), TextRun("bar baz"))
    ]
    unsupported = [r for r in caplog.records if r.levelname == "UNSUPPORTED"]
    assert len(unsupported) == 1
    assert "mystery" in unsupported[0].getMessage()


def test_unknown_node_type_is_fatal() -> None:
    """Verify that non-element nodes are a parse error naming their type."""
    with pytest.raises(ParserError, match="_Comment"):
        para_to_paragraphs(_para("<para>a<!-- note --></para>"))


def test_classify_content() -> None:
    """Verify the mapping of nodes onto content kinds."""
    assert classify_content("text") is ContentKind.TEXT
    assert classify_content(_para('<simplesect kind="warning"/>')) is ContentKind.WARNING
    assert classify_content(_para('<simplesect kind="note"/>')) is ContentKind.ADMONITION
    assert classify_content(_para("<itemizedlist/>")) is ContentKind.UNORDERED_LIST
    assert classify_content(_para("<orderedlist/>")) is ContentKind.ORDERED_LIST
    assert classify_content(_para("<programlisting/>")) is ContentKind.LISTING
    assert classify_content(_para("<copy/>")) is ContentKind.ENTITY
    assert classify_content(_para("<ulink url='x'>y</ulink>")) is ContentKind.INLINE
    assert classify_content(etree.Comment("c")) is ContentKind.UNKNOWN


def test_empty_input() -> None:
    """Verify empty results and placeholders for missing content."""
    assert para_to_paragraphs(None) == []
    assert para_to_paragraphs(_para("<para/>")) == []
    assert paras_to_paragraphs(None) == []
    assert paras_to_paragraphs([]) == []
    assert para_to_paragraph(None) == TextParagraph()
    assert paras_to_paragraph([]) == TextParagraph()


def test_multiple_paras() -> None:
    """Verify that paragraphs from several paras are concatenated in order."""
    node = _para("<detaileddescription><para>one</para><para>two</para></detaileddescription>")
    paras = description_paras(node)
    assert paras_to_paragraphs(paras) == [_text(TextRun("one")), _text(TextRun("two"))]
    assert paras_to_paragraph(paras) == _text(TextRun("one"))
    assert description_paras(None) == []


def test_transform_is_idempotent() -> None:
    """Verify that transforming the same block twice gives equal results."""
    para = _para(
        "<para>x<bold>y</bold><itemizedlist><listitem><para>z</para></listitem>"
        '</itemizedlist><simplesect kind="warning"><para>w</para></simplesect></para>'
    )
    assert para_to_paragraphs(para) == para_to_paragraphs(para)
