"""Logic for converting Doxygen description markup into paragraphs and runs.

A Doxygen ``<para>`` is mixed content: prose interleaved with inline markup
(``<bold>``, ``<emphasis>``, ``<computeroutput>``, ``<ref>`` ...) and block
constructs (lists, program listings, ``<simplesect>`` admonitions). Each node
is classified into a ``ContentKind`` and dispatched; formatting is carried down
the recursion as a ``TextRunFormat`` bitmask.
"""

import logging
from collections.abc import Iterable, Iterator
from enum import Enum, auto

from lxml import etree

from dox2docx.entity_lookup import try_lookup
from dox2docx.paragraph_model import (
    CodeParagraph,
    ListParagraph,
    ListParagraphType,
    Paragraph,
    ParagraphKind,
    ParagraphType,
    TextParagraph,
    TextRun,
    TextRunFormat,
)
from dox2docx.parser_error import ParserError
from dox2docx.run_logging import log_unsupported

logger = logging.getLogger(__name__)


class ContentKind(Enum):
    TEXT = auto()
    WARNING = auto()
    ADMONITION = auto()
    ORDERED_LIST = auto()
    UNORDERED_LIST = auto()
    LISTING = auto()
    BOLD = auto()
    ITALIC = auto()
    MONOSPACE = auto()
    ENTITY = auto()
    INLINE = auto()
    UNKNOWN = auto()


_MARKUP_KINDS = {
    "orderedlist": ContentKind.ORDERED_LIST,
    "itemizedlist": ContentKind.UNORDERED_LIST,
    "programlisting": ContentKind.LISTING,
    "bold": ContentKind.BOLD,
    "emphasis": ContentKind.ITALIC,
    "computeroutput": ContentKind.MONOSPACE,
}

# Blocks that carry no prose of their own for the description body.
_ADMONITION_TAGS = frozenset({"simplesect", "parameterlist", "xrefsect"})

# Inline elements whose text is all the document needs.
QUIET_INLINE_TAGS = frozenset(
    {
        "ref",
        "ulink",
        "anchor",
        "linebreak",
        "verbatim",
        "superscript",
        "subscript",
        "underline",
        "strike",
        "small",
        "center",
    }
)

_FORMAT_FLAGS = {
    ContentKind.BOLD: TextRunFormat.BOLD,
    ContentKind.ITALIC: TextRunFormat.ITALIC,
    ContentKind.MONOSPACE: TextRunFormat.MONOSPACE,
}

Content = str | etree._Element


def iter_content(node: etree._Element) -> Iterator[Content]:
    """Yield the text and child nodes of an element in document order."""
    if node.text:
        yield node.text
    for child in node:
        yield child
        if child.tail:
            yield child.tail


def classify_content(part: Content) -> ContentKind:
    """Map a content node onto the closed set of kinds the transformer handles."""
    if isinstance(part, str):
        return ContentKind.TEXT
    tag = part.tag
    if not isinstance(tag, str):
        # Comments, processing instructions and entity references.
        return ContentKind.UNKNOWN
    if tag == "simplesect" and part.get("kind") == "warning":
        return ContentKind.WARNING
    if tag in _ADMONITION_TAGS:
        return ContentKind.ADMONITION
    kind = _MARKUP_KINDS.get(tag)
    if kind is not None:
        return kind
    if len(part) == 0 and not part.text and try_lookup(tag) is not None:
        return ContentKind.ENTITY
    return ContentKind.INLINE


def flatten_text(node: etree._Element) -> str:
    return "".join(node.itertext())


def _describe(part: etree._Element) -> str:
    return f"{part!r} ({type(part).__name__})"


def _add_run(paragraphs: list[Paragraph], text: str, fmt: TextRunFormat) -> None:
    text = text.lstrip("\n")
    if not text:
        return
    if not paragraphs or paragraphs[-1].kind is not ParagraphKind.TEXT:
        paragraphs.append(TextParagraph())
    paragraphs[-1].add(TextRun(text, fmt))


def _parse(
    paragraphs: list[Paragraph], node: etree._Element, fmt: TextRunFormat
) -> None:
    for part in iter_content(node):
        kind = classify_content(part)
        if kind is ContentKind.TEXT:
            _add_run(paragraphs, part, fmt)
        elif kind is ContentKind.WARNING:
            paragraphs.append(TextParagraph(ParagraphType.WARNING))
            for para in part.findall("para"):
                _parse(paragraphs, para, fmt)
            paragraphs.append(TextParagraph())
        elif kind is ContentKind.ORDERED_LIST:
            _parse_list(paragraphs, part, ListParagraphType.NUMBER, fmt)
        elif kind is ContentKind.UNORDERED_LIST:
            _parse_list(paragraphs, part, ListParagraphType.BULLET, fmt)
        elif kind is ContentKind.LISTING:
            _parse_listing(paragraphs, part)
        elif kind in _FORMAT_FLAGS:
            _parse(paragraphs, part, fmt | _FORMAT_FLAGS[kind])
        elif kind is ContentKind.ENTITY:
            _add_run(paragraphs, try_lookup(part.tag) or "", fmt)
        elif kind is ContentKind.INLINE:
            if part.tag not in QUIET_INLINE_TAGS:
                log_unsupported(logger, "Rendering <%s> as plain text", part.tag)
            _add_run(paragraphs, flatten_text(part), fmt)
        elif kind is ContentKind.ADMONITION:
            continue
        else:
            msg = f"Unexpected content {_describe(part)}"
            raise ParserError(msg)


def _parse_list(
    paragraphs: list[Paragraph],
    node: etree._Element,
    list_type: ListParagraphType,
    fmt: TextRunFormat,
) -> None:
    list_paragraph = ListParagraph(list_type)
    paragraphs.append(list_paragraph)
    for item in node.findall("listitem"):
        item_paragraphs: list[Paragraph] = []
        for para in item.findall("para"):
            _parse(item_paragraphs, para, fmt)
        # Warnings inside list items have no place in a list; drop them.
        list_paragraph.items.extend(
            p
            for p in item_paragraphs
            if len(p) > 0
            and not (p.kind is ParagraphKind.TEXT and p.type is ParagraphType.WARNING)
        )


def _parse_listing(paragraphs: list[Paragraph], node: etree._Element) -> None:
    code = CodeParagraph()
    paragraphs.append(code)
    for codeline in node.findall("codeline"):
        line: list[str] = []
        for highlight in codeline.findall("highlight"):
            for part in iter_content(highlight):
                if isinstance(part, str):
                    line.append(part)
                elif not isinstance(part.tag, str):
                    msg = f"Unexpected code part {_describe(part)}"
                    raise ParserError(msg)
                elif part.tag == "sp":
                    line.append(" ")
                else:
                    line.append(flatten_text(part))
        code.lines.append("".join(line))


def para_to_paragraphs(para: etree._Element | None) -> list[Paragraph]:
    """Convert one ``<para>`` into its non-empty paragraphs."""
    paragraphs: list[Paragraph] = []
    if para is None:
        return paragraphs
    _parse(paragraphs, para, TextRunFormat.NONE)
    return [p for p in paragraphs if len(p) > 0]


def paras_to_paragraphs(paras: Iterable[etree._Element] | None) -> list[Paragraph]:
    if paras is None:
        return []
    return [p for para in paras for p in para_to_paragraphs(para)]


def para_to_paragraph(para: etree._Element | None) -> Paragraph:
    """Return the first paragraph of ``para``, or an empty placeholder."""
    paragraphs = para_to_paragraphs(para)
    return paragraphs[0] if paragraphs else TextParagraph()


def paras_to_paragraph(paras: Iterable[etree._Element] | None) -> Paragraph:
    paragraphs = paras_to_paragraphs(paras)
    return paragraphs[0] if paragraphs else TextParagraph()


def description_paras(node: etree._Element | None) -> list[etree._Element]:
    """Return the ``<para>`` children of a brief/detailed description node."""
    if node is None:
        return []
    return node.findall("para")
