"""Logic for flattening Doxygen linked text (types, initializers) to plain strings."""

from lxml import etree

from dox2docx.parser_error import ParserError


def linked_text_fragments(node: etree._Element) -> list[str]:
    """Return the text and reference fragments of a linked-text node in order."""
    parts = [node.text]
    for child in node:
        if not isinstance(child.tag, str) or child.tag != "ref":
            msg = f"Unknown element in linked text: {child.tag!r} ({type(child).__name__})"
            raise ParserError(msg)
        parts.append("".join(child.itertext()))
        parts.append(child.tail)
    # Surrounding whitespace is not kept; joining adds exactly one space.
    return [p.strip() for p in parts if p and p.strip()]


def linked_text_to_string(node: etree._Element | None) -> str | None:
    """Join a linked-text node into a single display string, dropping links."""
    if node is None:
        return None
    return " ".join(linked_text_fragments(node))
