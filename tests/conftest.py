"""Fixtures for building small Doxygen XML output directories."""

from collections.abc import Callable
from pathlib import Path

import pytest

XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'


def index_xml(*compounds: tuple[str, str, str]) -> str:
    """Build ``index.xml`` from (refid, kind, name) triples."""
    entries = "".join(
        f'<compound refid="{refid}" kind="{kind}"><name>{name}</name></compound>'
        for refid, kind, name in compounds
    )
    return f'<doxygenindex version="1.9.8">{entries}</doxygenindex>'


def compound_xml(
    refid: str,
    kind: str,
    *,
    name: str = "",
    title: str | None = None,
    body: str = "",
    members: str = "",
) -> str:
    """Build a compound file with one ``compounddef``."""
    title_el = f"<title>{title}</title>" if title is not None else ""
    section = f'<sectiondef kind="func">{members}</sectiondef>' if members else ""
    return (
        '<doxygen version="1.9.8">'
        f'<compounddef id="{refid}" kind="{kind}">'
        f"<compoundname>{name or refid}</compoundname>{title_el}{body}{section}"
        "</compounddef></doxygen>"
    )


@pytest.fixture
def write_xml(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write an XML file into the temporary Doxygen output directory."""

    def write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(XML_HEADER + content, encoding="utf-8")
        return path

    return write
