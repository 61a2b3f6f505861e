"""Logic for loading Doxygen XML index and compound files into typed records.

Only the structure the walker needs is lifted into dataclasses. Description
bodies and linked-text nodes are kept as ``lxml`` elements, since their mixed
content is walked by the paragraph transformer.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from lxml import etree

from dox2docx.parser_error import ParserError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompoundRef:
    """An entry of ``index.xml``."""

    refid: str
    kind: str
    name: str


@dataclass(frozen=True)
class InnerRef:
    """A reference from a compound to a nested group, class or file."""

    refid: str
    name: str


@dataclass
class ParamDef:
    type: etree._Element | None
    declname: str | None
    defname: str | None


@dataclass
class MemberDef:
    id: str
    kind: str
    name: str
    definition: str | None = None
    argsstring: str | None = None
    type: etree._Element | None = None
    initializer: etree._Element | None = None
    params: list[ParamDef] = field(default_factory=list)
    brief: etree._Element | None = None
    detailed: etree._Element | None = None


@dataclass
class CompoundDef:
    id: str
    kind: str
    compound_name: str | None = None
    title: str | None = None
    brief: etree._Element | None = None
    detailed: etree._Element | None = None
    inner_groups: list[InnerRef] = field(default_factory=list)
    inner_classes: list[InnerRef] = field(default_factory=list)
    inner_files: list[InnerRef] = field(default_factory=list)
    members: list[MemberDef] = field(default_factory=list)


class ParserCache:
    """Holds one XML parser per document type so each is built only once."""

    def __init__(self) -> None:
        self._parsers: dict[str, etree.XMLParser] = {}

    def get(self, doc_type: str) -> etree.XMLParser:
        parser = self._parsers.get(doc_type)
        if parser is None:
            # Whitespace between inline elements is significant in descriptions.
            parser = etree.XMLParser(
                remove_blank_text=False,
                resolve_entities=False,
                no_network=True,
                huge_tree=True,
            )
            self._parsers[doc_type] = parser
        return parser


def _text(el: etree._Element | None) -> str | None:
    if el is None:
        return None
    return "".join(el.itertext())


def _inner_refs(compound: etree._Element, tag: str) -> list[InnerRef]:
    return [
        InnerRef(refid=str(el.get("refid", "")), name=_text(el) or "")
        for el in compound.findall(tag)
    ]


def _read_param(el: etree._Element) -> ParamDef:
    return ParamDef(
        type=el.find("type"),
        declname=_text(el.find("declname")),
        defname=_text(el.find("defname")),
    )


def _read_member(el: etree._Element) -> MemberDef:
    return MemberDef(
        id=str(el.get("id", "")),
        kind=str(el.get("kind", "")),
        name=_text(el.find("name")) or "",
        definition=_text(el.find("definition")),
        argsstring=_text(el.find("argsstring")),
        type=el.find("type"),
        initializer=el.find("initializer"),
        params=[_read_param(p) for p in el.findall("param")],
        brief=el.find("briefdescription"),
        detailed=el.find("detaileddescription"),
    )


def _read_compound(el: etree._Element) -> CompoundDef:
    return CompoundDef(
        id=str(el.get("id", "")),
        kind=str(el.get("kind", "")),
        compound_name=_text(el.find("compoundname")),
        title=_text(el.find("title")),
        brief=el.find("briefdescription"),
        detailed=el.find("detaileddescription"),
        inner_groups=_inner_refs(el, "innergroup"),
        inner_classes=_inner_refs(el, "innerclass"),
        inner_files=_inner_refs(el, "innerfile"),
        members=[
            _read_member(m)
            for section in el.iter("sectiondef")
            for m in section.findall("memberdef")
        ],
    )


class CompoundLoader:
    """Reads ``index.xml`` and ``<refid>.xml`` files from a Doxygen XML directory."""

    def __init__(self, base_dir: Path, parser_cache: ParserCache | None = None) -> None:
        self.base_dir = Path(base_dir)
        self.parser_cache = parser_cache or ParserCache()

    def _parse_file(self, path: Path, doc_type: str) -> etree._Element:
        logger.debug("Loading %s", path)
        try:
            with path.open("rb") as f:
                tree = etree.parse(f, self.parser_cache.get(doc_type))
        except OSError as e:
            msg = f"Could not read {path}: {e}"
            raise ParserError(msg) from e
        except etree.XMLSyntaxError as e:
            msg = f"Malformed XML in {path}: {e}"
            raise ParserError(msg) from e
        return tree.getroot()

    def load_index(self) -> list[CompoundRef]:
        """Load the list of compounds from ``index.xml``."""
        root = self._parse_file(self.base_dir / "index.xml", "index")
        return [
            CompoundRef(
                refid=str(el.get("refid", "")),
                kind=str(el.get("kind", "")),
                name=_text(el.find("name")) or "",
            )
            for el in root.findall("compound")
        ]

    def load_compound(self, refid: str) -> CompoundDef:
        """Load the single compound definition stored in ``<refid>.xml``."""
        path = self.base_dir / f"{refid}.xml"
        root = self._parse_file(path, "compound")
        compounds = root.findall("compounddef")
        if len(compounds) != 1:
            msg = f"File {path}: expected 1 compounddef, got {len(compounds)}"
            raise ParserError(msg)
        return _read_compound(compounds[0])
