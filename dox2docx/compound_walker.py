"""Logic for building the documentation model from Doxygen group compounds."""

import logging

from lxml import etree

from dox2docx.compound_loader import CompoundDef, CompoundLoader, MemberDef
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
from dox2docx.linked_text import linked_text_to_string
from dox2docx.paragraph_model import Paragraph
from dox2docx.paragraph_transformer import (
    description_paras,
    para_to_paragraph,
    paras_to_paragraph,
    paras_to_paragraphs,
)
from dox2docx.parser_error import ParserError

logger = logging.getLogger(__name__)


def find_root_groups(groups: dict[str, CompoundDef]) -> set[str]:
    """Return the ids of groups that are not an inner group of any other group."""
    roots = set(groups)
    for group in groups.values():
        for inner in group.inner_groups:
            roots.discard(inner.refid)
    return roots


def parse_descriptions(item: CompoundDef | MemberDef) -> Descriptions:
    return Descriptions(
        brief=paras_to_paragraph(description_paras(item.brief)),
        detailed=paras_to_paragraphs(description_paras(item.detailed)),
    )


def parse_return_description(member: MemberDef) -> Paragraph:
    """Return the first paragraph of the member's ``@return`` section."""
    for para in description_paras(member.detailed):
        for sect in para.findall("simplesect"):
            if sect.get("kind") == "return":
                return paras_to_paragraph(sect.findall("para"))
    return paras_to_paragraph(None)


def _is_void(type_node: etree._Element | None) -> bool:
    """True for the type of a C ``(void)`` parameter list."""
    if type_node is None or len(type_node) > 0:
        return False
    return (type_node.text or "").strip() == "void"


def _find_param_doc(member: MemberDef, name: str) -> Paragraph:
    for para in description_paras(member.detailed):
        for plist in para.findall("parameterlist"):
            if plist.get("kind") != "param":
                continue
            for item in plist.findall("parameteritem"):
                names = [
                    "".join(n.itertext())
                    for n in item.findall("parameternamelist/parametername")
                ]
                if name in names:
                    return para_to_paragraph(item.find("parameterdescription/para"))
    return para_to_paragraph(None)


def parse_parameters(member: MemberDef) -> list[Parameter]:
    """Build the parameters of a function or macro, skipping a lone ``void``."""
    parameters = []
    for param in member.params:
        if _is_void(param.type):
            continue
        name = param.declname or param.defname or ""
        parameters.append(
            Parameter(
                name=name,
                type=linked_text_to_string(param.type),
                description=_find_param_doc(member, name),
            )
        )
    return parameters


def parse_variable(member: MemberDef) -> Variable:
    return Variable(
        name=member.name,
        descriptions=parse_descriptions(member),
        type=linked_text_to_string(member.type) or "",
        definition=member.definition or "",
    )


def parse_function(member: MemberDef) -> Function:
    return Function(
        name=member.name,
        descriptions=parse_descriptions(member),
        return_type=linked_text_to_string(member.type) or "",
        return_description=parse_return_description(member),
        definition=member.definition or "",
        args_string=member.argsstring or "",
        parameters=parse_parameters(member),
    )


def parse_macro(member: MemberDef) -> Macro:
    return Macro(
        name=member.name,
        descriptions=parse_descriptions(member),
        initializer=linked_text_to_string(member.initializer) or "",
        return_description=parse_return_description(member),
        parameters=parse_parameters(member),
    )


def parse_typedef(member: MemberDef) -> Typedef:
    return Typedef(
        name=member.name,
        descriptions=parse_descriptions(member),
        type=linked_text_to_string(member.type) or "",
        definition=member.definition or "",
    )


class CompoundWalker:
    """Walks the Doxygen group tree and assembles a ``Project``."""

    def __init__(self, loader: CompoundLoader) -> None:
        self.loader = loader

    def parse(self) -> Project:
        index = self.loader.load_index()
        groups = {
            ref.refid: self.loader.load_compound(ref.refid)
            for ref in index
            if ref.kind == "group"
        }
        roots = find_root_groups(groups)
        logger.info("Found %d groups, %d at the root", len(groups), len(roots))

        project = Project()
        project.groups.extend(
            sorted(
                (self.parse_group(groups, refid) for refid in roots),
                key=lambda g: (g.name.casefold(), g.name),
            )
        )
        return project

    def parse_group(self, groups: dict[str, CompoundDef], refid: str) -> Group:
        compound = groups[refid]
        logger.debug("Parsing group %s (%s)", refid, compound.title)

        group = Group(
            name=compound.title or "",
            descriptions=parse_descriptions(compound),
        )
        for inner in compound.inner_groups:
            if inner.refid not in groups:
                msg = f"Group {refid} references unknown inner group {inner.refid}"
                raise ParserError(msg)
            group.sub_groups.append(self.parse_group(groups, inner.refid))
        group.files.extend(inner.name for inner in compound.inner_files)
        group.classes.extend(
            self.parse_class(inner.refid) for inner in compound.inner_classes
        )

        for member in compound.members:
            if member.kind == "function":
                group.functions.append(parse_function(member))
            elif member.kind == "define":
                group.macros.append(parse_macro(member))
            elif member.kind == "typedef":
                group.typedefs.append(parse_typedef(member))
            elif member.kind == "variable":
                group.global_variables.append(parse_variable(member))

        return group

    def parse_class(self, refid: str) -> Class:
        """Load a struct compound and collect its fields."""
        compound = self.loader.load_compound(refid)
        if compound.kind != "struct":
            msg = f"Don't know how to parse class kind {compound.kind!r} in {refid}"
            raise ParserError(msg)

        return Class(
            name=compound.compound_name or "",
            descriptions=parse_descriptions(compound),
            variables=[
                parse_variable(m) for m in compound.members if m.kind == "variable"
            ],
        )
