"""Data models for the documentation tree built from Doxygen groups."""

from dataclasses import dataclass, field

from dox2docx.paragraph_model import Paragraph, TextParagraph


@dataclass
class Descriptions:
    """Brief and detailed descriptions of a documented entity."""

    brief: Paragraph = field(default_factory=TextParagraph)
    detailed: list[Paragraph] = field(default_factory=list)


@dataclass
class Parameter:
    name: str
    type: str | None = None
    description: Paragraph = field(default_factory=TextParagraph)


@dataclass
class Function:
    name: str
    descriptions: Descriptions
    return_type: str = ""
    return_description: Paragraph = field(default_factory=TextParagraph)
    definition: str = ""
    args_string: str = ""
    parameters: list[Parameter] = field(default_factory=list)


@dataclass
class Macro:
    name: str
    descriptions: Descriptions
    initializer: str = ""
    return_description: Paragraph = field(default_factory=TextParagraph)
    parameters: list[Parameter] = field(default_factory=list)


@dataclass
class Typedef:
    name: str
    descriptions: Descriptions
    type: str = ""
    definition: str = ""


@dataclass
class Variable:
    name: str
    descriptions: Descriptions
    type: str = ""
    definition: str = ""


@dataclass
class Class:
    """A documented struct and its fields."""

    name: str
    descriptions: Descriptions
    variables: list[Variable] = field(default_factory=list)


@dataclass
class Group:
    """A Doxygen group (module) and everything documented inside it."""

    name: str
    descriptions: Descriptions
    sub_groups: list["Group"] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    classes: list[Class] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)
    macros: list[Macro] = field(default_factory=list)
    typedefs: list[Typedef] = field(default_factory=list)
    global_variables: list[Variable] = field(default_factory=list)


@dataclass
class Project:
    groups: list[Group] = field(default_factory=list)  # root groups, ordered by name
