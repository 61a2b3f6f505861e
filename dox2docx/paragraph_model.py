"""Data models for rendered paragraphs and text runs."""

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import ClassVar


class TextRunFormat(IntFlag):
    """Character formatting carried by a run. Flags combine."""

    NONE = 0
    BOLD = 1
    ITALIC = 2
    MONOSPACE = 4


class ParagraphType(Enum):
    NORMAL = "normal"
    WARNING = "warning"


class ListParagraphType(Enum):
    BULLET = "bullet"
    NUMBER = "number"


class ParagraphKind(Enum):
    """Tag the renderer switches on."""

    TEXT = "text"
    LIST = "list"
    CODE = "code"


@dataclass
class TextRun:
    """A piece of literal text with a single format."""

    text: str
    format: TextRunFormat = TextRunFormat.NONE


@dataclass
class TextParagraph:
    kind: ClassVar[ParagraphKind] = ParagraphKind.TEXT
    type: ParagraphType = ParagraphType.NORMAL
    runs: list[TextRun] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.runs)

    def add(self, run: TextRun) -> None:
        self.runs.append(run)


@dataclass
class ListParagraph:
    """A bulleted or numbered list; each entry in ``items`` is one paragraph."""

    kind: ClassVar[ParagraphKind] = ParagraphKind.LIST
    type: ListParagraphType = ListParagraphType.BULLET
    items: list["Paragraph"] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class CodeParagraph:
    kind: ClassVar[ParagraphKind] = ParagraphKind.CODE
    lines: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)


Paragraph = TextParagraph | ListParagraph | CodeParagraph
