from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Sequence, Union

# Editor side model, field names follow the host editor's API.
# Lines and columns are zero based, same as the protocol.


@dataclass(frozen=True)
class Position:
    lineNumber: int
    column: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position


@dataclass(frozen=True)
class InsertReplaceRange:
    insert: Range
    replace: Range


CompletionItemRange = Union[Range, InsertReplaceRange]


@dataclass(frozen=True)
class Command:
    id: str
    title: str
    arguments: Optional[Sequence[Any]] = None


@dataclass(frozen=True)
class SingleEditOperation:
    range: Range
    text: Optional[str]
    forceMoveMarkers: Optional[bool] = None


@dataclass(frozen=True)
class MarkdownString:
    value: str
    isTrusted: Optional[bool] = None
    supportThemeIcons: Optional[bool] = None
    supportHtml: Optional[bool] = None


@dataclass(frozen=True)
class CompletionItemLabel:
    label: str
    detail: Optional[str] = None
    description: Optional[str] = None


class InsertTextRule(Enum):
    KeepWhitespace = auto()
    InsertAsSnippet = auto()


@dataclass(frozen=True)
class CompletionItem:
    label: Union[str, CompletionItemLabel]
    kind: int
    insertText: str
    range: CompletionItemRange

    additionalTextEdits: Optional[Sequence[SingleEditOperation]] = None
    command: Optional[Command] = None
    commitCharacters: Optional[Sequence[str]] = None
    detail: Optional[str] = None
    documentation: Union[str, MarkdownString, None] = None
    filterText: Optional[str] = None
    insertTextRules: Optional[InsertTextRule] = None
    preselect: Optional[bool] = None
    sortText: Optional[str] = None
    tags: Optional[Sequence[int]] = None


@dataclass(frozen=True)
class CompletionList:
    suggestions: Sequence[CompletionItem]
    incomplete: Optional[bool] = None


@dataclass(frozen=True)
class CompletionContext:
    triggerKind: int
    triggerCharacter: Optional[str] = None


@dataclass(frozen=True)
class MarkerCode:
    value: str
    target: str


@dataclass(frozen=True)
class RelatedInformation:
    resource: str
    message: str
    range: Range


@dataclass(frozen=True)
class MarkerData:
    severity: int
    message: str
    range: Range

    code: Union[str, MarkerCode, None] = None
    source: Optional[str] = None
    tags: Optional[Sequence[int]] = None
    relatedInformation: Optional[Sequence[RelatedInformation]] = None


@dataclass(frozen=True)
class DocumentHighlight:
    range: Range
    kind: Optional[int] = None
