from dataclasses import dataclass
from typing import Any, Literal, Optional, Sequence, TypedDict, Union

# https://microsoft.github.io/language-server-protocol/specification


@dataclass(frozen=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position


@dataclass(frozen=True)
class InsertReplaceRange:
    insert: Range
    replace: Range


@dataclass(frozen=True)
class _TextEdit:
    newText: str


@dataclass(frozen=True)
class TextEdit(_TextEdit):
    range: Range


@dataclass(frozen=True)
class InsertReplaceEdit(_TextEdit, InsertReplaceRange):
    ...


@dataclass(frozen=True)
class Command:
    title: str
    command: str
    arguments: Optional[Sequence[Any]] = None


@dataclass(frozen=True)
class MarkupContent:
    kind: Union[Literal["plaintext", "markdown"], str]
    value: str


@dataclass(frozen=True)
class CompletionItemLabelDetails:
    detail: Optional[str] = None
    description: Optional[str] = None


_CompletionItemKind = int
_CompletionItemTag = int
_InsertTextFormat = int
_InsertTextMode = int


@dataclass(frozen=True)
class CompletionItem:
    label: str
    labelDetails: Optional[CompletionItemLabelDetails] = None

    kind: Optional[_CompletionItemKind] = None
    tags: Optional[Sequence[_CompletionItemTag]] = None

    detail: Optional[str] = None
    documentation: Union[str, MarkupContent, None] = None

    preselect: Optional[bool] = None
    sortText: Optional[str] = None
    filterText: Optional[str] = None

    insertText: Optional[str] = None
    insertTextFormat: Optional[_InsertTextFormat] = None
    insertTextMode: Optional[_InsertTextMode] = None

    textEdit: Union[TextEdit, InsertReplaceEdit, None] = None
    additionalTextEdits: Optional[Sequence[TextEdit]] = None

    commitCharacters: Optional[Sequence[str]] = None
    command: Optional[Command] = None
    data: Optional[Any] = None


@dataclass(frozen=True)
class ItemDefaults:
    commitCharacters: Optional[Sequence[str]] = None
    editRange: Union[Range, InsertReplaceRange, None] = None
    insertTextFormat: Optional[_InsertTextFormat] = None
    insertTextMode: Optional[_InsertTextMode] = None
    data: Optional[Any] = None


@dataclass(frozen=True)
class CompletionList:
    isIncomplete: bool
    items: Sequence[CompletionItem]
    itemDefaults: Optional[ItemDefaults] = None


class _CompletionList(TypedDict):
    isIncomplete: bool
    items: Sequence[Any]
    itemDefaults: Optional[Any]


CompletionResponse = Union[Literal[None, False, 0], Sequence[Any], _CompletionList]


@dataclass(frozen=True)
class CompletionContext:
    triggerKind: int
    triggerCharacter: Optional[str] = None


@dataclass(frozen=True)
class Location:
    uri: str
    range: Range


@dataclass(frozen=True)
class DiagnosticRelatedInformation:
    location: Location
    message: str


@dataclass(frozen=True)
class CodeDescription:
    href: str


@dataclass(frozen=True)
class Diagnostic:
    range: Range
    message: str

    severity: Optional[int] = None
    code: Union[int, str, None] = None
    codeDescription: Optional[CodeDescription] = None
    source: Optional[str] = None
    tags: Optional[Sequence[int]] = None
    relatedInformation: Optional[Sequence[DiagnosticRelatedInformation]] = None
    data: Optional[Any] = None


@dataclass(frozen=True)
class DocumentHighlight:
    range: Range
    kind: Optional[int] = None
