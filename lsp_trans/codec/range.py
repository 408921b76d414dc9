from ..editor import types as editor
from ..lsp import types as lsp


def from_position(position: editor.Position) -> lsp.Position:
    return lsp.Position(line=position.lineNumber, character=position.column)


def to_position(position: lsp.Position) -> editor.Position:
    return editor.Position(lineNumber=position.line, column=position.character)


def from_range(range: editor.Range) -> lsp.Range:
    return lsp.Range(start=from_position(range.start), end=from_position(range.end))


def to_range(range: lsp.Range) -> editor.Range:
    return editor.Range(start=to_position(range.start), end=to_position(range.end))
