from ..editor import types as editor
from ..lsp import types as lsp
from .range import from_range, to_range


def from_single_edit_operation(edit: editor.SingleEditOperation) -> lsp.TextEdit:
    return lsp.TextEdit(newText=edit.text or "", range=from_range(edit.range))


def to_single_edit_operation(edit: lsp.TextEdit) -> editor.SingleEditOperation:
    return editor.SingleEditOperation(range=to_range(edit.range), text=edit.newText)
