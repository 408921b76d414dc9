from ..editor import types as editor
from ..lsp import types as lsp
from ..protocol import Constants
from .enums import from_document_highlight_kind, to_document_highlight_kind
from .range import from_range, to_range


def from_document_highlight(
    consts: Constants, highlight: editor.DocumentHighlight
) -> lsp.DocumentHighlight:
    kind = (
        None
        if highlight.kind is None
        else from_document_highlight_kind(consts, kind=highlight.kind)
    )
    return lsp.DocumentHighlight(range=from_range(highlight.range), kind=kind)


def to_document_highlight(
    consts: Constants, highlight: lsp.DocumentHighlight
) -> editor.DocumentHighlight:
    kind = (
        None
        if highlight.kind is None
        else to_document_highlight_kind(consts, kind=highlight.kind)
    )
    return editor.DocumentHighlight(range=to_range(highlight.range), kind=kind)
