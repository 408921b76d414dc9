from ..editor import types as editor
from ..lsp import types as lsp
from ..protocol import Constants
from .enums import from_completion_trigger_kind, to_completion_trigger_kind


def from_completion_context(
    consts: Constants, context: editor.CompletionContext
) -> lsp.CompletionContext:
    return lsp.CompletionContext(
        triggerKind=from_completion_trigger_kind(consts, kind=context.triggerKind),
        triggerCharacter=context.triggerCharacter,
    )


def to_completion_context(
    consts: Constants, context: lsp.CompletionContext
) -> editor.CompletionContext:
    return editor.CompletionContext(
        triggerKind=to_completion_trigger_kind(consts, kind=context.triggerKind),
        triggerCharacter=context.triggerCharacter,
    )
