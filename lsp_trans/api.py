from typing import Optional

from .codec import completion, completion_list, context, highlight, marker
from .editor import types as editor
from .lsp import types as lsp
from .protocol import constants

# Same as `codec.*`, using the constants installed by `set_constants`


def from_completion_item(item: editor.CompletionItem) -> lsp.CompletionItem:
    return completion.from_completion_item(constants(), item=item)


def to_completion_item(
    item: lsp.CompletionItem,
    range: editor.CompletionItemRange,
    item_defaults: Optional[lsp.ItemDefaults] = None,
) -> editor.CompletionItem:
    return completion.to_completion_item(
        constants(), item, range=range, item_defaults=item_defaults
    )


def from_completion_list(comps: editor.CompletionList) -> lsp.CompletionList:
    return completion_list.from_completion_list(constants(), completion_list=comps)


def to_completion_list(
    comps: lsp.CompletionList, range: editor.CompletionItemRange
) -> editor.CompletionList:
    return completion_list.to_completion_list(
        constants(), completion_list=comps, range=range
    )


def from_completion_context(ctx: editor.CompletionContext) -> lsp.CompletionContext:
    return context.from_completion_context(constants(), context=ctx)


def to_completion_context(ctx: lsp.CompletionContext) -> editor.CompletionContext:
    return context.to_completion_context(constants(), context=ctx)


def from_marker_data(data: editor.MarkerData) -> lsp.Diagnostic:
    return marker.from_marker_data(constants(), marker=data)


def to_marker_data(diagnostic: lsp.Diagnostic) -> editor.MarkerData:
    return marker.to_marker_data(constants(), diagnostic=diagnostic)


def from_document_highlight(hl: editor.DocumentHighlight) -> lsp.DocumentHighlight:
    return highlight.from_document_highlight(constants(), highlight=hl)


def to_document_highlight(hl: lsp.DocumentHighlight) -> editor.DocumentHighlight:
    return highlight.to_document_highlight(constants(), highlight=hl)
