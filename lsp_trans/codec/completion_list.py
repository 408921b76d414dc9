from ..editor import types as editor
from ..lsp import types as lsp
from ..protocol import Constants
from .completion import from_completion_item, to_completion_items


def from_completion_list(
    consts: Constants, completion_list: editor.CompletionList
) -> lsp.CompletionList:
    return lsp.CompletionList(
        isIncomplete=bool(completion_list.incomplete),
        items=tuple(
            from_completion_item(consts, item=item)
            for item in completion_list.suggestions
        ),
    )


def to_completion_list(
    consts: Constants,
    completion_list: lsp.CompletionList,
    range: editor.CompletionItemRange,
) -> editor.CompletionList:
    suggestions = to_completion_items(
        consts,
        completion_list.items,
        range=range,
        item_defaults=completion_list.itemDefaults,
    )
    return editor.CompletionList(
        suggestions=suggestions, incomplete=completion_list.isIncomplete
    )
