from typing import Optional, Sequence, Tuple, TypeVar, Union

from std2.types import never

from ..editor import types as editor
from ..editor.types import InsertTextRule
from ..lsp import types as lsp
from ..protocol import Constants
from .command import from_command, to_command
from .edit import from_single_edit_operation, to_single_edit_operation
from .enums import (
    from_completion_item_kind,
    from_completion_item_tag,
    to_completion_item_kind,
    to_completion_item_tag,
)
from .markdown import from_markdown_string, to_markdown_string
from .range import from_range, to_range

_T = TypeVar("_T")

_ItemEdit = Union[lsp.TextEdit, lsp.InsertReplaceEdit]
_EditRange = Union[lsp.Range, lsp.InsertReplaceRange, lsp.TextEdit]

_EMPTY_DEFAULTS = lsp.ItemDefaults()


def _either(lhs: Optional[_T], rhs: Optional[_T]) -> Optional[_T]:
    return rhs if lhs is None else lhs


def _label(label: Union[str, editor.CompletionItemLabel]) -> str:
    if isinstance(label, str):
        return label
    elif isinstance(label, editor.CompletionItemLabel):
        return label.label
    else:
        never(label)


def _from_completion_range(
    range: editor.CompletionItemRange, new_text: str
) -> _ItemEdit:
    if isinstance(range, editor.InsertReplaceRange):
        return lsp.InsertReplaceEdit(
            newText=new_text,
            insert=from_range(range.insert),
            replace=from_range(range.replace),
        )
    elif isinstance(range, editor.Range):
        return lsp.TextEdit(newText=new_text, range=from_range(range))
    else:
        never(range)


def _to_completion_range(edit: _EditRange) -> editor.CompletionItemRange:
    if isinstance(edit, lsp.TextEdit):
        return to_range(edit.range)
    # also covers `InsertReplaceEdit`
    elif isinstance(edit, lsp.InsertReplaceRange):
        return editor.InsertReplaceRange(
            insert=to_range(edit.insert), replace=to_range(edit.replace)
        )
    elif isinstance(edit, lsp.Range):
        return to_range(edit)
    else:
        never(edit)


def _from_rules(
    consts: Constants, rules: Optional[InsertTextRule]
) -> Tuple[Optional[int], Optional[int]]:
    if rules is None:
        return None, None
    elif rules is InsertTextRule.InsertAsSnippet:
        return consts.snippet_format, None
    elif rules is InsertTextRule.KeepWhitespace:
        return None, consts.adjust_mode
    else:
        never(rules)


def _to_rules(
    consts: Constants, insert_text_format: Optional[int], insert_text_mode: Optional[int]
) -> Optional[InsertTextRule]:
    if insert_text_format == consts.snippet_format:
        return InsertTextRule.InsertAsSnippet
    elif insert_text_mode == consts.adjust_mode:
        return InsertTextRule.KeepWhitespace
    else:
        return None


def _from_documentation(
    doc: Union[str, editor.MarkdownString, None]
) -> Union[str, lsp.MarkupContent, None]:
    if doc is None or isinstance(doc, str):
        return doc
    else:
        return from_markdown_string(doc)


def _to_documentation(
    doc: Union[str, lsp.MarkupContent, None]
) -> Union[str, editor.MarkdownString, None]:
    if doc is None or isinstance(doc, str):
        return doc
    else:
        return to_markdown_string(doc)


def from_completion_item(
    consts: Constants, item: editor.CompletionItem
) -> lsp.CompletionItem:
    insert_text_format, insert_text_mode = _from_rules(consts, rules=item.insertTextRules)
    additional_edits = (
        None
        if item.additionalTextEdits is None
        else tuple(map(from_single_edit_operation, item.additionalTextEdits))
    )
    tags = None if item.tags is None else tuple(map(from_completion_item_tag, item.tags))

    return lsp.CompletionItem(
        label=_label(item.label),
        kind=from_completion_item_kind(consts, kind=item.kind),
        textEdit=_from_completion_range(item.range, new_text=item.insertText),
        additionalTextEdits=additional_edits,
        command=None if item.command is None else from_command(item.command),
        commitCharacters=item.commitCharacters,
        detail=item.detail,
        documentation=_from_documentation(item.documentation),
        filterText=item.filterText,
        insertTextFormat=insert_text_format,
        insertTextMode=insert_text_mode,
        preselect=item.preselect,
        sortText=item.sortText,
        tags=tags,
    )


def to_completion_item(
    consts: Constants,
    item: lsp.CompletionItem,
    range: editor.CompletionItemRange,
    item_defaults: Optional[lsp.ItemDefaults] = None,
) -> editor.CompletionItem:
    """
    Range and text come from the first of:

    item `textEdit` -> list `itemDefaults.editRange` -> `range`

    Only `textEdit` carries its own text, otherwise `insertText` is used.
    """

    defaults = item_defaults or _EMPTY_DEFAULTS
    commit_characters = _either(item.commitCharacters, defaults.commitCharacters)
    insert_text_format = _either(item.insertTextFormat, defaults.insertTextFormat)
    insert_text_mode = _either(item.insertTextMode, defaults.insertTextMode)

    if (text_edit := item.textEdit) is not None:
        edit_range = _to_completion_range(text_edit)
        text: Optional[str] = text_edit.newText
    elif (default_range := defaults.editRange) is not None:
        edit_range = _to_completion_range(default_range)
        text = item.insertText
    else:
        edit_range = range
        text = item.insertText

    kind = (
        consts.text_kind
        if item.kind is None
        else to_completion_item_kind(consts, kind=item.kind)
    )
    additional_edits = (
        None
        if item.additionalTextEdits is None
        else tuple(map(to_single_edit_operation, item.additionalTextEdits))
    )
    tags = None if item.tags is None else tuple(map(to_completion_item_tag, item.tags))

    return editor.CompletionItem(
        label=item.label,
        kind=kind,
        insertText=text or "",
        range=edit_range,
        additionalTextEdits=additional_edits,
        command=None if item.command is None else to_command(item.command),
        commitCharacters=commit_characters,
        detail=item.detail,
        documentation=_to_documentation(item.documentation),
        filterText=item.filterText,
        insertTextRules=_to_rules(
            consts,
            insert_text_format=insert_text_format,
            insert_text_mode=insert_text_mode,
        ),
        preselect=item.preselect,
        sortText=item.sortText,
        tags=tags,
    )


def to_completion_items(
    consts: Constants,
    items: Sequence[lsp.CompletionItem],
    range: editor.CompletionItemRange,
    item_defaults: Optional[lsp.ItemDefaults] = None,
) -> Sequence[editor.CompletionItem]:
    return tuple(
        to_completion_item(consts, item, range=range, item_defaults=item_defaults)
        for item in items
    )
