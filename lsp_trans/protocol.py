from dataclasses import dataclass
from functools import lru_cache
from json import loads
from typing import Any, Iterator, Mapping, Optional, Tuple

from pynvim_pp.logging import log
from std2.cell import RefCell
from std2.pickle.decoder import new_decoder
from std2.pickle.types import DecodeError

from .consts import LSP_ARTIFACTS
from .editor.types import InsertTextRule
from .settings import EnumNamespace, EnumTable, Settings, load


class ConstantsError(ValueError): ...


class UninitializedError(RuntimeError): ...


class UnknownCodeError(ValueError): ...


@dataclass(frozen=True)
class LSProtocol:
    CompletionItemKind: EnumTable
    CompletionTriggerKind: EnumTable
    DiagnosticSeverity: EnumTable
    DocumentHighlightKind: EnumTable
    InsertTextFormat: EnumTable
    InsertTextMode: EnumTable


@dataclass(frozen=True)
class EditorEnums:
    CompletionItemInsertTextRule: EnumTable
    CompletionItemKind: EnumTable
    CompletionTriggerKind: EnumTable
    DocumentHighlightKind: EnumTable
    MarkerSeverity: EnumTable


@dataclass(frozen=True)
class Trans:
    name: str
    forward: Mapping[int, int]
    backward: Mapping[int, int]


@dataclass(frozen=True)
class Constants:
    kinds: Trans
    severities: Trans
    highlights: Trans
    triggers: Trans

    text_kind: int
    error_severity: int
    snippet_format: int
    adjust_mode: int
    rules: Mapping[InsertTextRule, int]


_REQUIRED: Tuple[Tuple[str, str], ...] = (
    ("CompletionItemKind", "Text"),
    ("CompletionItemInsertTextRule", InsertTextRule.InsertAsSnippet.name),
    ("CompletionItemInsertTextRule", InsertTextRule.KeepWhitespace.name),
    ("MarkerSeverity", "Error"),
)


@lru_cache(maxsize=None)
def lsp_protocol() -> LSProtocol:
    raw = loads(LSP_ARTIFACTS.read_text("UTF-8"))
    return new_decoder[LSProtocol](LSProtocol, strict=False)(raw)


def _trans(
    table: str, src: EnumTable, dst: EnumTable, aliases: Mapping[str, str]
) -> Trans:
    def cont() -> Iterator[Tuple[bool, int, int]]:
        for name, code in src.items():
            alias = aliases.get(name, name)
            if (dst_code := dst.get(alias)) is not None:
                yield alias == name, code, dst_code

    pairs = sorted(cont(), key=lambda p: p[0])
    forward = {code: dst_code for _, code, dst_code in pairs}
    # exact name matches are sorted last, so they win the reverse lookup
    backward = {dst_code: code for _, code, dst_code in pairs}
    return Trans(name=table, forward=forward, backward=backward)


def _decode_editor(editor: EnumNamespace) -> EditorEnums:
    try:
        enums = new_decoder[EditorEnums](EditorEnums, strict=False)(editor)
    except DecodeError as e:
        raise ConstantsError(f"incomplete editor enum namespace -- {e}") from e

    for table, member in _REQUIRED:
        if member not in getattr(enums, table):
            raise ConstantsError(f"missing editor constant -- {table}.{member}")

    return enums


def load_constants(
    editor: Optional[EnumNamespace] = None,
    user_config: Optional[Mapping[str, Any]] = None,
) -> Constants:
    settings: Settings = load(user_config)
    enums = _decode_editor(settings.editor if editor is None else editor)
    lsp = lsp_protocol()
    aliases = settings.aliases

    def trans(editor_table: str, lsp_table: str) -> Trans:
        return _trans(
            editor_table,
            getattr(enums, editor_table),
            dst=getattr(lsp, lsp_table),
            aliases=aliases.get(editor_table, {}),
        )

    rules = {
        rule: enums.CompletionItemInsertTextRule[rule.name] for rule in InsertTextRule
    }
    constants = Constants(
        kinds=trans("CompletionItemKind", "CompletionItemKind"),
        severities=trans("MarkerSeverity", "DiagnosticSeverity"),
        highlights=trans("DocumentHighlightKind", "DocumentHighlightKind"),
        triggers=trans("CompletionTriggerKind", "CompletionTriggerKind"),
        text_kind=enums.CompletionItemKind["Text"],
        error_severity=enums.MarkerSeverity["Error"],
        snippet_format=lsp.InsertTextFormat["Snippet"],
        adjust_mode=lsp.InsertTextMode["adjustIndentation"],
        rules=rules,
    )
    return constants


_CELL = RefCell[Optional[Constants]](None)


def set_constants(constants: Constants) -> None:
    msg = "editor constants -- " + ("installed" if _CELL.val is None else "replaced")
    log.debug("%s", msg)
    _CELL.val = constants


def constants() -> Constants:
    if (consts := _CELL.val) is None:
        raise UninitializedError("editor constants not set, call set_constants()")
    else:
        return consts
