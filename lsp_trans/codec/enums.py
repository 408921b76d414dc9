from typing import Optional

from pynvim_pp.logging import log

from ..editor.types import InsertTextRule
from ..protocol import Constants, Trans, UnknownCodeError


def from_completion_item_kind(consts: Constants, kind: int) -> int:
    if (lsp_kind := consts.kinds.forward.get(kind)) is None:
        log.warning("%s", f"unknown editor completion kind -- {kind}")
        return consts.kinds.forward[consts.text_kind]
    else:
        return lsp_kind


def to_completion_item_kind(consts: Constants, kind: int) -> int:
    if (editor_kind := consts.kinds.backward.get(kind)) is None:
        log.warning("%s", f"unknown LSP completion kind -- {kind}")
        return consts.text_kind
    else:
        return editor_kind


def from_completion_item_tag(tag: int) -> int:
    return tag


def to_completion_item_tag(tag: int) -> int:
    return tag


def from_marker_tag(tag: int) -> int:
    return tag


def to_marker_tag(tag: int) -> int:
    return tag


def from_code_action_trigger_type(type: int) -> int:
    return type


def to_code_action_trigger_type(type: int) -> int:
    return type


def _forward(trans: Trans, code: int) -> int:
    if (mapped := trans.forward.get(code)) is None:
        raise UnknownCodeError(f"unknown editor {trans.name} -- {code}")
    else:
        return mapped


def _backward(trans: Trans, code: int) -> int:
    if (mapped := trans.backward.get(code)) is None:
        raise UnknownCodeError(f"unknown LSP {trans.name} -- {code}")
    else:
        return mapped


def from_marker_severity(consts: Constants, severity: int) -> int:
    return _forward(consts.severities, code=severity)


def to_marker_severity(consts: Constants, severity: int) -> int:
    return _backward(consts.severities, code=severity)


def from_document_highlight_kind(consts: Constants, kind: int) -> int:
    return _forward(consts.highlights, code=kind)


def to_document_highlight_kind(consts: Constants, kind: int) -> int:
    return _backward(consts.highlights, code=kind)


def from_completion_trigger_kind(consts: Constants, kind: int) -> int:
    return _forward(consts.triggers, code=kind)


def to_completion_trigger_kind(consts: Constants, kind: int) -> int:
    return _backward(consts.triggers, code=kind)


def from_insert_text_rule(consts: Constants, rule: InsertTextRule) -> int:
    return consts.rules[rule]


def to_insert_text_rule(consts: Constants, flags: int) -> Optional[InsertTextRule]:
    for rule, code in consts.rules.items():
        if flags == code:
            return rule
    else:
        return None
