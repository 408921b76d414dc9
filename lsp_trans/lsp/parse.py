from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from pynvim_pp.logging import log
from std2.pickle.decoder import new_decoder

from .types import (
    CompletionContext,
    CompletionItem,
    CompletionList,
    CompletionResponse,
    Diagnostic,
    ItemDefaults,
)

_EMPTY = CompletionList(isIncomplete=False, items=())


def _falsy(thing: Any) -> bool:
    return thing is None or thing is False or thing == 0 or thing == "" or thing == b""


_item_parser = new_decoder[CompletionItem](CompletionItem, strict=False)
_defaults_parser = new_decoder[Optional[ItemDefaults]](
    Optional[ItemDefaults], strict=False
)
_context_parser = new_decoder[CompletionContext](CompletionContext, strict=False)
_diagnostic_parser = new_decoder[Diagnostic](Diagnostic, strict=False)


def decode_item(item: Any) -> CompletionItem:
    return _item_parser(item)


def decode_defaults(defaults: Any) -> Optional[ItemDefaults]:
    return _defaults_parser(defaults)


def decode_context(context: Any) -> CompletionContext:
    return _context_parser(context)


def decode_diagnostic(diagnostic: Any) -> Diagnostic:
    return _diagnostic_parser(diagnostic)


def decode_response(resp: CompletionResponse) -> CompletionList:
    if _falsy(resp):
        return _EMPTY

    elif isinstance(resp, Mapping):
        is_incomplete = not _falsy(resp.get("isIncomplete"))

        if not isinstance((items := resp.get("items")), Sequence):
            log.warning("%s", f"Unknown LSP resp -- {type(items)}")
            return CompletionList(isIncomplete=is_incomplete, items=())
        else:
            return CompletionList(
                isIncomplete=is_incomplete,
                items=tuple(map(decode_item, items)),
                itemDefaults=decode_defaults(resp.get("itemDefaults")),
            )

    elif isinstance(resp, Sequence) and not isinstance(resp, str):
        return CompletionList(isIncomplete=False, items=tuple(map(decode_item, resp)))

    else:
        log.warning("%s", f"Unknown LSP resp -- {type(resp)}")
        return _EMPTY


def encode(thing: Any) -> Any:
    """
    JSON ready form of the dataclass models, `None` fields are left out
    """

    if is_dataclass(thing) and not isinstance(thing, type):
        return {
            field.name: encode(value)
            for field in fields(thing)
            if (value := getattr(thing, field.name)) is not None
        }
    elif isinstance(thing, Enum):
        return thing.name
    elif isinstance(thing, Mapping):
        return {key: encode(val) for key, val in thing.items()}
    elif isinstance(thing, (str, bytes)):
        return thing
    elif isinstance(thing, Sequence):
        return [encode(val) for val in thing]
    else:
        return thing
