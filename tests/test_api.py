from unittest import TestCase

from lsp_trans import (
    UninitializedError,
    constants,
    decode_context,
    decode_defaults,
    decode_diagnostic,
    from_completion_item,
    from_insert_text_rule,
    load_constants,
    set_constants,
    to_completion_item,
    to_insert_text_rule,
)
from lsp_trans.editor import types as editor
from lsp_trans.editor.types import InsertTextRule
from lsp_trans.lsp import types as lsp
from lsp_trans.protocol import _CELL

_RANGE = editor.Range(
    start=editor.Position(lineNumber=0, column=0),
    end=editor.Position(lineNumber=0, column=2),
)


class Constants(TestCase):
    def setUp(self) -> None:
        self._prev = _CELL.val
        _CELL.val = None

    def tearDown(self) -> None:
        _CELL.val = self._prev

    def test_uninitialized(self) -> None:
        with self.assertRaises(UninitializedError):
            constants()
        with self.assertRaises(UninitializedError):
            to_completion_item(lsp.CompletionItem(label="a"), range=_RANGE)

    def test_installed(self) -> None:
        consts = load_constants()
        set_constants(consts)

        self.assertIs(constants(), consts)

        item = editor.CompletionItem(label="ab", kind=0, insertText="ab", range=_RANGE)
        proto = from_completion_item(item)
        self.assertEqual(proto.kind, 2)
        self.assertEqual(to_completion_item(proto, range=_RANGE), item)


class Exports(TestCase):
    def test_insert_text_rule(self) -> None:
        consts = load_constants()
        code = from_insert_text_rule(consts, rule=InsertTextRule.KeepWhitespace)
        self.assertIs(to_insert_text_rule(consts, flags=code), InsertTextRule.KeepWhitespace)

    def test_decoders(self) -> None:
        raw_range = {
            "start": {"line": 0, "character": 0},
            "end": {"line": 0, "character": 2},
        }
        defaults = decode_defaults({"editRange": raw_range, "insertTextFormat": 2})
        context = decode_context({"triggerKind": 2, "triggerCharacter": "."})
        diagnostic = decode_diagnostic({"range": raw_range, "message": "m"})

        self.assertIsInstance(defaults, lsp.ItemDefaults)
        self.assertIsInstance(defaults.editRange, lsp.Range)
        self.assertEqual(context, lsp.CompletionContext(triggerKind=2, triggerCharacter="."))
        self.assertEqual(diagnostic.message, "m")
        self.assertIsNone(diagnostic.severity)
