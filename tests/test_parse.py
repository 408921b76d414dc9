from unittest import TestCase

from std2.pickle.types import DecodeError

from lsp_trans.editor import types as editor
from lsp_trans.editor.types import InsertTextRule
from lsp_trans.lsp import types as lsp
from lsp_trans.lsp.parse import decode_diagnostic, decode_item, decode_response, encode

_RANGE = {
    "start": {"line": 0, "character": 1},
    "end": {"line": 0, "character": 3},
}


class DecodeItem(TestCase):
    def test_text_edit(self) -> None:
        item = decode_item(
            {"label": "a", "kind": 3, "textEdit": {"newText": "b", "range": _RANGE}}
        )
        self.assertIsInstance(item.textEdit, lsp.TextEdit)
        self.assertEqual(item.kind, 3)

    def test_insert_replace_edit(self) -> None:
        item = decode_item(
            {
                "label": "a",
                "textEdit": {"newText": "b", "insert": _RANGE, "replace": _RANGE},
            }
        )
        self.assertIsInstance(item.textEdit, lsp.InsertReplaceEdit)

    def test_markup(self) -> None:
        item = decode_item(
            {"label": "a", "documentation": {"kind": "markdown", "value": "v"}}
        )
        self.assertEqual(
            item.documentation, lsp.MarkupContent(kind="markdown", value="v")
        )

    def test_unknown_fields(self) -> None:
        item = decode_item({"label": "a", "score": 0.5})
        self.assertEqual(item.label, "a")
        self.assertIsNone(item.textEdit)

    def test_malformed_edit(self) -> None:
        with self.assertRaises(DecodeError):
            decode_item({"label": "a", "textEdit": {"newText": "b"}})


class DecodeResponse(TestCase):
    def test_falsy(self) -> None:
        for resp in (None, False, 0):
            comps = decode_response(resp)
            self.assertIs(comps.isIncomplete, False)
            self.assertEqual(len(comps.items), 0)

    def test_sequence(self) -> None:
        comps = decode_response([{"label": "a"}, {"label": "b"}])
        self.assertIs(comps.isIncomplete, False)
        self.assertEqual([item.label for item in comps.items], ["a", "b"])
        self.assertIsNone(comps.itemDefaults)

    def test_list(self) -> None:
        comps = decode_response(
            {
                "isIncomplete": True,
                "items": [{"label": "a"}],
                "itemDefaults": {
                    "editRange": {"insert": _RANGE, "replace": _RANGE},
                    "insertTextFormat": 2,
                },
            }
        )
        self.assertIs(comps.isIncomplete, True)
        assert comps.itemDefaults
        self.assertIsInstance(comps.itemDefaults.editRange, lsp.InsertReplaceRange)
        self.assertEqual(comps.itemDefaults.insertTextFormat, 2)
        self.assertIsNone(comps.itemDefaults.commitCharacters)

    def test_range_default(self) -> None:
        comps = decode_response(
            {"isIncomplete": False, "items": [], "itemDefaults": {"editRange": _RANGE}}
        )
        assert comps.itemDefaults
        self.assertIsInstance(comps.itemDefaults.editRange, lsp.Range)


class DecodeDiagnostic(TestCase):
    def test_diagnostic(self) -> None:
        diagnostic = decode_diagnostic(
            {"range": _RANGE, "message": "m", "code": 7, "severity": 2}
        )
        self.assertEqual(diagnostic.code, 7)
        self.assertIsNone(diagnostic.codeDescription)


class Encode(TestCase):
    def test_omits_none(self) -> None:
        item = lsp.CompletionItem(
            label="a",
            textEdit=lsp.TextEdit(
                newText="b",
                range=lsp.Range(
                    start=lsp.Position(line=0, character=1),
                    end=lsp.Position(line=0, character=3),
                ),
            ),
            command=lsp.Command(title="t", command="c", arguments=(None,)),
        )
        self.assertEqual(
            encode(item),
            {
                "label": "a",
                "textEdit": {"newText": "b", "range": _RANGE},
                "command": {"title": "t", "command": "c", "arguments": [None]},
            },
        )

    def test_enum(self) -> None:
        item = editor.CompletionItem(
            label="a",
            kind=0,
            insertText="a",
            range=editor.Range(
                start=editor.Position(lineNumber=0, column=0),
                end=editor.Position(lineNumber=0, column=0),
            ),
            insertTextRules=InsertTextRule.KeepWhitespace,
        )
        self.assertEqual(encode(item)["insertTextRules"], "KeepWhitespace")
