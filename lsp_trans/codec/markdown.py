from re import compile

from ..editor import types as editor
from ..lsp import types as lsp

MARKDOWN = "markdown"
PLAINTEXT = "plaintext"

_MD_SPECIAL = compile(r"[\\`*_{}\[\]()#+\-!~]")


def escape(text: str) -> str:
    return _MD_SPECIAL.sub(lambda m: "\\" + m.group(), text)


def from_markdown_string(markdown: editor.MarkdownString) -> lsp.MarkupContent:
    return lsp.MarkupContent(kind=MARKDOWN, value=markdown.value)


def to_markdown_string(content: lsp.MarkupContent) -> editor.MarkdownString:
    if content.kind == PLAINTEXT:
        return editor.MarkdownString(value=escape(content.value))
    else:
        return editor.MarkdownString(value=content.value)
