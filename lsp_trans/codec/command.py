from ..editor import types as editor
from ..lsp import types as lsp


def from_command(command: editor.Command) -> lsp.Command:
    return lsp.Command(
        title=command.title,
        command=command.id,
        arguments=command.arguments,
    )


def to_command(command: lsp.Command) -> editor.Command:
    return editor.Command(
        title=command.title,
        id=command.command,
        arguments=command.arguments,
    )
