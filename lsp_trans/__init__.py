from .api import (
    from_completion_context,
    from_completion_item,
    from_completion_list,
    from_document_highlight,
    from_marker_data,
    to_completion_context,
    to_completion_item,
    to_completion_list,
    to_document_highlight,
    to_marker_data,
)
from .codec.command import from_command, to_command
from .codec.edit import from_single_edit_operation, to_single_edit_operation
from .codec.enums import (
    from_code_action_trigger_type,
    from_completion_item_tag,
    from_insert_text_rule,
    from_marker_tag,
    to_code_action_trigger_type,
    to_completion_item_tag,
    to_insert_text_rule,
    to_marker_tag,
)
from .codec.markdown import from_markdown_string, to_markdown_string
from .codec.range import from_position, from_range, to_position, to_range
from .lsp.parse import (
    decode_context,
    decode_defaults,
    decode_diagnostic,
    decode_item,
    decode_response,
    encode,
)
from .protocol import (
    Constants,
    ConstantsError,
    UninitializedError,
    UnknownCodeError,
    constants,
    load_constants,
    set_constants,
)

__all__ = (
    "Constants",
    "ConstantsError",
    "UninitializedError",
    "UnknownCodeError",
    "constants",
    "decode_context",
    "decode_defaults",
    "decode_diagnostic",
    "decode_item",
    "decode_response",
    "encode",
    "from_code_action_trigger_type",
    "from_command",
    "from_completion_context",
    "from_completion_item",
    "from_completion_item_tag",
    "from_completion_list",
    "from_document_highlight",
    "from_insert_text_rule",
    "from_markdown_string",
    "from_marker_data",
    "from_marker_tag",
    "from_position",
    "from_range",
    "from_single_edit_operation",
    "load_constants",
    "set_constants",
    "to_code_action_trigger_type",
    "to_command",
    "to_completion_context",
    "to_completion_item",
    "to_completion_item_tag",
    "to_completion_list",
    "to_document_highlight",
    "to_insert_text_rule",
    "to_markdown_string",
    "to_marker_data",
    "to_marker_tag",
    "to_position",
    "to_range",
    "to_single_edit_operation",
)
