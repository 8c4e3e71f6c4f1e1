"""Tool invocation exports."""

from .listing_texts import COMMANDS_LISTING, OPERATIONS_LISTING
from .operation_dispatch import (
    CSV_DATA_ARGUMENT,
    GENERATE_VISUAL_TESTS,
    LIST_COMMANDS,
    LIST_TOOLS,
    MissingArgumentError,
    ToolResult,
    UnknownOperationError,
    invoke,
    operation_names,
    text_result,
)

__all__ = [
    "COMMANDS_LISTING",
    "CSV_DATA_ARGUMENT",
    "GENERATE_VISUAL_TESTS",
    "LIST_COMMANDS",
    "LIST_TOOLS",
    "OPERATIONS_LISTING",
    "MissingArgumentError",
    "ToolResult",
    "UnknownOperationError",
    "invoke",
    "operation_names",
    "text_result",
]
