"""Named-operation boundary returning structured text results."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from ui_test_gen.configuration.runtime_settings import GeneratorSettings
from ui_test_gen.generation_run import GenerationRequest, execute_visual_test_generation

from .listing_texts import COMMANDS_LISTING, OPERATIONS_LISTING

GENERATE_VISUAL_TESTS = "generateVisualTests"
LIST_TOOLS = "listTools"
LIST_COMMANDS = "listCommands"

CSV_DATA_ARGUMENT = "csvData"

ToolResult = dict[str, list[dict[str, str]]]
_Handler = Callable[[Mapping[str, Any], GeneratorSettings], str]

logger = logging.getLogger(__name__)


class MissingArgumentError(Exception):
    """Raised when a required operation argument is absent."""


class UnknownOperationError(Exception):
    """Raised when no operation is registered under the requested name."""


def invoke(
    name: str,
    args: Mapping[str, Any] | None = None,
    *,
    settings: GeneratorSettings | None = None,
) -> ToolResult:
    """Run the named operation and wrap its text in a content envelope."""
    handler = _HANDLERS.get(name)
    if handler is None:
        known = ", ".join(_HANDLERS)
        raise UnknownOperationError(f"Unknown operation '{name}'. Known operations: {known}.")
    logger.debug("Invoking operation %s.", name)
    text = handler(args or {}, settings or GeneratorSettings())
    return text_result(text)


def text_result(text: str) -> ToolResult:
    return {"content": [{"type": "text", "text": text}]}


def operation_names() -> tuple[str, ...]:
    return tuple(_HANDLERS)


def _generate_visual_tests(args: Mapping[str, Any], settings: GeneratorSettings) -> str:
    csv_data = args.get(CSV_DATA_ARGUMENT)
    if not isinstance(csv_data, str) or not csv_data:
        raise MissingArgumentError(f"{CSV_DATA_ARGUMENT} parameter is required")
    outcome = execute_visual_test_generation(GenerationRequest(csv_data=csv_data, settings=settings))
    return outcome.text


def _list_tools(_args: Mapping[str, Any], _settings: GeneratorSettings) -> str:
    return OPERATIONS_LISTING


def _list_commands(_args: Mapping[str, Any], _settings: GeneratorSettings) -> str:
    return COMMANDS_LISTING


_HANDLERS: dict[str, _Handler] = {
    GENERATE_VISUAL_TESTS: _generate_visual_tests,
    LIST_TOOLS: _list_tools,
    LIST_COMMANDS: _list_commands,
}
