"""Output renderers for command results.

Provides the OutputWriter abstraction, console and JSON implementations, and
a factory building writers from configuration.
"""

from __future__ import annotations

from TermMatch.config import AppConfig
from TermMatch.renderers.base import EMPTY_TEXT, MultiOutputWriter, OutputWriter
from TermMatch.renderers.console import ConsoleOutputWriter, render_text
from TermMatch.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        A MultiOutputWriter over every configured format.

    Raises:
        ValueError: If no writer is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "EMPTY_TEXT",
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
