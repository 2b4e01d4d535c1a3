"""CLI helpers for the fingerbox application.

This package contains the pieces shared by the fingerbox commands:
- output_handlers: Write a layout to one file or to several formats
"""

from fingerbox.cli.commands.output_handlers import (
    handle_multi_format_export,
    handle_single_file_export,
    parse_formats,
)

__all__ = [
    "handle_multi_format_export",
    "handle_single_file_export",
    "parse_formats",
]
