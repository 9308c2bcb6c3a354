"""
Trace Stack - document location tracking for error reporting

Records where a document-processing engine currently is in the source
document, as nested command, content and text frames, and renders that
history into human-readable location strings.

Main features:
- push/pop of command, content and text frames with balance checking
- one-line location info and multi-line location trace
- logging-backed environment with debug categories
"""

# Public API
from .frame_stack import (
    NOWHERE,
    TraceStack,
    get_default_stack,
    set_default_stack,
    trace_stack_to_json,
)
from .types import (
    Frame,
    FrameKind,
    CommandFrame,
    ContentFrame,
    TextFrame,
    GenericFrame,
    Options,
)
from .formatting import frame_to_string, format_trace_head
from .common import COMMAND_STACK, TraceConfig, TraceEnvironment, convert_config
from .interfaces import ContentNode, Environment
from . import examples

__version__ = "1.0.0"

# Exports
__all__ = [
    # Core classes
    "TraceStack",
    "TraceEnvironment",
    "TraceConfig",

    # Frame types
    "Frame",
    "FrameKind",
    "CommandFrame",
    "ContentFrame",
    "TextFrame",
    "GenericFrame",
    "Options",

    # Formatting
    "frame_to_string",
    "format_trace_head",
    "trace_stack_to_json",

    # Protocols
    "ContentNode",
    "Environment",

    # Default instance and constants
    "get_default_stack",
    "set_default_stack",
    "convert_config",
    "COMMAND_STACK",
    "NOWHERE",

    # Example module
    "examples",
]


def get_version() -> str:
    """Return the package version"""
    return __version__
