"""
Core type definitions

Frame variants recorded on the trace stack. A frame describes one location in
the processed document: a command invocation, a content node being expanded,
or a run of text being typeset.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Union
from enum import Enum

# Keyed options, or array-style positional ones
Options = Union[Dict[str, Any], List[Any]]


class FrameKind(Enum):
    """Frame variant tag"""
    COMMAND = "command"       # explicit command invocation
    CONTENT = "content"       # inferred from a content node
    TEXT = "text"             # text being typeset
    GENERIC = "generic"       # engine-built frame without a dedicated body


@dataclass
class Frame:
    """Location fields shared by every frame variant."""
    file: Optional[str] = None    # source file name
    lno: Optional[int] = None     # line number
    col: Optional[int] = None     # column number
    push_id: Optional[int] = field(default=None, compare=False, repr=False)

    kind = FrameKind.GENERIC

    def location_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "file": self.file,
            "lno": self.lno,
            "col": self.col,
            "pushId": self.push_id,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return self.location_dict()


@dataclass
class CommandFrame(Frame):
    """A command call, with the options it was invoked with."""
    command: Optional[str] = None
    options: Options = field(default_factory=dict)

    kind = FrameKind.COMMAND

    def to_dict(self) -> Dict[str, Any]:
        data = self.location_dict()
        data["command"] = self.command
        data["options"] = dict(self.options) if isinstance(self.options, dict) else list(self.options)
        return data


@dataclass
class ContentFrame(CommandFrame):
    """
    A content node being processed.

    Same shape and rendering as CommandFrame, but command and options are
    inferred from the node and only overridden when the caller says so.
    """

    kind = FrameKind.CONTENT


@dataclass
class TextFrame(Frame):
    """Text run; never carries file/lno/col."""
    text: str = ""

    kind = FrameKind.TEXT

    def to_dict(self) -> Dict[str, Any]:
        data = self.location_dict()
        data["text"] = self.text
        return data


@dataclass
class GenericFrame(Frame):
    """Frame built by the engine itself; extra holds its non-positional fields."""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = self.location_dict()
        data["extra"] = dict(self.extra)
        return data
