"""Frame rendering and location head construction."""

from __future__ import annotations

from typing import Optional, Sequence

from .types import CommandFrame, Frame, GenericFrame, Options, TextFrame

# Text runs longer than TEXT_LIMIT are cut to TEXT_KEEP characters.
TEXT_LIMIT = 20
TEXT_KEEP = 18
ELLIPSIS = "…"

CONTROL_GLYPHS = {
    "\n": "␤",
    "\t": "␉",
    "\v": "␋",
}


def format_options(options: Options) -> str:
    if not options:
        return ""
    if not isinstance(options, dict):
        return "[" + ", ".join(str(value) for value in options) + "]"
    return "[" + ", ".join(f"{key}={value}" for key, value in options.items()) + "]"


def command_body(frame: CommandFrame) -> str:
    return "\\" + (frame.command or "") + format_options(frame.options)


def text_body(frame: TextFrame) -> str:
    text = frame.text
    if len(text) > TEXT_LIMIT:
        text = text[:TEXT_KEEP] + ELLIPSIS
    for char, glyph in CONTROL_GLYPHS.items():
        text = text.replace(char, glyph)
    return '"' + text + '"'


def generic_body(frame: Frame) -> str:
    extra = frame.extra if isinstance(frame, GenericFrame) else None
    return repr(extra) if extra else ""


def frame_body(frame: Frame) -> str:
    """Render the part of a frame after ``in``."""

    # ContentFrame is a CommandFrame
    if isinstance(frame, CommandFrame):
        return command_body(frame)
    if isinstance(frame, TextFrame):
        return text_body(frame)
    return generic_body(frame)


def frame_to_string(frame: Frame, skip_file: bool = False) -> str:
    """
    Render one frame as ``[file:][lno:[col:]] in <body>``.

    skip_file drops the file segment, for when a neighbouring frame has
    already named the same file.
    """
    location = ""
    if frame.file and not skip_file:
        location = f"{frame.file}:"
    if frame.lno is not None:
        location += f"{frame.lno}:"
        if frame.col is not None:
            location += f"{frame.col}:"
    prefix = location + " " if location else ""
    return prefix + "in " + frame_body(frame)


def format_trace_head(frames: Sequence[Frame], after_frame: Optional[Frame]) -> Optional[str]:
    """
    Build the one-line "where are we" summary.

    Not every frame carries a line number (text frames never do), so when the
    top frame lacks one the nearest frame below it that has one is appended as
    ``near``. The popped ``after_frame`` is only mentioned when it belongs to
    the same file as the frame that supplied the location.

    Returns None when there is nothing to report.
    """
    if not frames:
        if after_frame is None:
            return None
        return "after " + frame_to_string(after_frame)

    top = frames[-1]
    info = frame_to_string(top)
    location_frame = top

    if top.lno is None:
        for frame in reversed(frames[:-1]):
            if frame.lno is not None:
                location_frame = frame
                info += " near " + frame_to_string(frame, frame.file == top.file)
                break

    if after_frame is not None and after_frame.file == location_frame.file:
        info += " after " + frame_to_string(after_frame, True)
    return info
