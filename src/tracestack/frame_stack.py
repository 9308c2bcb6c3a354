"""Trace stack: push/pop balance checking and location queries."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple

from .common import COMMAND_STACK, TraceEnvironment
from .formatting import format_trace_head, frame_to_string
from .interfaces import Environment
from .types import CommandFrame, ContentFrame, Frame, Options, TextFrame

NOWHERE = "<nowhere>"

_SCALARS = (str, bytes, int, float, bool)


def is_content_node(content: Any) -> bool:
    """Whether content is a structured node (mapping or attribute object)."""

    if content is None or callable(content) or isinstance(content, _SCALARS):
        return False
    return True


def content_field(content: Any, name: str) -> Any:
    if not is_content_node(content):
        return None
    if isinstance(content, Mapping):
        return content.get(name)
    return getattr(content, name, None)


class TraceStack:
    """
    Call stack of the currently processed document.

    Frames are stored bottom first; the most recent and most specific frame
    is last. Use the push_* methods and pop rather than touching the frames
    directly. Every push returns an id that must be handed back to the
    matching pop.
    """

    def __init__(self, environment: Optional[Environment] = None) -> None:
        self.environment = environment if environment is not None else TraceEnvironment()
        self._frames: List[Frame] = []
        # Last popped frame, cleared by the next push.
        self._after_frame: Optional[Frame] = None
        self._last_push_id = 0

    # ------------------------------------------------------------------
    # Push / pop
    # ------------------------------------------------------------------
    def push_command(
        self,
        command: Optional[str],
        content: Any = None,
        options: Optional[Options] = None,
    ) -> int:
        """
        Record a command call (not the command itself).

        content supplies file/lno/col; a callable or None carries no location.
        """

        if not command:
            self.environment.warn("Command should be specified for push_command", True)
        return self.push_frame(
            CommandFrame(
                command=command,
                file=content_field(content, "file") or self.environment.currently_processing_file,
                lno=content_field(content, "lno"),
                col=content_field(content, "col"),
                options=self._coerce_options(options),
            )
        )

    def push_content(self, content: Any, command: Optional[str] = None) -> int:
        """Record a content node; command and options are inferred from it unless given."""

        if not is_content_node(content):
            self.environment.warn("Content parameter of push_content must be a content node", True)
        command = command or content_field(content, "command")
        if not command:
            self.environment.warn("Command should be specified or inferable for push_content", True)
        return self.push_frame(
            ContentFrame(
                command=command,
                file=content_field(content, "file") or self.environment.currently_processing_file,
                lno=content_field(content, "lno"),
                col=content_field(content, "col"),
                options=self._coerce_options(content_field(content, "options")),
            )
        )

    def push_text(self, text: str) -> int:
        """Record a run of text about to be typeset."""

        if not isinstance(text, str):
            self.environment.warn("Text parameter of push_text must be a string", True)
            text = "" if text is None else str(text)
        return self.push_frame(TextFrame(text=text))

    def _coerce_options(self, options: Any) -> Options:
        """Copy options; mappings and sequences are kept, anything else becomes {}."""
        if not options:
            return {}
        if isinstance(options, Mapping):
            return dict(options)
        if isinstance(options, (list, tuple)):
            return list(options)
        self.environment.warn("Options must be a mapping or a sequence", True)
        return {}

    def push_frame(self, frame: Frame) -> int:
        self.environment.debug(
            COMMAND_STACK, "." * len(self._frames) + "PUSH(" + frame_to_string(frame) + ")"
        )
        self._frames.append(frame)
        self._after_frame = None
        self._last_push_id += 1
        frame.push_id = self._last_push_id
        return self._last_push_id

    def pop(self, push_id: int) -> None:
        """
        Pop the top frame. push_id must be the value returned by its push;
        an integral float such as 3.0 matches id 3.

        A mismatch is reported and ignored so that later pops can still
        resynchronise.
        """

        if not isinstance(push_id, (int, float)) or isinstance(push_id, bool):
            self.environment.warn(
                "pop's argument must be the result value of the corresponding push", True
            )
            return

        top = self.top
        if top is None or top.push_id != push_id:
            message = "Unbalanced content push/pop"
            if self._detailed_imbalance():
                if top is None:
                    message += f". Expected nothing (stack is empty), got {push_id}"
                else:
                    message += f". Expected {top.push_id} - ({frame_to_string(top)}), got {push_id}"
            self.environment.warn(message, True)
            return

        self._after_frame = self._frames.pop()
        self.environment.debug(
            COMMAND_STACK, "." * len(self._frames) + "POP(" + frame_to_string(top) + ")"
        )

    def _detailed_imbalance(self) -> bool:
        config = getattr(self.environment, "config", None)
        return bool(getattr(config, "traceback", False)) or self.environment.debugging(COMMAND_STACK)

    @contextmanager
    def scoped(self, push_id: int) -> Iterator[int]:
        """
        Pop push_id when the block completes.

        An exception skips the pop, leaving the frame in place for the error
        report.
        """
        yield push_id
        self.pop(push_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def top(self) -> Optional[Frame]:
        return self._frames[-1] if self._frames else None

    @property
    def after_frame(self) -> Optional[Frame]:
        return self._after_frame

    @property
    def depth(self) -> int:
        return len(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def _fallback_location(self) -> str:
        return self.environment.currently_processing_file or NOWHERE

    def location_info(self) -> str:
        """Short string with the most relevant location, for user messages."""

        return format_trace_head(self._frames, self._after_frame) or self._fallback_location()

    def location_trace(self) -> str:
        """Multi-line trace with the full document location, nearest frame first."""

        prefix = "\t"
        # Only the top goes into the head; the rest are listed below it.
        head = format_trace_head(self._frames[-1:], self._after_frame)
        if head is None:
            return prefix + self._fallback_location() + "\n"

        trace = prefix + head + "\n"
        for frame in reversed(self._frames[:-1]):
            trace += prefix + frame_to_string(frame) + "\n"
        return trace

    def to_json(self) -> List[dict]:
        return trace_stack_to_json(self._frames)


def trace_stack_to_json(frames: Sequence[Frame]) -> List[dict]:
    """Convert frames to a logging-friendly JSON list, bottom first."""

    return [frame.to_dict() for frame in frames]


_default_stack: Optional[TraceStack] = None


def get_default_stack() -> TraceStack:
    """Process-wide stack, created on first use."""
    global _default_stack
    if _default_stack is None:
        _default_stack = TraceStack()
    return _default_stack


def set_default_stack(stack: Optional[TraceStack]) -> None:
    global _default_stack
    _default_stack = stack
