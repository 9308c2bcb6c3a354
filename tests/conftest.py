"""Shared test doubles."""

from typing import Iterable, List, Optional, Tuple

import pytest

from tracestack import COMMAND_STACK, TraceConfig, TraceStack


class RecordingEnvironment:
    """Environment double that records warnings and debug lines"""

    def __init__(
        self,
        categories: Iterable[str] = (),
        traceback: bool = False,
        current_file: Optional[str] = None,
    ):
        self.config = TraceConfig(debug_categories=set(categories), traceback=traceback)
        self.currently_processing_file = current_file
        self.warnings: List[Tuple[str, bool]] = []
        self.debug_lines: List[Tuple[str, str]] = []

    def debugging(self, category: str) -> bool:
        return category in self.config.debug_categories

    def debug(self, category: str, message: str) -> None:
        if self.debugging(category):
            self.debug_lines.append((category, message))

    def warn(self, message: str, recoverable: bool = True) -> None:
        self.warnings.append((message, recoverable))

    @property
    def warning_messages(self) -> List[str]:
        return [message for message, _ in self.warnings]


@pytest.fixture
def env():
    return RecordingEnvironment()


@pytest.fixture
def stack(env):
    return TraceStack(env)


@pytest.fixture
def debug_env():
    return RecordingEnvironment(categories=[COMMAND_STACK])
