"""
Example document engine - a minimal document engine that keeps a TraceStack current
"""

from typing import Any, List, Mapping, Optional

from ..frame_stack import TraceStack


class DocumentProcessingError(RuntimeError):
    """Hard failure raised by a ``fail`` command, carrying the location trace"""

    def __init__(self, message: str, trace: str):
        super().__init__(message)
        self.trace = trace


class MockDocumentEngine:
    """
    Walks a content tree, pushing a frame for every node and text run.

    Nodes are mappings with optional ``command``, ``options``, ``file``,
    ``lno``, ``col`` and ``content`` (a list of child nodes); plain strings
    are text runs. Recognised commands:

    - ``warn``: record a warning with the current location
    - ``fail``: raise DocumentProcessingError with the full location trace
    - ``leak``: push a frame and never pop it
    """

    def __init__(self, stack: Optional[TraceStack] = None, verbose: bool = False):
        self.stack = stack if stack is not None else TraceStack()
        self.verbose = verbose
        self.output: List[str] = []
        self.warnings: List[str] = []

    def process(self, document: Any, file: Optional[str] = None) -> str:
        environment = self.stack.environment
        previous_file = environment.currently_processing_file
        environment.currently_processing_file = file
        try:
            self._process(document)
        finally:
            environment.currently_processing_file = previous_file
        return "".join(self.output)

    def _process(self, node: Any) -> None:
        if isinstance(node, str):
            with self.stack.scoped(self.stack.push_text(node)):
                self.output.append(node)
            return

        if isinstance(node, Mapping):
            with self.stack.scoped(self.stack.push_content(node)):
                self._run_command(node)
            return

        for child in node:
            self._process(child)

    def _run_command(self, node: Mapping) -> None:
        command = node.get("command")
        options = node.get("options")
        if not isinstance(options, Mapping):
            options = {}

        if command == "warn":
            message = f"{options.get('message', 'warning')} at {self.stack.location_info()}"
            self.warnings.append(message)
            self.stack.environment.warn(message, True)
            return

        if command == "fail":
            raise DocumentProcessingError(
                options.get("message", "processing failed"),
                self.stack.location_trace(),
            )

        if command == "leak":
            self.stack.push_command("leak", node)

        if self.verbose:
            print(f"[{command}] {self.stack.location_info()}")

        self._process(node.get("content") or [])
