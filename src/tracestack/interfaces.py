"""
Collaborator interface definitions
"""

from typing import Protocol, runtime_checkable, Any, Dict, Optional


@runtime_checkable
class Environment(Protocol):
    """What a TraceStack needs from the embedding engine"""

    currently_processing_file: Optional[str]

    def debugging(self, category: str) -> bool:
        ...

    def debug(self, category: str, message: str) -> None:
        ...

    def warn(self, message: str, recoverable: bool = True) -> None:
        """Report a usage or balance problem. Must not raise."""
        ...


class ContentNode(Protocol):
    """
    A structured content node, as produced by the engine's parser.

    Every attribute is optional; plain mappings with the same keys are
    accepted wherever a ContentNode is.
    """

    file: Optional[str]
    lno: Optional[int]
    col: Optional[int]
    command: Optional[str]
    options: Optional[Dict[str, Any]]
