"""Example embedders of the trace stack."""

from .mock_engine import DocumentProcessingError, MockDocumentEngine

__all__ = ["DocumentProcessingError", "MockDocumentEngine"]
