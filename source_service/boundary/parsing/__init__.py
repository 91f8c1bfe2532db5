"""
Document parse service boundary.

Exports: LlamaParseClient, ParseJobStatus
"""

from source_service.boundary.parsing.llamaparse_client import LlamaParseClient, ParseJobStatus

__all__ = ["LlamaParseClient", "ParseJobStatus"]
