"""
Source ingestion worker.

Consumes source processing messages, extracts content from links, notes
and stored documents, and indexes embedded chunks per user namespace.
"""

__version__ = "0.1.0"
