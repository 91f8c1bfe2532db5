"""
Queue worker.

Exports: Disposition, MessageHandler, SourceQueueConsumer
"""

from .consumer import SourceQueueConsumer
from .handler import Disposition, MessageHandler

__all__ = ["Disposition", "MessageHandler", "SourceQueueConsumer"]
