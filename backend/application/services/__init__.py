"""Service orchestrators."""

from .chat_service import ChatService
from .content_service import ContentService
from .dataset_service import DatasetService
from .document_service import DocumentService
from .multilingual_service import MultilingualService

__all__ = [
    "ChatService",
    "ContentService",
    "DatasetService",
    "DocumentService",
    "MultilingualService",
]
