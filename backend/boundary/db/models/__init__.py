"""
Database models package.

Exports:
  - UserModel: Account that owns sessions and documents
  - DocumentModel, DocumentStatus: Uploaded document and its indexing status
  - DocumentChunkModel: Relational record of an indexed chunk
  - ChatSessionModel, ChatMessageModel: Conversation history

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.user_model import UserModel
from backend.boundary.db.models.document_model import DocumentModel, DocumentStatus
from backend.boundary.db.models.chunk_model import DocumentChunkModel
from backend.boundary.db.models.chat_model import (
    DEFAULT_SESSION_TITLE,
    ChatMessageModel,
    ChatSessionModel,
)

__all__ = [
    "UserModel",
    "DocumentModel",
    "DocumentStatus",
    "DocumentChunkModel",
    "ChatSessionModel",
    "ChatMessageModel",
    "DEFAULT_SESSION_TITLE",
]
