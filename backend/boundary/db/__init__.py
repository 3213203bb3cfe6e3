"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), create_tables(): Connection lifecycle
  - UserModel, DocumentModel, DocumentChunkModel, ChatSessionModel, ChatMessageModel
  - DocumentStatus: Indexing status enum
  - *_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Relational store for users, documents, chunks and conversations
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now
from backend.boundary.db.connection import (
    create_tables,
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models import (
    DEFAULT_SESSION_TITLE,
    ChatMessageModel,
    ChatSessionModel,
    DocumentChunkModel,
    DocumentModel,
    DocumentStatus,
    UserModel,
)
from backend.boundary.db.CRUD import (
    BaseCRUD,
    chat_message_crud,
    chat_session_crud,
    chunk_crud,
    document_crud,
    user_crud,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "utc_now",
    "create_tables",
    "get_async_engine",
    "get_async_session_factory",
    "UserModel",
    "DocumentModel",
    "DocumentStatus",
    "DocumentChunkModel",
    "ChatSessionModel",
    "ChatMessageModel",
    "DEFAULT_SESSION_TITLE",
    "BaseCRUD",
    "user_crud",
    "document_crud",
    "chunk_crud",
    "chat_session_crud",
    "chat_message_crud",
]
