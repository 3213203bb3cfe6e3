"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import chat_session_crud, document_crud

    chat_session = await chat_session_crud.get_by_id(db, session_id)
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from backend.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from backend.boundary.db.CRUD.chunk_crud import DocumentChunkCRUD, chunk_crud
from backend.boundary.db.CRUD.chat_crud import (
    ChatMessageCRUD,
    ChatSessionCRUD,
    chat_message_crud,
    chat_session_crud,
)

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "DocumentCRUD",
    "document_crud",
    "DocumentChunkCRUD",
    "chunk_crud",
    "ChatSessionCRUD",
    "chat_session_crud",
    "ChatMessageCRUD",
    "chat_message_crud",
]
