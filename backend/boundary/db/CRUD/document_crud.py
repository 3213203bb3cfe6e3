"""
Document CRUD operations.

Provides owner-scoped listing and status transitions for DocumentModel.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Document persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import utc_now
from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.document_model import DocumentModel, DocumentStatus


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """CRUD operations for DocumentModel."""

    def __init__(self) -> None:
        super().__init__(DocumentModel)

    async def get_by_owner(self, session: AsyncSession, user_id: UUID) -> Sequence[DocumentModel]:
        """
        List a user's documents, newest upload first.

        Args:
            session: Async database session
            user_id: Owner UUID

        Returns:
            Sequence of DocumentModel
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.uploaded_by == user_id)
            .order_by(DocumentModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def mark_completed(
        self,
        session: AsyncSession,
        id: UUID,
        total_chunks: int,
    ) -> DocumentModel | None:
        return await self.update_by_id(
            session,
            id,
            processing_status=DocumentStatus.COMPLETED,
            processing_error=None,
            processed_at=utc_now(),
            total_chunks=total_chunks,
        )

    async def mark_failed(
        self,
        session: AsyncSession,
        id: UUID,
        error: str,
    ) -> DocumentModel | None:
        return await self.update_by_id(
            session,
            id,
            processing_status=DocumentStatus.FAILED,
            processing_error=error,
            processed_at=utc_now(),
        )


document_crud = DocumentCRUD()
