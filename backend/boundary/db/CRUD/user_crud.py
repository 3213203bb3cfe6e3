"""
User CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: User persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel with identity lookups."""

    def __init__(self) -> None:
        super().__init__(UserModel)

    async def get_by_google_id(self, session: AsyncSession, google_id: str) -> UserModel | None:
        result = await session.execute(select(UserModel).where(UserModel.google_id == google_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        result = await session.execute(select(UserModel).where(UserModel.email == email))
        return result.scalar_one_or_none()


user_crud = UserCRUD()
