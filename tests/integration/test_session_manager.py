"""
Integration tests for ConversationStateManager.

Runs against an in-memory SQLite database: session reuse, message
append, placeholder title replacement and ordered listings.

System role: Verification of conversation persistence
"""

import uuid

import pytest

from backend.boundary.db.CRUD.chat_crud import chat_session_crud
from backend.boundary.db.models.chat_model import DEFAULT_SESSION_TITLE
from backend.core.exceptions import SessionNotFoundError
from backend.core.session_manager import (
    ConversationStateManager,
    is_placeholder_title,
    title_from_question,
)


@pytest.fixture
def manager(test_async_db) -> ConversationStateManager:
    return ConversationStateManager(test_async_db)


class TestTitleHelpers:
    """Test suite for title helpers."""

    def test_title_from_question_should_keep_short_question(self) -> None:
        question = "Explain cell membranes"

        assert len(question) == 22
        assert title_from_question(question) == question

    def test_title_from_question_should_truncate_to_fifty_characters(self) -> None:
        # Arrange
        question = "a" * 70

        # Act
        title = title_from_question(question)

        # Assert
        assert title == "a" * 50 + "..."

    def test_title_from_question_should_count_surrounding_whitespace(self) -> None:
        # Arrange
        question = "  " + "b" * 49

        # Act
        title = title_from_question(question)

        # Assert
        assert title == "  " + "b" * 48 + "..."

    @pytest.mark.parametrize(
        "title,expected",
        [
            (DEFAULT_SESSION_TITLE, True),
            ("Chat 2024-01-01", True),
            ("Photosynthesis basics", False),
        ],
    )
    def test_is_placeholder_title_should_detect_defaults(self, title, expected) -> None:
        assert is_placeholder_title(title) is expected


class TestGetOrCreateSession:
    """Test suite for ConversationStateManager.get_or_create_session."""

    @pytest.mark.asyncio
    async def test_get_or_create_session_should_reuse_active_session(
        self, manager, test_user
    ) -> None:
        # Act
        first = await manager.get_or_create_session(test_user.id)
        second = await manager.get_or_create_session(test_user.id)

        # Assert
        assert first.id == second.id
        assert first.title == DEFAULT_SESSION_TITLE
        assert first.is_active is True

    @pytest.mark.asyncio
    async def test_get_or_create_session_should_ignore_inactive_sessions(
        self, manager, test_user, test_async_db
    ) -> None:
        # Arrange
        old = await chat_session_crud.create(
            test_async_db, user_id=test_user.id, title="Old", is_active=False
        )
        await test_async_db.commit()

        # Act
        session = await manager.get_or_create_session(test_user.id)

        # Assert
        assert session.id != old.id


class TestSaveMessage:
    """Test suite for ConversationStateManager.save_message."""

    @pytest.mark.asyncio
    async def test_save_message_should_replace_placeholder_title(
        self, manager, test_user
    ) -> None:
        # Arrange
        session = await manager.get_or_create_session(test_user.id)
        question = "How do plants make food?"

        # Act
        message = await manager.save_message(
            session.id, question=question, answer="Photosynthesis.", used_rag=True, search_score=0.81
        )

        # Assert
        refreshed = await manager.get_session(session.id)
        assert refreshed.title == question
        assert message.used_rag is True
        assert message.search_score == pytest.approx(0.81)

    @pytest.mark.asyncio
    async def test_save_message_should_keep_custom_title(self, manager, test_user) -> None:
        # Arrange
        session = await manager.get_or_create_session(test_user.id, title="Exam prep")

        # Act
        await manager.save_message(session.id, question="Q1", answer="A1")

        # Assert
        assert (await manager.get_session(session.id)).title == "Exam prep"

    @pytest.mark.asyncio
    async def test_save_message_should_truncate_long_question_title(
        self, manager, test_user
    ) -> None:
        # Arrange
        session = await manager.get_or_create_session(test_user.id)
        question = "Explain " + "very " * 20 + "carefully"

        # Act
        await manager.save_message(session.id, question=question, answer="...")

        # Assert
        title = (await manager.get_session(session.id)).title
        assert title == question[:50] + "..."

    @pytest.mark.asyncio
    async def test_save_message_should_raise_for_unknown_session(self, manager) -> None:
        with pytest.raises(SessionNotFoundError):
            await manager.save_message(uuid.uuid4(), question="Q", answer="A")


class TestListings:
    """Test suite for list_sessions and list_messages."""

    @pytest.mark.asyncio
    async def test_list_sessions_should_order_by_recent_activity(
        self, manager, test_user, test_async_db
    ) -> None:
        # Arrange
        first = await manager.get_or_create_session(test_user.id)
        second = await chat_session_crud.create(
            test_async_db, user_id=test_user.id, title="Second"
        )
        await test_async_db.commit()
        await manager.save_message(first.id, question="Newest activity", answer="A")

        # Act
        sessions = await manager.list_sessions(test_user.id)

        # Assert
        assert [s.id for s in sessions] == [first.id, second.id]
        assert [s.message_count for s in sessions] == [1, 0]

    @pytest.mark.asyncio
    async def test_list_messages_should_return_oldest_first(self, manager, test_user) -> None:
        # Arrange
        session = await manager.get_or_create_session(test_user.id)
        for i in range(3):
            await manager.save_message(session.id, question=f"Q{i}", answer=f"A{i}")

        # Act
        messages = await manager.list_messages(session.id)

        # Assert
        assert [m.question for m in messages] == ["Q0", "Q1", "Q2"]

    @pytest.mark.asyncio
    async def test_get_session_should_raise_for_unknown_id(self, manager) -> None:
        with pytest.raises(SessionNotFoundError):
            await manager.get_session(uuid.uuid4())
