"""
Test suite for DatasetService.

Tests source resolution, static id offsets, batched writes and the
comprehensive source carrying on after an encyclopedia failure.

System role: Verification of dataset ingestion orchestration
"""

import json
from unittest.mock import AsyncMock, patch

import pytest

from backend.application.ingestion.catalog import BUILTIN_CONTENT
from backend.application.ingestion.encyclopedia import EncyclopediaBatcher
from backend.application.ingestion.model_generated import ModelGeneratedBatcher
from backend.application.ingestion.structured_file import StructuredFileBatcher
from backend.application.services.dataset_service import DatasetService
from backend.core.answer_orchestrator import AnswerOrchestrator
from backend.core.exceptions import ProviderNotConfiguredError, ValidationError


@pytest.fixture
def dataset_service(mock_index, embedder, fake_provider, settings) -> DatasetService:
    """Provide DatasetService with a configured provider."""
    answers = AnswerOrchestrator(fake_provider, settings.providers)
    return DatasetService(mock_index, embedder, answers, True, settings.ingestion)


class TestBatchersFor:
    """Test suite for DatasetService.batchers_for."""

    @pytest.mark.parametrize(
        "source,batcher_type",
        [
            ("encyclopedia", EncyclopediaBatcher),
            ("Wikipedia", EncyclopediaBatcher),
            ("model-generated", ModelGeneratedBatcher),
            ("ai-generated", ModelGeneratedBatcher),
        ],
    )
    def test_batchers_for_should_resolve_aliases(
        self, dataset_service, source, batcher_type
    ) -> None:
        batchers = dataset_service.batchers_for(source)

        assert len(batchers) == 1
        assert isinstance(batchers[0], batcher_type)

    def test_batchers_for_should_combine_comprehensive_sources(self, dataset_service) -> None:
        batchers = dataset_service.batchers_for("comprehensive")

        assert [b.name for b in batchers] == ["encyclopedia", "comprehensive"]
        assert [b.id_offset for b in batchers] == [2000, 1000]

    def test_batchers_for_should_reject_unknown_source(self, dataset_service) -> None:
        with pytest.raises(ValidationError) as exc_info:
            dataset_service.batchers_for("textbook")

        assert exc_info.value.details["source"] == "textbook"

    def test_batchers_for_should_require_file_path(self, dataset_service) -> None:
        with pytest.raises(ValidationError):
            dataset_service.batchers_for("json")

        batchers = dataset_service.batchers_for("structured-file", file_path="data.json")
        assert isinstance(batchers[0], StructuredFileBatcher)

    def test_batchers_for_should_require_provider_for_generation(
        self, mock_index, embedder, fake_provider, settings
    ) -> None:
        # Arrange
        answers = AnswerOrchestrator(fake_provider, settings.providers)
        service = DatasetService(mock_index, embedder, answers, False, settings.ingestion)

        # Act / Assert
        with pytest.raises(ProviderNotConfiguredError):
            service.batchers_for("model-generated")


class TestLoadDataset:
    """Test suite for DatasetService.load_dataset."""

    @pytest.mark.asyncio
    async def test_load_dataset_should_write_structured_file(
        self, dataset_service, mock_index, tmp_path
    ) -> None:
        # Arrange
        path = tmp_path / "dataset.json"
        path.write_text(json.dumps({
            "Subjects": [
                {"Name": "Physics", "Topics": [
                    {"Title": "Gravity", "Content": "Masses attract.", "Difficulty": "beginner"},
                    {"Title": "Optics", "Content": "Light bends.", "Keywords": ["lens", "refraction"]},
                ]},
                {"name": "Biology", "topics": [{"title": "Cells", "content": "Units of life."}]},
            ]
        }))

        # Act
        result = await dataset_service.load_dataset("structured-file", file_path=str(path))

        # Assert
        points = mock_index.upsert_batched.call_args.args[0]
        assert [p.id for p in points] == [3000, 3001, 3002]
        assert points[0].payload.difficulty == "Beginner"
        assert points[1].payload.keywords == "lens, refraction"
        assert points[2].payload.source == "JSON Dataset"
        assert result.total_points == 3
        assert result.subjects == ["Physics", "Biology"]

    @pytest.mark.asyncio
    async def test_load_dataset_should_continue_after_encyclopedia_failure(
        self, dataset_service, mock_index
    ) -> None:
        # Act
        with patch.object(
            EncyclopediaBatcher, "build_points", AsyncMock(side_effect=RuntimeError("offline"))
        ):
            result = await dataset_service.load_dataset("comprehensive")

        # Assert
        assert result.total_points == len(BUILTIN_CONTENT)
        points = mock_index.upsert_batched.call_args.args[0]
        assert points[0].id == 1000
        assert points[-1].id == 1000 + len(BUILTIN_CONTENT) - 1
        assert all(p.payload.source == "Comprehensive Built-in" for p in points)

    @pytest.mark.asyncio
    async def test_load_dataset_should_raise_single_source_failure(
        self, dataset_service
    ) -> None:
        with pytest.raises(ValidationError):
            await dataset_service.load_dataset("structured-file", file_path="/missing/data.json")

    @pytest.mark.asyncio
    async def test_load_dataset_should_skip_write_when_nothing_built(
        self, dataset_service, mock_index
    ) -> None:
        # Act
        with patch.object(EncyclopediaBatcher, "build_points", AsyncMock(return_value=[])):
            result = await dataset_service.load_dataset("encyclopedia")

        # Assert
        assert result.total_points == 0
        mock_index.upsert_batched.assert_not_awaited()
