"""
Dataset ingestion batchers.

Exports:
  - BaseBatcher, StaticBatcher, ContentRecord
  - EncyclopediaBatcher, StructuredFileBatcher, ModelGeneratedBatcher
"""

from backend.application.ingestion.base import BaseBatcher, ContentRecord, StaticBatcher
from backend.application.ingestion.encyclopedia import EncyclopediaBatcher
from backend.application.ingestion.model_generated import ModelGeneratedBatcher
from backend.application.ingestion.structured_file import StructuredFileBatcher

__all__ = [
    "BaseBatcher",
    "ContentRecord",
    "StaticBatcher",
    "EncyclopediaBatcher",
    "ModelGeneratedBatcher",
    "StructuredFileBatcher",
]
