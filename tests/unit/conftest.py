"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from resume_ingest_core.models.extraction import FileSlices
from resume_ingest_core.models.resume import ResumeDocument
from tests.mocks.mock_factories import make_document, make_file_slices
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def sample_document() -> ResumeDocument:
    """Return a populated ResumeDocument with stable ids."""
    return make_document()


@pytest.fixture
def file_slices() -> FileSlices:
    """Return FileSlices as the file extractor would produce them."""
    return make_file_slices()
