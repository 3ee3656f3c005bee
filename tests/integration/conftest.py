"""Integration test fixtures: real settings and disk store, fake LLM providers."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from resume_ingest_agents.orchestrator.pipeline import ImportPipeline
from resume_ingest_agents.service import ResumeService
from resume_ingest_core.config.settings import Settings
from resume_ingest_infra.store.disk_store import DiskResumeStore
from tests.mocks.mock_llm import make_fake_llm
from tests.mocks.mock_settings import make_real_settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Real Settings with the store under tmp_path."""
    return make_real_settings(tmp_path)


@pytest.fixture
def disk_store(settings: Settings) -> Iterator[DiskResumeStore]:
    """A DiskResumeStore in the settings' store directory."""
    store = DiskResumeStore(settings.store_dir)
    yield store
    store.close()


@pytest.fixture
def service(settings: Settings, disk_store: DiskResumeStore) -> ResumeService:
    """ResumeService wired to the disk store and a fake-provider pipeline."""
    pipeline = ImportPipeline(settings, llm=make_fake_llm(settings))
    return ResumeService(settings, disk_store, pipeline=pipeline)
