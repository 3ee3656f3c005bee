"""Resume service: runs a pipeline, then hands the finished document to the store.

The repository is called only after a pipeline has succeeded, so a failed
invocation never writes anything.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from resume_ingest_agents.orchestrator.pipeline import ImportPipeline
from resume_ingest_agents.tools.naming import generate_random_name, kebab_case, with_suffix
from resume_ingest_agents.tools.scrapin_client import ScrapinClient
from resume_ingest_core.constants import (
    TITLE_SUFFIX_AI,
    TITLE_SUFFIX_FILE,
    TITLE_SUFFIX_LINKEDIN,
)
from resume_ingest_core.defaults import DEFAULT_RESUME
from resume_ingest_core.exceptions import InvalidUploadError, SourceNotFoundError
from resume_ingest_core.merge import merge_document
from resume_ingest_core.models.record import (
    FileUpload,
    RecordMetadata,
    ResumeRecord,
    TailorRequest,
    UserInfo,
    Visibility,
)
from resume_ingest_core.models.resume import ResumeDocument

if TYPE_CHECKING:
    from resume_ingest_core.config.settings import Settings
    from resume_ingest_core.interfaces.repository import ResumeRepository
    from resume_ingest_core.models.profile import ScrapinProfile

logger = structlog.get_logger()


class ResumeService:
    """Create, import and tailor resumes for an owner."""

    def __init__(
        self,
        settings: Settings,
        repository: ResumeRepository,
        pipeline: ImportPipeline | None = None,
        profile_client: ScrapinClient | None = None,
    ) -> None:
        """Initialize with settings, a record store and optional collaborators."""
        self.settings = settings
        self.repository = repository
        self.pipeline = pipeline or ImportPipeline(settings)
        self._profile_client = profile_client

    @property
    def profile_client(self) -> ScrapinClient:
        """Scrapin client built from settings on first use.

        Raises:
            InvalidUploadError: If no Scrapin API key is configured.
        """
        if self._profile_client is None:
            if self.settings.scrapin_api_key is None:
                msg = "LinkedIn import needs RI_SCRAPIN_API_KEY to be set"
                raise InvalidUploadError(msg)
            self._profile_client = ScrapinClient(
                api_key=self.settings.scrapin_api_key.get_secret_value(),
                base_url=self.settings.scrapin_base_url,
                timeout=self.settings.http_timeout_seconds,
            )
        return self._profile_client

    async def create_blank(
        self,
        owner_id: str,
        title: str,
        user: UserInfo,
        slug: str | None = None,
        visibility: Visibility = "private",
    ) -> ResumeRecord:
        """Create a default resume seeded with the owner's name, email and picture."""
        document = merge_document(
            DEFAULT_RESUME,
            {
                "basics": {
                    "name": user.name,
                    "email": user.email,
                    "picture": {"url": user.picture or ""},
                }
            },
        )
        metadata = RecordMetadata(
            title=title, slug=slug or kebab_case(title), visibility=visibility
        )
        return await self.repository.create_record(owner_id, document, metadata)

    async def import_document(
        self,
        owner_id: str,
        data: ResumeDocument | Mapping[str, Any],
        title: str | None = None,
        slug: str | None = None,
        locked_premium: bool = False,
    ) -> ResumeRecord:
        """Store an existing document as-is under a given or random title.

        Raises:
            InvalidUploadError: If ``data`` is not a valid document.
        """
        if not isinstance(data, ResumeDocument):
            try:
                data = ResumeDocument.model_validate(data)
            except ValidationError as e:
                msg = f"Resume data is malformed: {e.error_count()} error(s)"
                raise InvalidUploadError(msg) from e
        title = title or generate_random_name()
        metadata = RecordMetadata(
            title=title, slug=slug or kebab_case(title), locked_premium=locked_premium
        )
        return await self.repository.create_record(owner_id, data, metadata)

    async def import_file(self, owner_id: str, upload: FileUpload) -> ResumeRecord:
        """Import a PDF or image through the file pipeline."""
        result = await self.pipeline.run_file(upload)
        title = with_suffix(generate_random_name(), TITLE_SUFFIX_FILE)
        return await self._store(owner_id, result.document, title)

    async def import_linkedin(self, owner_id: str, linkedin_url: str) -> ResumeRecord:
        """Fetch a LinkedIn profile and import it."""
        payload = await self.profile_client.fetch_profile(linkedin_url)
        return await self.import_profile_payload(owner_id, payload)

    async def import_profile_payload(
        self, owner_id: str, payload: ScrapinProfile | Mapping[str, Any]
    ) -> ResumeRecord:
        """Import an already fetched LinkedIn profile payload."""
        result = await self.pipeline.run_profile(payload)
        title = with_suffix(generate_random_name(), TITLE_SUFFIX_LINKEDIN)
        return await self._store(owner_id, result.document, title)

    async def create_tailored(self, owner_id: str, request: TailorRequest) -> ResumeRecord:
        """Tailor one of the owner's resumes to a job description.

        Raises:
            SourceNotFoundError: If the resume does not exist for this owner;
                raised before any extraction call.
        """
        existing = await self.repository.get_record(owner_id, request.existing_resume_id)
        if existing is None:
            logger.warning(
                "tailoring_source_missing",
                owner_id=owner_id,
                resume_id=request.existing_resume_id,
            )
            msg = f"Resume {request.existing_resume_id} not found"
            raise SourceNotFoundError(msg)

        result = await self.pipeline.run_tailoring(existing.data, request.job_description)
        title = with_suffix(request.title, TITLE_SUFFIX_AI)
        metadata = RecordMetadata(
            title=title,
            slug=request.slug or kebab_case(request.title),
            visibility=request.visibility,
            locked_premium=True,
        )
        return await self.repository.create_record(owner_id, result.document, metadata)

    async def _store(self, owner_id: str, document: ResumeDocument, title: str) -> ResumeRecord:
        metadata = RecordMetadata(title=title, slug=kebab_case(title))
        return await self.repository.create_record(owner_id, document, metadata)
