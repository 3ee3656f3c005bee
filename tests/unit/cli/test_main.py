"""Tests for CLI entrypoint."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from resume_ingest_cli.main import app
from resume_ingest_core.exceptions import ExtractionFailureError, SourceNotFoundError
from resume_ingest_core.models.record import TailorRequest
from tests.mocks.mock_factories import PDF_BYTES, make_record, make_scrapin_payload
from tests.mocks.mock_settings import make_settings

runner = CliRunner()


def _patched(service: MagicMock, settings: MagicMock | None = None) -> object:
    """Patch settings, logging, the store and the service class."""
    settings = settings or make_settings()
    stack = patch.multiple(
        "resume_ingest_cli.main",
        Settings=MagicMock(return_value=settings),
        configure_logging=MagicMock(),
        DiskResumeStore=MagicMock(),
        ResumeService=MagicMock(return_value=service),
    )
    return stack


def _service(**methods: object) -> MagicMock:
    service = MagicMock()
    for name, value in methods.items():
        setattr(service, name, value)
    return service


@pytest.mark.unit
class TestImportCommands:
    """Test import-file, import-profile and import-linkedin."""

    def test_import_file(self, tmp_path: Path) -> None:
        """A file import prints the stored record."""
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(PDF_BYTES)
        record = make_record(resume_id="abc123", title="Bold Red Fox (File)")
        service = _service(import_file=AsyncMock(return_value=record))

        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(app, ["import-file", str(resume), "--owner", "me"])

        assert result.exit_code == 0, result.output
        assert "Bold Red Fox (File)" in result.output
        assert "abc123" in result.output
        owner, upload = service.import_file.call_args[0]
        assert owner == "me"
        assert upload.type == "pdf"

    def test_import_file_bad_extension(self, tmp_path: Path) -> None:
        """An unsupported extension exits 1 with the bad_input code."""
        resume = tmp_path / "resume.docx"
        resume.write_bytes(b"PK")
        service = _service(import_file=AsyncMock())

        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(app, ["import-file", str(resume)])

        assert result.exit_code == 1
        assert "bad_input" in result.output
        service.import_file.assert_not_called()

    def test_import_profile(self, tmp_path: Path) -> None:
        """A saved payload is passed to the service."""
        payload_path = tmp_path / "profile.json"
        payload_path.write_text(json.dumps(make_scrapin_payload()))
        record = make_record(title="Calm Blue Otter (LinkedIn)")
        service = _service(import_profile_payload=AsyncMock(return_value=record))

        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(app, ["import-profile", str(payload_path)])

        assert result.exit_code == 0, result.output
        assert "(LinkedIn)" in result.output
        owner, payload = service.import_profile_payload.call_args[0]
        assert owner == "local"
        assert payload["person"]["firstName"] == "Grace"

    def test_import_profile_invalid_json(self, tmp_path: Path) -> None:
        """A file that is not JSON exits 1."""
        payload_path = tmp_path / "profile.json"
        payload_path.write_text("{not json")

        with _patched(_service()):  # type: ignore[attr-defined]
            result = runner.invoke(app, ["import-profile", str(payload_path)])

        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_import_linkedin_upstream_error(self) -> None:
        """Upstream failures exit 1 with the upstream_unavailable code."""
        service = _service(
            import_linkedin=AsyncMock(side_effect=ExtractionFailureError("pipeline", "timeout"))
        )
        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(
                app, ["import-linkedin", "https://www.linkedin.com/in/gracehopper"]
            )

        assert result.exit_code == 1
        assert "upstream_unavailable" in result.output


@pytest.mark.unit
class TestTailorCommand:
    """Test the tailor command."""

    def test_requires_job(self) -> None:
        """Missing --job and --job-file exits 1."""
        result = runner.invoke(app, ["tailor", "r1", "--title", "Role"])
        assert result.exit_code == 1

    def test_job_file(self, tmp_path: Path) -> None:
        """The job description can come from a file."""
        job_file = tmp_path / "job.txt"
        job_file.write_text("  Algorithm engineer  \n")
        record = make_record(title="Role (AI)")
        service = _service(create_tailored=AsyncMock(return_value=record))

        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(
                app, ["tailor", "r1", "--title", "Role", "--job-file", str(job_file)]
            )

        assert result.exit_code == 0, result.output
        _, request = service.create_tailored.call_args[0]
        assert isinstance(request, TailorRequest)
        assert request.existing_resume_id == "r1"
        assert request.job_description == "Algorithm engineer"

    def test_source_not_found(self) -> None:
        """An unknown resume exits 1 with bad_input."""
        service = _service(create_tailored=AsyncMock(side_effect=SourceNotFoundError("gone")))
        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(app, ["tailor", "r1", "--title", "Role", "--job", "x"])
        assert result.exit_code == 1
        assert "bad_input" in result.output


@pytest.mark.unit
class TestRecordCommands:
    """Test create, show, list and version."""

    def test_create(self) -> None:
        """create passes the user details to the service."""
        record = make_record(title="My CV")
        service = _service(create_blank=AsyncMock(return_value=record))

        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(
                app, ["create", "My CV", "--name", "Ada Lovelace", "--email", "ada@example.com"]
            )

        assert result.exit_code == 0, result.output
        owner, title, user = service.create_blank.call_args[0]
        assert (owner, title, user.name) == ("local", "My CV", "Ada Lovelace")

    def test_show(self) -> None:
        """show prints the document as camelCase JSON."""
        service = _service()
        service.repository.get_record = AsyncMock(return_value=make_record())

        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(app, ["show", "resume-1"])

        assert result.exit_code == 0, result.output
        assert "customFields" in result.output
        assert "Ada Lovelace" in result.output

    def test_show_missing(self) -> None:
        """show exits 1 for an unknown id."""
        service = _service()
        service.repository.get_record = AsyncMock(return_value=None)

        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(app, ["show", "nope"])

        assert result.exit_code == 1

    def test_list(self) -> None:
        """list prints a table of the owner's records."""
        service = _service()
        service.repository.list_records = AsyncMock(
            return_value=[make_record(resume_id="r1", title="First")]
        )

        with _patched(service):  # type: ignore[attr-defined]
            result = runner.invoke(app, ["list"])

        assert result.exit_code == 0, result.output
        assert "First" in result.output

    def test_version(self) -> None:
        """version prints the package version."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "resume-ingest v0.1.0" in result.output
