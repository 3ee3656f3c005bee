"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import typer
from rich.console import Console
from rich.table import Table

from resume_ingest_agents.observability import configure_logging
from resume_ingest_agents.service import ResumeService
from resume_ingest_agents.tools.file_loader import FileLoader
from resume_ingest_core.config.settings import Settings
from resume_ingest_core.exceptions import ResumeIngestError
from resume_ingest_core.models.record import ResumeRecord, TailorRequest, UserInfo
from resume_ingest_infra.store.disk_store import DiskResumeStore

app = typer.Typer(
    name="resume-ingest",
    help="Import resumes from files and LinkedIn profiles, and tailor them to jobs",
)
console = Console()

T = TypeVar("T")

OWNER_OPTION = typer.Option("local", "--owner", help="Owner id the records belong to")
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable debug logging")


@app.command("import-file")
def import_file(
    path: Path = typer.Argument(..., help="Path to a PDF, PNG or JPEG resume"),
    owner: str = OWNER_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Import a resume from a PDF or image."""
    settings = _settings(verbose)

    async def _import(service: ResumeService) -> ResumeRecord:
        upload = await FileLoader().load(path)
        return await service.import_file(owner, upload)

    _print_record(_run(settings, _import))


@app.command("import-linkedin")
def import_linkedin(
    url: str = typer.Argument(..., help="LinkedIn profile URL"),
    owner: str = OWNER_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Import a resume from a LinkedIn profile via the Scrapin API."""
    settings = _settings(verbose)
    _print_record(_run(settings, lambda service: service.import_linkedin(owner, url)))


@app.command("import-profile")
def import_profile(
    json_path: Path = typer.Argument(..., help="Saved profile payload", exists=True),
    owner: str = OWNER_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Import a resume from a saved LinkedIn profile payload."""
    settings = _settings(verbose)
    try:
        payload = json.loads(json_path.read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] {json_path} is not valid JSON: {e}")
        raise typer.Exit(code=1) from e
    _print_record(
        _run(settings, lambda service: service.import_profile_payload(owner, payload))
    )


@app.command()
def tailor(
    resume_id: str = typer.Argument(..., help="Id of the resume to tailor"),
    title: str = typer.Option(..., "--title", help="Title of the tailored resume"),
    job: str = typer.Option("", "--job", help="Job description text"),
    job_file: Path | None = typer.Option(
        None, "--job-file", help="File containing the job description"
    ),
    owner: str = OWNER_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Create a copy of a resume tailored to a job description."""
    job_description = job
    if job_file and job_file.exists():
        job_description = job_file.read_text().strip()

    if not job_description:
        console.print("[red]Error:[/red] Provide --job or --job-file", style="bold")
        raise typer.Exit(code=1)

    settings = _settings(verbose)
    request = TailorRequest(
        existing_resume_id=resume_id, job_description=job_description, title=title
    )
    _print_record(_run(settings, lambda service: service.create_tailored(owner, request)))


@app.command()
def create(
    title: str = typer.Argument(..., help="Resume title"),
    name: str = typer.Option("", "--name", help="Full name"),
    email: str = typer.Option("", "--email", help="Email address"),
    owner: str = OWNER_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Create a blank resume."""
    settings = _settings(verbose)
    user = UserInfo(name=name, email=email)
    _print_record(_run(settings, lambda service: service.create_blank(owner, title, user)))


@app.command()
def show(
    resume_id: str = typer.Argument(..., help="Resume id"),
    owner: str = OWNER_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print a stored resume as JSON."""
    settings = _settings(verbose)
    record = _run(
        settings, lambda service: service.repository.get_record(owner, resume_id)
    )
    if record is None:
        console.print(f"[red]Error:[/red] Resume {resume_id} not found")
        raise typer.Exit(code=1)
    console.print_json(record.data.model_dump_json(by_alias=True))


@app.command("list")
def list_resumes(
    owner: str = OWNER_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the owner's resumes, newest first."""
    settings = _settings(verbose)
    records = _run(settings, lambda service: service.repository.list_records(owner))

    table = Table(title=f"Resumes for {owner}")
    table.add_column("Id")
    table.add_column("Title")
    table.add_column("Created")
    for record in records:
        table.add_row(record.id, record.metadata.title, record.created_at.isoformat())
    console.print(table)


@app.command()
def version() -> None:
    """Show version."""
    console.print("resume-ingest v0.1.0")


def _settings(verbose: bool) -> Settings:
    settings = Settings()  # type: ignore[call-arg]
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _run(settings: Settings, action: Callable[[ResumeService], Awaitable[T]]) -> T:
    """Run one service call against the disk store, mapping errors to exit codes."""
    store = DiskResumeStore(settings.store_dir)
    service = ResumeService(settings, store)
    try:
        return asyncio.run(action(service))
    except ResumeIngestError as e:
        console.print(f"[red]Error ({e.error_code.value}):[/red] {e}")
        raise typer.Exit(code=1) from e
    finally:
        store.close()


def _print_record(record: ResumeRecord) -> None:
    console.print(f"[bold green]Saved:[/bold green] {record.metadata.title}")
    console.print(f"  Id: {record.id}")
    console.print(f"  Slug: {record.metadata.slug}")


if __name__ == "__main__":
    app()
