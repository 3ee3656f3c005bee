"""Source transformers: each maps one kind of source data to a MergePatch."""

from resume_ingest_agents.transformers.base import SourceTransformer
from resume_ingest_agents.transformers.file_import import FileTransformer
from resume_ingest_agents.transformers.profile_import import (
    ProfileTransformer,
    format_date_range,
)
from resume_ingest_agents.transformers.tailoring import TailoringTransformer

__all__ = [
    "FileTransformer",
    "ProfileTransformer",
    "SourceTransformer",
    "TailoringTransformer",
    "format_date_range",
]
