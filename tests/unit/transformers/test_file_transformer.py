"""Tests for FileTransformer."""

from __future__ import annotations

import pytest

from resume_ingest_agents.transformers.file_import import FileTransformer, join_name
from resume_ingest_core.defaults import DEFAULT_RESUME
from resume_ingest_core.merge import merge_document
from resume_ingest_core.models.extraction import BasicsSlice, FileSlices
from tests.mocks.mock_factories import make_file_slices


@pytest.mark.unit
class TestJoinName:
    """Test join_name."""

    @pytest.mark.parametrize(
        ("given", "family", "expected"),
        [
            ("Ada", "Lovelace", "Ada Lovelace"),
            ("Ada Lovelace", "Lovelace", "Ada Lovelace"),
            ("Ada", "", "Ada"),
            (" Ada ", " Lovelace ", "Ada Lovelace"),
        ],
    )
    def test_join_name(self, given: str, family: str, expected: str) -> None:
        """Family names are appended once."""
        assert join_name(given, family) == expected


@pytest.mark.unit
class TestFileTransformer:
    """Test the file-import patch."""

    def test_basics(self, file_slices: FileSlices) -> None:
        """Basics carry the joined name and contact details."""
        patch = FileTransformer().transform(file_slices)
        assert patch["basics"] == {
            "name": "Ada Lovelace",
            "headline": "Analytical Engine Programmer",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0000",
            "location": "London, UK",
        }

    def test_missing_email_is_empty_string(self) -> None:
        """An absent email becomes an empty string."""
        slices = make_file_slices(basics=BasicsSlice(name="Ada"))
        assert FileTransformer().transform(slices)["basics"]["email"] == ""

    @pytest.mark.parametrize("email", ["", "   "])
    def test_blank_email_answer_accepted(self, email: str) -> None:
        """A blank email from the model validates as no email."""
        basics = BasicsSlice.model_validate({"name": "Ada", "email": email})
        assert basics.email is None
        slices = make_file_slices(basics=basics)
        assert FileTransformer().transform(slices)["basics"]["email"] == ""

    def test_touches_only_file_sections(self, file_slices: FileSlices) -> None:
        """The patch covers summary, experience, education, skills and languages."""
        patch = FileTransformer().transform(file_slices)
        assert set(patch["sections"]) == {
            "summary",
            "experience",
            "education",
            "skills",
            "languages",
        }

    def test_items_fully_populated(self, file_slices: FileSlices) -> None:
        """Every item has a fresh id, visible=True and all default fields."""
        patch = FileTransformer().transform(file_slices)
        experience = patch["sections"]["experience"]["items"][0]
        assert experience["id"]
        assert experience["visible"] is True
        assert experience["url"] == {"label": "", "href": ""}
        assert experience["location"] == ""

        skill = patch["sections"]["skills"]["items"][1]
        assert skill["name"] == "Algorithm Design"
        assert skill["level"] == 1
        assert skill["keywords"] == []

    def test_languages_from_basics(self, file_slices: FileSlices) -> None:
        """Languages are trimmed and blank names dropped."""
        patch = FileTransformer().transform(file_slices)
        names = [item["name"] for item in patch["sections"]["languages"]["items"]]
        assert names == ["English", "French"]

    def test_sections_keep_presentation_defaults(self, file_slices: FileSlices) -> None:
        """Sections carry their default id and name."""
        patch = FileTransformer().transform(file_slices)
        assert patch["sections"]["skills"]["name"] == "Skills"
        assert patch["sections"]["summary"]["content"] == "Mathematician who writes programs."

    def test_ids_unique_across_runs(self, file_slices: FileSlices) -> None:
        """Transforming the same slices twice yields different ids."""
        first = FileTransformer().transform(file_slices)
        second = FileTransformer().transform(file_slices)
        assert (
            first["sections"]["skills"]["items"][0]["id"]
            != second["sections"]["skills"]["items"][0]["id"]
        )

    def test_empty_slices(self) -> None:
        """Empty slices produce empty sections, not missing ones."""
        slices = FileSlices(basics=BasicsSlice(name="Ada"))
        patch = FileTransformer().transform(slices)
        assert patch["sections"]["experience"]["items"] == []
        assert patch["sections"]["languages"]["items"] == []

    def test_patch_merges_into_valid_document(self, file_slices: FileSlices) -> None:
        """The patch merges cleanly over the default document."""
        document = merge_document(DEFAULT_RESUME, FileTransformer().transform(file_slices))
        assert document.basics.name == "Ada Lovelace"
        assert document.sections.education.items[0].area == "Analysis"
        assert document.sections.projects.items == []
