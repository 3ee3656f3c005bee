"""Tests for canonical defaults."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from resume_ingest_core.defaults import (
    DEFAULT_RESUME,
    DEFAULT_SKILL,
    EMPTY_LINK,
    ITEM_DEFAULTS,
    SECTION_NAMES,
    default_item,
    default_resume_dict,
    default_section,
    new_item_id,
)


@pytest.mark.unit
class TestDefaultResume:
    """Test the default document."""

    def test_every_fixed_section_present(self) -> None:
        """Default document has every fixed section with its display name."""
        for key, name in SECTION_NAMES.items():
            section = getattr(DEFAULT_RESUME.sections, key)
            assert section.id == key
            assert section.name == name
            assert section.visible is True

    def test_volunteer_display_name(self) -> None:
        """The volunteer section is titled Volunteering."""
        assert DEFAULT_RESUME.sections.volunteer.name == "Volunteering"

    def test_no_items_and_no_custom_sections(self) -> None:
        """Default item sections are empty and there are no custom sections."""
        for key in ITEM_DEFAULTS:
            assert getattr(DEFAULT_RESUME.sections, key).items == []
        assert DEFAULT_RESUME.sections.custom == {}

    def test_defaults_are_frozen(self) -> None:
        """Default constants cannot be mutated in place."""
        with pytest.raises(ValidationError):
            DEFAULT_SKILL.name = "changed"  # type: ignore[misc]
        with pytest.raises(ValidationError):
            EMPTY_LINK.href = "https://example.com"  # type: ignore[misc]

    def test_default_resume_dict_is_a_fresh_copy(self) -> None:
        """Mutating the returned dict leaves the constant untouched."""
        data = default_resume_dict()
        data["basics"]["name"] = "Mutated"
        data["sections"]["skills"]["items"].append({"name": "x"})

        assert DEFAULT_RESUME.basics.name == ""
        assert default_resume_dict()["sections"]["skills"]["items"] == []


@pytest.mark.unit
class TestDefaultHelpers:
    """Test default_section, default_item and new_item_id."""

    def test_default_section_returns_copy(self) -> None:
        """Each call returns an independent dict."""
        first = default_section("skills")
        first["name"] = "Changed"
        assert default_section("skills")["name"] == "Skills"

    def test_default_section_unknown_key(self) -> None:
        """Unknown section keys raise KeyError."""
        with pytest.raises(KeyError):
            default_section("hobbies")

    def test_default_item_has_all_fields(self) -> None:
        """Item defaults carry every field with an empty value."""
        item = default_item("experience")
        assert item == {
            "id": "",
            "visible": True,
            "company": "",
            "position": "",
            "location": "",
            "date": "",
            "summary": "",
            "url": {"label": "", "href": ""},
        }

    def test_default_skill_level(self) -> None:
        """A default skill has level 1 and no keywords."""
        item = default_item("skills")
        assert item["level"] == 1
        assert item["keywords"] == []

    def test_new_item_ids_are_unique(self) -> None:
        """Generated ids do not repeat."""
        ids = {new_item_id() for _ in range(100)}
        assert len(ids) == 100
