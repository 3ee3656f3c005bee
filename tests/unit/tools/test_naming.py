"""Tests for record titles and slugs."""

from __future__ import annotations

import random

import pytest

from resume_ingest_agents.tools.naming import generate_random_name, kebab_case, with_suffix


@pytest.mark.unit
class TestNaming:
    """Test title and slug helpers."""

    def test_random_name_three_words(self) -> None:
        """Random names are three capitalised words."""
        words = generate_random_name().split()
        assert len(words) == 3
        assert all(word[0].isupper() for word in words)

    def test_random_name_seeded(self) -> None:
        """The same seed gives the same name."""
        assert generate_random_name(random.Random(7)) == generate_random_name(random.Random(7))

    @pytest.mark.parametrize(
        ("title", "slug"),
        [
            ("My Resume (AI)", "my-resume-ai"),
            ("Fluffy Red Panda (File)", "fluffy-red-panda-file"),
            ("camelCaseTitle", "camel-case-title"),
            ("  Senior  Engineer!! ", "senior-engineer"),
            ("", ""),
        ],
    )
    def test_kebab_case(self, title: str, slug: str) -> None:
        """Titles become lower-case hyphenated slugs."""
        assert kebab_case(title) == slug

    def test_with_suffix(self) -> None:
        """The provenance suffix is appended after one space."""
        assert with_suffix(" Backend Role ", "(AI)") == "Backend Role (AI)"
