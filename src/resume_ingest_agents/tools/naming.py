"""Record titles and URL slugs."""

from __future__ import annotations

import random
import re

_ADJECTIVES = (
    "Agile", "Bold", "Bright", "Calm", "Clever", "Crisp", "Daring", "Eager", "Fluffy",
    "Gentle", "Happy", "Honest", "Jolly", "Keen", "Lively", "Lucky", "Mellow", "Nimble",
    "Patient", "Quiet", "Rapid", "Sharp", "Steady", "Swift", "Tidy", "Vivid", "Witty",
)
_COLOURS = (
    "Amber", "Aqua", "Azure", "Beige", "Black", "Blue", "Bronze", "Coral", "Crimson",
    "Cyan", "Gold", "Green", "Indigo", "Ivory", "Jade", "Lime", "Magenta", "Maroon",
    "Olive", "Orange", "Pink", "Plum", "Purple", "Red", "Silver", "Teal", "White",
)
_ANIMALS = (
    "Albatross", "Badger", "Beaver", "Bison", "Cheetah", "Dolphin", "Eagle", "Falcon",
    "Ferret", "Fox", "Gazelle", "Heron", "Ibis", "Jaguar", "Koala", "Lemur", "Lynx",
    "Marmot", "Narwhal", "Otter", "Panda", "Puffin", "Raven", "Salmon", "Tiger", "Walrus",
    "Wombat", "Yak", "Zebra",
)

_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def generate_random_name(rng: random.Random | None = None) -> str:
    """Return a readable random title such as 'Fluffy Red Panda'."""
    rng = rng or random.Random()
    return f"{rng.choice(_ADJECTIVES)} {rng.choice(_COLOURS)} {rng.choice(_ANIMALS)}"


def kebab_case(value: str) -> str:
    """Convert a title to a URL slug: 'My Resume (AI)' -> 'my-resume-ai'."""
    value = _WORD_BOUNDARY.sub(r"\1-\2", value)
    return _NON_ALNUM.sub("-", value.lower()).strip("-")


def with_suffix(title: str, suffix: str) -> str:
    """Append a provenance suffix such as '(AI)' to a title."""
    return f"{title.strip()} {suffix}".strip()
