"""Shared test fixtures for comma_fields tests."""

from __future__ import annotations

import random

import pytest

# Includes both quote kinds, the delimiter and whitespace so random lines
# exercise every scanner transition.
FIELD_ALPHABET = "ab xyz,,'\"\t;"


@pytest.fixture
def random_lines() -> list[str]:
    rng = random.Random(1337)
    return [
        "".join(rng.choice(FIELD_ALPHABET) for _ in range(rng.randint(0, 40)))
        for _ in range(300)
    ]


@pytest.fixture
def sample_csv(tmp_path):
    path = tmp_path / "sample.csv"
    path.write_text(
        "foo, \"bar\", 'quoted, part'\n"
        "a,,b\n"
        "\n"
        "\"a,b\",c\n",
        encoding="utf-8",
    )
    return path
