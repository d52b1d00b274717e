"""Shared fixtures for the profile README tests."""

import pytest

from profile_readme.schemas.profile_input import ProfileInput


@pytest.fixture
def minimal_values():
    """Required fields only; optional sections empty."""
    return {
        "name": "Ada",
        "about": "I build systems.",
        "skills": "- Rust\n- Go",
        "experience": "",
        "projects": "",
        "social": "",
    }


@pytest.fixture
def full_values(minimal_values):
    """Every field filled in."""
    return {
        **minimal_values,
        "experience": "### Analytical Engines\nProgrammer | 1842-1843\n- Wrote the first algorithm",
        "projects": "### Note G\nBernoulli numbers on the Analytical Engine",
        "social": "- [Website](https://example.com)",
    }


@pytest.fixture
def minimal_profile(minimal_values):
    return ProfileInput(**minimal_values)


@pytest.fixture
def full_profile(full_values):
    return ProfileInput(**full_values)
