"""Unit tests for README Markdown generation."""

import pytest

from profile_readme.schemas.profile_input import ProfileInput
from profile_readme.services.template_generator import generate_markdown

EXPERIENCE_HEADING = "## 💼 Experience"
PROJECTS_HEADING = "## 🛠️ Projects"
SOCIAL_HEADING = "## 🔗 Connect with me"


@pytest.mark.unit
def test_minimal_profile_exact_output(minimal_profile):
    """Required fields only: exact bytes, blank lines left where sections are dropped."""
    expected = (
        "# Hi there! 👋 I'm Ada\n"
        "\n"
        "I build systems.\n"
        "\n"
        "## 🚀 Skills\n"
        "- Rust\n"
        "- Go\n"
        "\n"
        "\n"
        "\n"
        "\n"
        "\n"
        "\n"
    )
    assert generate_markdown(minimal_profile) == expected


@pytest.mark.unit
def test_full_profile_exact_output(full_profile):
    expected = (
        "# Hi there! 👋 I'm Ada\n"
        "\n"
        "I build systems.\n"
        "\n"
        "## 🚀 Skills\n"
        "- Rust\n"
        "- Go\n"
        "\n"
        "## 💼 Experience\n"
        "### Analytical Engines\n"
        "Programmer | 1842-1843\n"
        "- Wrote the first algorithm\n"
        "\n"
        "\n"
        "## 🛠️ Projects\n"
        "### Note G\n"
        "Bernoulli numbers on the Analytical Engine\n"
        "\n"
        "\n"
        "## 🔗 Connect with me\n"
        "- [Website](https://example.com)\n"
    )
    assert generate_markdown(full_profile) == expected


@pytest.mark.unit
def test_starts_with_greeting(full_profile):
    assert generate_markdown(full_profile).startswith("# Hi there! 👋 I'm Ada")


@pytest.mark.unit
def test_empty_optional_fields_omit_headings(minimal_profile):
    markdown = generate_markdown(minimal_profile)

    assert EXPERIENCE_HEADING not in markdown
    assert PROJECTS_HEADING not in markdown
    assert SOCIAL_HEADING not in markdown
    assert "## 🚀 Skills" in markdown


@pytest.mark.unit
def test_optional_headings_in_fixed_order(full_profile):
    markdown = generate_markdown(full_profile)

    positions = [markdown.index(h) for h in (EXPERIENCE_HEADING, PROJECTS_HEADING, SOCIAL_HEADING)]
    assert positions == sorted(positions)
    assert markdown.index("## 🚀 Skills") < positions[0]


@pytest.mark.unit
@pytest.mark.parametrize(
    "field, heading",
    [
        ("experience", EXPERIENCE_HEADING),
        ("projects", PROJECTS_HEADING),
        ("social", SOCIAL_HEADING),
    ],
)
def test_each_optional_section_keyed_on_its_own_field(minimal_values, field, heading):
    """Filling one optional field adds exactly its own section."""
    profile = ProfileInput(**{**minimal_values, field: "something"})
    markdown = generate_markdown(profile)

    assert f"{heading}\nsomething" in markdown
    others = {EXPERIENCE_HEADING, PROJECTS_HEADING, SOCIAL_HEADING} - {heading}
    assert not any(h in markdown for h in others)


@pytest.mark.unit
def test_generation_is_deterministic(full_profile):
    assert generate_markdown(full_profile) == generate_markdown(full_profile)


@pytest.mark.unit
def test_user_text_passes_through_verbatim(minimal_values):
    """Markdown and HTML are not escaped."""
    about = '<img src="banner.png" alt="*banner*"> & **bold** `code`'
    profile = ProfileInput(**{**minimal_values, "about": about, "name": "<b>Ada</b>"})
    markdown = generate_markdown(profile)

    assert "# Hi there! 👋 I'm <b>Ada</b>\n" in markdown
    assert f"\n{about}\n" in markdown
