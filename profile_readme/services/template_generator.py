"""Render a validated ProfileInput into the profile README Markdown."""

from profile_readme.schemas.profile_input import ProfileInput

# Optional sections: (field, heading, trailing newline after the body)
OPTIONAL_SECTIONS = (
    ("experience", "## 💼 Experience", True),
    ("projects", "## 🛠️ Projects", True),
    ("social", "## 🔗 Connect with me", False),
)


def _optional_section(heading: str, body: str, trailing_newline: bool) -> str:
    """Heading + body, or empty string when the body is empty."""
    if not body:
        return ""
    return f"{heading}\n{body}" + ("\n" if trailing_newline else "")


def generate_markdown(profile: ProfileInput) -> str:
    """
    Build the README. Pure and deterministic; user text is inserted verbatim.
    Empty optional sections are dropped but the blank lines separating them remain.
    """
    sections = [
        _optional_section(heading, getattr(profile, field), trailing)
        for field, heading, trailing in OPTIONAL_SECTIONS
    ]
    return (
        f"# Hi there! 👋 I'm {profile.name}\n"
        "\n"
        f"{profile.about}\n"
        "\n"
        "## 🚀 Skills\n"
        f"{profile.skills}\n"
        "\n"
        + "\n\n".join(sections)
        + "\n"
    )
