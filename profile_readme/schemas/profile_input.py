"""Profile input schema collected by the README form."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

# Minimum lengths (in characters) and the message shown next to the field
MIN_LENGTH_RULES = {
    "name": (2, "Name must be at least 2 characters"),
    "about": (10, "About section must be at least 10 characters"),
    "skills": (2, "Please enter your skills"),
}


class ProfileInput(BaseModel):
    """Six free-text fields describing a person's GitHub profile."""

    # Required fields validate their default too, so a missing value fails like ""
    name: str = Field(default="", validate_default=True, description="Display name used in the greeting heading")
    about: str = Field(default="", validate_default=True, description="Introductory paragraph")
    skills: str = Field(default="", validate_default=True, description="Skills section body (Markdown)")
    experience: str = Field(default="", description="Experience section body; section omitted when empty")
    projects: str = Field(default="", description="Projects section body; section omitted when empty")
    social: str = Field(default="", description="Social links section body; section omitted when empty")

    @field_validator("name", "about", "skills")
    @classmethod
    def _check_min_length(cls, value: str, info: ValidationInfo) -> str:
        min_length, message = MIN_LENGTH_RULES[info.field_name]
        if len(value) < min_length:
            raise PydanticCustomError(
                "string_too_short",
                message,
                {"min_length": min_length},
            )
        return value
