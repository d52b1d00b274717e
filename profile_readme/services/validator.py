"""Validate raw form values into a ProfileInput. No UI logic; used by form state."""

from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from profile_readme.schemas.profile_input import ProfileInput
from profile_readme.utils.logger import get_logger

logger = get_logger(__name__)


class ValidationResult(BaseModel):
    """Either an accepted profile or per-field error messages."""

    model_config = ConfigDict(frozen=True)

    profile: Optional[ProfileInput] = Field(default=None, description="Accepted record when valid")
    errors: Dict[str, str] = Field(default_factory=dict, description="Field name -> error message")

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _errors_by_field(exc: ValidationError) -> Dict[str, str]:
    """First message per field, keyed by the top-level field name."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        errors.setdefault(str(err["loc"][0]), err["msg"])
    return errors


def validate_profile(data: Mapping[str, object]) -> ValidationResult:
    """
    Validate form values. Every field is checked; all failures are reported together.
    Missing fields count as empty strings; unknown keys are ignored.
    """
    try:
        profile = ProfileInput.model_validate(dict(data))
    except ValidationError as e:
        errors = _errors_by_field(e)
        logger.info("Profile validation failed: fields=%s", sorted(errors))
        return ValidationResult(errors=errors)
    return ValidationResult(profile=profile)
