"""Service exports."""

from .export import DownloadPayload, build_copy_snippet, build_download
from .form_state import FormState
from .template_generator import generate_markdown
from .validator import ValidationResult, validate_profile

__all__ = [
    "validate_profile",
    "ValidationResult",
    "generate_markdown",
    "FormState",
    "build_download",
    "build_copy_snippet",
    "DownloadPayload",
]
