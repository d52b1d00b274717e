"""Owned form state: draft fields, last generated README, per-field errors."""

from typing import Dict

from profile_readme.config import FIELD_NAMES
from profile_readme.services.template_generator import generate_markdown
from profile_readme.services.validator import ValidationResult, validate_profile
from profile_readme.utils.logger import get_logger

logger = get_logger(__name__)


class FormState:
    """
    Mutable record behind the form. Fields change only through set_field;
    the generator runs on a snapshot at submit time.
    """

    def __init__(self) -> None:
        self._fields: Dict[str, str] = {name: "" for name in FIELD_NAMES}
        self.document: str = ""
        self.errors: Dict[str, str] = {}

    def set_field(self, name: str, value: str) -> None:
        if name not in self._fields:
            raise KeyError(f"Unknown form field: {name}")
        self._fields[name] = value

    def get_field(self, name: str) -> str:
        return self._fields[name]

    def snapshot(self) -> Dict[str, str]:
        return dict(self._fields)

    @property
    def has_document(self) -> bool:
        return bool(self.document)

    def submit(self) -> ValidationResult:
        """
        Validate the current fields. On success the document is replaced;
        on failure errors are recorded and the previous document is kept.
        """
        result = validate_profile(self.snapshot())
        if not result.is_valid:
            self.errors = dict(result.errors)
            return result
        self.errors = {}
        self.document = generate_markdown(result.profile)
        logger.info("README generated: chars=%s", len(self.document))
        return result
