"""Schema exports."""

from .profile_input import MIN_LENGTH_RULES, ProfileInput

__all__ = ["ProfileInput", "MIN_LENGTH_RULES"]
