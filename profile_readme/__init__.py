"""Profile README generator: form input -> GitHub profile README.md."""

__version__ = "0.1.0"
