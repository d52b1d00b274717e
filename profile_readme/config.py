"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

APP_TITLE: str = os.getenv("APP_TITLE", "README Generator")
APP_TAGLINE: str = (
    "Create beautiful GitHub profile READMEs in minutes. "
    "Showcase your skills, projects, and experience with our modern template."
)
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Download / clipboard output
DOWNLOAD_FILE_NAME: str = "README.md"
DOWNLOAD_MIME: str = "text/markdown"
COPIED_INDICATOR_SECONDS: float = 2.0
PREVIEW_PLACEHOLDER: str = "Your README preview will appear here..."

# Form fields in display order; every field is collected as free text
FIELD_NAMES: tuple = ("name", "about", "skills", "experience", "projects", "social")

FIELD_LABELS: dict = {
    "name": "Name",
    "about": "About",
    "skills": "Skills",
    "experience": "Experience",
    "projects": "Projects",
    "social": "Social Links",
}

FIELD_PLACEHOLDERS: dict = {
    "name": "John Doe",
    "about": "I'm a passionate developer...",
    "skills": "- JavaScript\n- React\n- Node.js",
    "experience": "### Company Name\nPosition | Duration\n- Accomplishment 1\n- Accomplishment 2",
    "projects": "### Project Name\nDescription of the project\n- Tech stack used\n- Key features",
    "social": "- [LinkedIn](your-linkedin-url)\n- [Twitter](your-twitter-url)\n- [Portfolio](your-portfolio-url)",
}

# Name is a single-line input; the rest are text areas
TEXT_AREA_HEIGHT: int = 100
PREVIEW_HEIGHT: int = 400
