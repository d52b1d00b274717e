"""Download payload and clipboard snippet for a generated README."""

import html
import json
from typing import NamedTuple

from profile_readme.config import (
    COPIED_INDICATOR_SECONDS,
    DOWNLOAD_FILE_NAME,
    DOWNLOAD_MIME,
)


class DownloadPayload(NamedTuple):
    file_name: str
    mime: str
    data: bytes


def build_download(markdown: str) -> DownloadPayload:
    """README.md file contents: the exact document, UTF-8 encoded."""
    return DownloadPayload(
        file_name=DOWNLOAD_FILE_NAME,
        mime=DOWNLOAD_MIME,
        data=markdown.encode("utf-8"),
    )


def _js_string(text: str) -> str:
    """JSON-encode for embedding in a <script> block; '<' escaped so '</script>' cannot close it."""
    return json.dumps(text).replace("<", "\\u003c")


def build_copy_snippet(
    markdown: str,
    button_label: str = "Copy to Clipboard",
    copied_label: str = "Copied!",
) -> str:
    """
    HTML/JS fragment rendered in an st.iframe.
    The button writes the document to the browser clipboard and shows the copied
    label for COPIED_INDICATOR_SECONDS. Earlier resets are not cancelled.
    """
    reset_ms = int(COPIED_INDICATOR_SECONDS * 1000)
    return f"""
<button id="copy-readme" type="button"
  style="width:100%;padding:0.5rem 1rem;border:1px solid #a855f7;border-radius:0.5rem;
         background:transparent;color:#a855f7;font-size:1rem;cursor:pointer;">
  {html.escape(button_label)}
</button>
<script>
  const readme = {_js_string(markdown)};
  const button = document.getElementById("copy-readme");
  const idleLabel = {_js_string(button_label)};
  const copiedLabel = {_js_string(copied_label)};
  button.addEventListener("click", async () => {{
    await navigator.clipboard.writeText(readme);
    button.textContent = copiedLabel;
    setTimeout(() => {{ button.textContent = idleLabel; }}, {reset_ms});
  }});
</script>
"""
