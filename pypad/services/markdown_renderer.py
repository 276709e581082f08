# pypad/services/markdown_renderer.py
from __future__ import annotations

import markdown

from pypad.domain.interfaces import IMarkdownRenderer
from pypad.utils.constants import CSS_PREVIEW, HTML_TEMPLATE, PREVIEW_PLACEHOLDER


class MarkdownRenderer(IMarkdownRenderer):
    """
    Builds the HTML shown in a window's preview pane.

    Markdown goes through python-markdown (tables, fenced code, Pygments via
    codehilite, GitHub-style task lists and strike-through from pymdownx).
    HTML documents are previewed as written.
    """

    EXTENSIONS = [
        "extra",
        "fenced_code",
        "codehilite",
        "sane_lists",
        "pymdownx.tasklist",
        "pymdownx.tilde",
    ]
    EXTENSION_CONFIGS = {
        "codehilite": {"guess_lang": False, "noclasses": True},
        "pymdownx.tasklist": {"custom_checkbox": False},
    }

    def to_html(self, markdown_text: str) -> str:
        body = markdown.markdown(
            markdown_text,
            extensions=self.EXTENSIONS,
            extension_configs=self.EXTENSION_CONFIGS,
            output_format="html5",
        )
        return HTML_TEMPLATE.format(css=CSS_PREVIEW, body=body)

    def preview_html(self, text: str, kind: str) -> str:
        """
        Return preview HTML for a document of the given kind ("markdown", "html").

        Empty documents preview a placeholder so the pane is never blank.
        Plain text has no preview and yields an empty string.
        """
        if kind == "html":
            return text
        if kind == "markdown":
            return self.to_html(text or PREVIEW_PLACEHOLDER)
        return ""
