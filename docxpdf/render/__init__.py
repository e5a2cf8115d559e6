"""PDF rendering through headless Chromium (Playwright)."""

from .buffer import TempHtmlFile
from .browser import render_file_to_pdf, render_html_to_pdf

__all__ = [
    "TempHtmlFile",
    "render_file_to_pdf",
    "render_html_to_pdf",
]
