"""Headless Chromium rendering: HTML document → PDF bytes.

The browser runs without its internal sandbox (``--no-sandbox``) so it can
start inside containers and CI hosts that lack user namespaces.
"""

from __future__ import annotations

from typing import Optional

from playwright.sync_api import sync_playwright

from docxpdf.config import ConverterConfig
from .buffer import TempHtmlFile


def render_file_to_pdf(file_uri: str, config: Optional[ConverterConfig] = None) -> bytes:
    """Load a local HTML file in headless Chromium and export it as PDF.

    Navigation waits for network idle so referenced images are loaded before
    capture. The browser is closed on every exit path; launch, navigation and
    export errors propagate unchanged.

    Doxygen:
    - @param file_uri: ``file://`` URI of the HTML document.
    - @param config: Page format, margins and browser options.
    - @return: PDF document bytes.
    """
    cfg = config or ConverterConfig()
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True, args=list(cfg.browser_args))
        try:
            page = browser.new_page()
            page.goto(file_uri, wait_until=cfg.wait_until)
            return page.pdf(
                format=cfg.page_format,
                print_background=cfg.print_background,
                margin=cfg.margins(),
            )
        finally:
            browser.close()


def render_html_to_pdf(html: str, config: Optional[ConverterConfig] = None) -> bytes:
    """Write ``html`` to a temporary file and render it to PDF bytes."""
    cfg = config or ConverterConfig()
    with TempHtmlFile(html, keep=cfg.keep_html) as tmp:
        return render_file_to_pdf(tmp.uri, cfg)
