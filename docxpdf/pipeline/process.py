"""High-level pipeline: read DOCX → mammoth HTML → Chromium PDF → write.

This module orchestrates the full flow and provides a single entry point
`run_conversion` suitable for scripts and the CLI.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from docxpdf.config import ConverterConfig
from docxpdf.docs import convert_docx_to_html, read_docx_bytes
from docxpdf.render import render_html_to_pdf


def write_pdf(pdf: bytes, path: str) -> str:
    """Write PDF bytes to ``path``, replacing any previous file. Errors propagate."""
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "wb") as f:
        f.write(pdf)
    return path


def _save_html(html: str, path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    print(f"Intermediate HTML saved to {path}")


def convert_docx_to_pdf(buffer: bytes, config: Optional[ConverterConfig] = None) -> bytes:
    """Convert DOCX bytes to PDF bytes.

    Doxygen:
    - @param buffer: Raw DOCX bytes.
    - @param config: Style map, page and browser settings.
    - @return: PDF document bytes.
    - @throws Exception: Conversion or rendering errors, reported and re-raised unchanged.
    """
    cfg = config or ConverterConfig()
    try:
        result = convert_docx_to_html(buffer, style_map=cfg.style_map, page_margin=cfg.margin)
        if cfg.html_path:
            _save_html(result.html, cfg.html_path)
        return render_html_to_pdf(result.html, cfg)
    except Exception as e:
        print(f"Error converting DOCX to PDF: {e!r}", file=sys.stderr)
        raise


def run_conversion(config: Optional[ConverterConfig] = None) -> Optional[bytes]:
    """Run one conversion from ``config.input_path`` to ``config.output_path``.

    An unreadable input is reported and ends the run without output (returns
    None). Conversion errors are re-raised; nothing is written in that case.

    Doxygen:
    - @param config: Run settings; defaults to ./sample.docx → ./output.pdf.
    - @return: PDF bytes written to disk, or None when the input could not be read.
    """
    cfg = config or ConverterConfig()
    print(f"Reading DOCX from {cfg.input_path}")
    try:
        docx_buffer = read_docx_bytes(cfg.input_path)
    except OSError as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        return None
    print("DOCX file loaded successfully")

    print("Converting DOCX to PDF...")
    pdf = convert_docx_to_pdf(docx_buffer, cfg)
    print(f"PDF generated successfully ({len(pdf)} bytes)")

    write_pdf(pdf, cfg.output_path)
    print(f"PDF saved to {cfg.output_path}")
    return pdf
