"""
Entry point and compatibility facade for the DOCX → HTML → PDF pipeline.

This module exposes a stable API and a small CLI.

Packages:
- docxpdf.docs: DOCX loading and mammoth HTML conversion with the print template
- docxpdf.render: Temporary HTML file and headless Chromium PDF export
- docxpdf.pipeline: High-level orchestration (`run_conversion`)
"""

from __future__ import annotations

import sys

from docxpdf.config import CONFIG_PATH, ConverterConfig, load_config
from docxpdf.docs import (
    DEFAULT_STYLE_MAP,
    StyleRule,
    convert_docx_to_html,
    read_docx_bytes,
    wrap_html,
)
from docxpdf.render import TempHtmlFile, render_file_to_pdf, render_html_to_pdf
from docxpdf.pipeline import convert_docx_to_pdf, run_conversion, write_pdf

__all__ = [
    # config
    "CONFIG_PATH",
    "ConverterConfig",
    "load_config",
    # markup
    "DEFAULT_STYLE_MAP",
    "StyleRule",
    "convert_docx_to_html",
    "read_docx_bytes",
    "wrap_html",
    # rendering
    "TempHtmlFile",
    "render_file_to_pdf",
    "render_html_to_pdf",
    # pipeline
    "convert_docx_to_pdf",
    "run_conversion",
    "write_pdf",
]


def _cli(argv=None) -> int:
    """CLI for DOCX → PDF conversion.

    --file / -f: Path to input DOCX (default: ./sample.docx)
    --out / -o: Output PDF path (default: ./output.pdf)
    --html: Also save the intermediate HTML document here
    --keep-html: Do not delete the temporary HTML file after rendering
    --format: Paper format passed to Chromium (default: A4)
    --margin: Uniform page margin (default: 1cm)
    --config: Path to converter.json (default: config/converter.json)
    """
    import argparse

    parser = argparse.ArgumentParser(description="Convert a DOCX document to PDF via HTML and headless Chromium.")
    parser.add_argument("--file", "-f", type=str, help="Path to input DOCX (default: ./sample.docx)")
    parser.add_argument("--out", "-o", type=str, help="Path to output PDF (default: ./output.pdf)")
    parser.add_argument("--html", type=str, help="Save the intermediate HTML document to this path")
    parser.add_argument("--keep-html", action="store_true", help="Keep the temporary HTML file after rendering")
    parser.add_argument("--format", type=str, help="Paper format, e.g. A4 or Letter (default: A4)")
    parser.add_argument("--margin", type=str, help="Uniform page margin as a CSS length (default: 1cm)")
    parser.add_argument("--config", type=str, default=CONFIG_PATH, help="Path to converter.json")

    args = parser.parse_args(argv)

    config = load_config(
        args.config,
        input_path=args.file,
        output_path=args.out,
        html_path=args.html,
        keep_html=True if args.keep_html else None,
        page_format=args.format,
        margin=args.margin,
    )

    try:
        run_conversion(config)
    except Exception as e:
        print(f"Error in main function: {e}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(_cli())
