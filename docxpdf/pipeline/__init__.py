"""High-level pipeline orchestration for DOCX → HTML → PDF."""

from .process import (
    convert_docx_to_pdf,
    run_conversion,
    write_pdf,
)

__all__ = [
    "convert_docx_to_pdf",
    "run_conversion",
    "write_pdf",
]
