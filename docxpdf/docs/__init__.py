"""DOCX loading and markup transformation layer.

Exposes:
- Data model: StyleRule, DEFAULT_STYLE_MAP, ConversionResult
- Loader: read_docx_bytes
- Transformer: convert_docx_to_html (mammoth + fixed print template)
"""

from .model import StyleRule, DEFAULT_STYLE_MAP, ConversionResult, style_map_text
from .template import DOCUMENT_CSS, wrap_html
from .docx_io import read_docx_bytes, convert_docx_to_html

__all__ = [
    "StyleRule",
    "DEFAULT_STYLE_MAP",
    "ConversionResult",
    "style_map_text",
    "DOCUMENT_CSS",
    "wrap_html",
    "read_docx_bytes",
    "convert_docx_to_html",
]
