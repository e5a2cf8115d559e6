from __future__ import annotations

import io
from typing import Iterable, List

import mammoth

from .model import DEFAULT_STYLE_MAP, ConversionResult, StyleRule, style_map_text
from .template import wrap_html


def read_docx_bytes(path: str) -> bytes:
    """Read a DOCX file into memory. IO errors propagate unchanged."""
    with open(path, "rb") as f:
        return f.read()


def _format_messages(messages) -> List[str]:
    out: List[str] = []
    for m in messages or []:
        out.append(getattr(m, "message", str(m)))
    return out


def convert_docx_to_html(
    buffer: bytes,
    style_map: Iterable[StyleRule] = DEFAULT_STYLE_MAP,
    page_margin: str = "1cm",
) -> ConversionResult:
    """Convert DOCX bytes into a complete, printable HTML document.

    The buffer is not validated; a malformed archive makes mammoth raise and
    the exception reaches the caller as is.

    Doxygen:
    - @param buffer: Raw bytes of a DOCX container.
    - @param style_map: Ordered style rules passed to mammoth.
    - @param page_margin: Margin for the ``@page`` CSS rule.
    - @return: ConversionResult with the wrapped document, body fragment and mammoth messages.
    """
    result = mammoth.convert_to_html(io.BytesIO(buffer), style_map=style_map_text(style_map))
    fragment = result.value
    messages = _format_messages(result.messages)
    for msg in messages:
        print(f"Warning: {msg}")
    return ConversionResult(
        html=wrap_html(fragment, page_margin=page_margin),
        fragment=fragment,
        messages=messages,
    )
