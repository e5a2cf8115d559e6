"""Fixed HTML5 shell wrapped around the converted document body."""

from __future__ import annotations

DOCUMENT_CSS = """
    body {{
      font-family: Arial, sans-serif;
      line-height: 1.5;
      margin: 40px;
    }}
    table.docx-table {{
      border-collapse: collapse;
      width: 100%;
      margin: 15px 0;
    }}
    table.docx-table td, table.docx-table th {{
      border: 1px solid #ddd;
      padding: 8px;
    }}
    h1, h2, h3, h4, h5, h6 {{
      margin-top: 20px;
      margin-bottom: 10px;
      font-weight: bold;
    }}
    h1 {{ font-size: 24pt; }}
    h2 {{ font-size: 18pt; }}
    h3 {{ font-size: 14pt; }}
    p {{ margin: 10px 0; }}
    img {{ max-width: 100%; }}
    @page {{
      margin: {page_margin};
    }}
"""

_SHELL = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <style>{css}</style>
  </head>
  <body>
{body}
  </body>
</html>
"""


def wrap_html(fragment: str, page_margin: str = "1cm") -> str:
    """Embed a body fragment, unmodified, into the printable document template.

    Doxygen:
    - @param fragment: HTML produced for the document body.
    - @param page_margin: CSS length used by the ``@page`` rule.
    - @return: Complete HTML document string.
    """
    css = DOCUMENT_CSS.format(page_margin=page_margin)
    return _SHELL.format(css=css, body=fragment or "")
