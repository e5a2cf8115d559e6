import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Tuple

from docxpdf.docs.model import DEFAULT_STYLE_MAP, StyleRule

CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "config", "converter.json")


@dataclass(frozen=True)
class ConverterConfig:
    """Settings for a single DOCX → PDF run."""

    input_path: str = "./sample.docx"
    output_path: str = "./output.pdf"
    style_map: Tuple[StyleRule, ...] = DEFAULT_STYLE_MAP
    page_format: str = "A4"
    margin: str = "1cm"
    print_background: bool = True
    browser_args: Tuple[str, ...] = ("--no-sandbox", "--disable-setuid-sandbox")
    wait_until: str = "networkidle"
    # where to save the intermediate HTML document, if anywhere
    html_path: Optional[str] = None
    keep_html: bool = False

    def margins(self) -> Dict[str, str]:
        return {"top": self.margin, "right": self.margin, "bottom": self.margin, "left": self.margin}


_SEQUENCE_FIELDS = ("style_map", "browser_args")


def _coerce(name: str, value: Any) -> Any:
    if name == "style_map":
        return tuple(v if isinstance(v, StyleRule) else StyleRule.parse(v) for v in value)
    if name == "browser_args":
        return tuple(str(v) for v in value)
    return value


def load_config(path: str = CONFIG_PATH, **overrides: Any) -> ConverterConfig:
    """Load converter settings from config/converter.json and apply overrides.

    Missing or unreadable files fall back to defaults with a warning. Unknown
    keys are ignored; keyword overrides set to None are skipped.

    Doxygen:
    - @param path: Path to the JSON settings file.
    - @param overrides: Field values that take precedence over the file.
    - @return: ConverterConfig instance.
    - @throws ValueError: If a style rule in the file or overrides is malformed.
    - @throws TypeError: If an override names an unknown option.
    """
    known = {f.name for f in fields(ConverterConfig)}
    values: Dict[str, Any] = {}

    if not os.path.exists(path):
        print(f"Warning: converter.json not found at {path}")
    else:
        try:
            with open(path, "r", encoding="utf-8") as cfg_file:
                data = json.load(cfg_file) or {}
        except (OSError, json.JSONDecodeError) as exc:
            print(f"Warning: Could not load settings from {path}: {exc}")
            data = {}
        if not isinstance(data, dict):
            print(f"Warning: Could not load settings from {path}: expected a JSON object")
            data = {}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            if key in _SEQUENCE_FIELDS and not isinstance(value, list):
                print(f"Warning: Ignoring '{key}' in {path}: expected a list")
                continue
            values[key] = _coerce(key, value)

    for key, value in overrides.items():
        if value is None:
            continue
        if key not in known:
            raise TypeError(f"Unknown config option: {key}")
        values[key] = _coerce(key, value)

    return replace(ConverterConfig(), **values)
