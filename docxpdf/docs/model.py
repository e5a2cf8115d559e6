from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class StyleRule:
    source: str
    target: str

    @classmethod
    def parse(cls, text: str) -> "StyleRule":
        """Build a rule from mammoth notation, e.g. ``"p[style-name='Title'] => h1.title:fresh"``."""
        source, sep, target = str(text).partition("=>")
        if not sep or not source.strip() or not target.strip():
            raise ValueError(f"Invalid style rule: '{text}'. Expected '<source> => <target>'.")
        return cls(source=source.strip(), target=target.strip())

    def __str__(self) -> str:
        return f"{self.source} => {self.target}"


DEFAULT_STYLE_MAP: Tuple[StyleRule, ...] = (
    StyleRule("p[style-name='Heading 1']", "h1:fresh"),
    StyleRule("p[style-name='Heading 2']", "h2:fresh"),
    StyleRule("p[style-name='Heading 3']", "h3:fresh"),
    StyleRule("p[style-name='Title']", "h1.title:fresh"),
    StyleRule("table", "table.docx-table"),
    StyleRule("r[style-name='Strong']", "strong"),
)


def style_map_text(rules: Iterable[StyleRule]) -> str:
    # mammoth reads one rule per line; order matters
    return "\n".join(str(r) for r in rules)


@dataclass
class ConversionResult:
    html: str
    fragment: str
    messages: List[str] = field(default_factory=list)
