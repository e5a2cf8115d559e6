from __future__ import annotations

import os
import tempfile
import uuid
from pathlib import Path
from typing import Optional


class TempHtmlFile:
    """Uniquely named HTML file under the platform temp directory.

    Written on enter and removed on exit, whether the body succeeded or not.
    Debug mode (``keep=True``) leaves the file on disk for inspection.
    """

    def __init__(self, html: str, directory: Optional[str] = None, keep: bool = False) -> None:
        self.html = html
        self.keep = bool(keep)
        base = directory or tempfile.gettempdir()
        self.path = os.path.join(base, f"{uuid.uuid4()}.html")

    @property
    def uri(self) -> str:
        return Path(self.path).resolve().as_uri()

    def __enter__(self) -> "TempHtmlFile":
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(self.html)
        except BaseException:
            # removed even in keep mode
            self._remove()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def cleanup(self) -> None:
        if self.keep:
            print(f"Keeping intermediate HTML at {self.path}")
            return
        self._remove()

    def _remove(self) -> None:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
