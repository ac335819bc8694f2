# textrain/sources.py
from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import List, Optional, Union

from .errors import DocumentError

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".txt"


def _flatten(content: str) -> str:
    """Map control characters (newlines, tabs, ...) to spaces: one code point per cell."""
    return "".join(" " if not ch.isprintable() else ch for ch in content)


class TextSource:
    """
    Reads named text documents from a directory.

    By default that is the `assets` directory bundled with the package; pass
    `root` to read from somewhere else.
    """

    def __init__(self, root: Optional[Union[str, Path]] = None) -> None:
        if root is None:
            self.root = resources.files("textrain").joinpath("assets")
        else:
            self.root = Path(root).expanduser()

    def names(self) -> List[str]:
        try:
            entries = list(self.root.iterdir())
        except OSError as exc:
            logger.warning("cannot list documents in %s: %s", self.root, exc)
            return []
        return sorted(
            e.name for e in entries if e.is_file() and e.name.endswith(DOCUMENT_SUFFIX)
        )

    def read_document(self, name: str) -> str:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise DocumentError(name, "invalid document name")

        entry = self.root.joinpath(name)
        if not entry.is_file():
            raise DocumentError(name, "no such document")
        try:
            content = entry.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentError(name, str(exc)) from exc

        logger.debug("loaded %s (%d characters)", name, len(content))
        return _flatten(content)
