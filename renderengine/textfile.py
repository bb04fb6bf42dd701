"""Reading and writing whole text files."""

from __future__ import annotations

import os
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def read_text_file(path: PathLike) -> Optional[str]:
    """Return the text of ``path``, or None when the file is empty.

    Raises OSError when the file cannot be opened.
    """
    with open(path, "r") as handle:
        content = handle.read()
    return content or None


def write_text_file(path: PathLike, text: str) -> int:
    """Replace the contents of ``path`` with ``text``; return characters written.

    Raises OSError when the file cannot be written completely.
    """
    with open(path, "w") as handle:
        written = handle.write(text)
    if written != len(text):
        raise OSError(f"short write to {path}: {written} of {len(text)} characters")
    return written