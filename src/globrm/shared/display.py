"""src/globrm/shared/display.py
What: Render filesystem paths as printable text.
Why: Names that are not valid UTF-8 must be shown losslessly instead of failing to encode.
"""

from __future__ import annotations

import os
from pathlib import PurePath


def printable_path(path: PurePath | str) -> str:
    """Return ``path`` with undecodable bytes shown as ``\\xNN`` escapes.

    ``os.scandir`` hands back such bytes as lone surrogates, which strict
    UTF-8 streams refuse to write.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")


__all__ = ["printable_path"]
