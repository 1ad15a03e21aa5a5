"""Binary sniffing — classify a file by the first bytes it holds."""

from __future__ import annotations

import os

# Only this many leading bytes are ever inspected.
SNIFF_BYTES = 512


def looks_binary(path: str | os.PathLike[str]) -> bool:
    """Return True if the first ``SNIFF_BYTES`` bytes of *path* contain a NUL.

    Files that cannot be opened or read are reported as text; the caller's
    full content read is where such files get skipped.
    """
    try:
        with open(path, "rb") as fh:
            head = fh.read(SNIFF_BYTES)
    except OSError:
        return False
    return b"\x00" in head
