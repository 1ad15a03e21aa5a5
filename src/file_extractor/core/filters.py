"""Filter predicates — extension and directory-name checks.

All checks are case-insensitive existence tests, so duplicate or mixed-case
list items are harmless.  None of these functions touch the filesystem.
"""

from __future__ import annotations

import os
from typing import Iterable


def _contains_fold(items: Iterable[str], value: str) -> bool:
    needle = value.lower()
    return any(item.lower() == needle for item in items)


def file_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased extension of *path*, including the leading dot.

    The extension starts at the last ``.`` of the final path element, so
    ``archive.tar.gz`` gives ``.gz`` and a dotfile such as ``.env`` gives
    ``.env``.  Names without a dot give ``""``.
    """
    name = os.path.basename(os.fspath(path))
    idx = name.rfind(".")
    if idx < 0:
        return ""
    return name[idx:].lower()


def extension_allowed(
    path: str | os.PathLike[str],
    include: Iterable[str],
    exclude: Iterable[str],
) -> bool:
    """Decide whether *path* passes the include/exclude extension lists.

    Exclusion is checked first and wins when both lists name the extension.
    An empty include list admits every extension.
    """
    ext = file_extension(path)
    exclude = tuple(exclude)
    if exclude and _contains_fold(exclude, ext):
        return False
    include = tuple(include)
    if include and not _contains_fold(include, ext):
        return False
    return True


def dir_excluded(name: str, exclude: Iterable[str]) -> bool:
    """True when directory *name* is listed in *exclude* (prunes its subtree)."""
    return _contains_fold(exclude, name)


def dir_included(name: str, include: Iterable[str]) -> bool:
    """True when *include* is empty or lists directory *name*.

    Never used for pruning: a directory missing from the include list may
    still hold descendants whose names are listed.
    """
    include = tuple(include)
    if not include:
        return True
    return _contains_fold(include, name)
