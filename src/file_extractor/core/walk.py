"""Tree walk — a lazy, depth-first sequence of filesystem entries.

The walk knows nothing about filters.  It yields one ``Entry`` at a time in
pre-order, each directory's children sorted by name, and the consumer
decides what to do with it.  Calling ``entry.prune()`` before asking for
the next entry stops the walk from descending into that directory.

Errors met along the way (a directory that cannot be listed, a symlink
loop) are yielded as entries with ``error`` set; only an unreachable root
raises.
"""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class EntryKind(str, Enum):
    """Type tag of a visited filesystem node (symlinks are not resolved)."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class WalkError(OSError):
    """The walk root could not be reached.

    Fatal for the run: a missing or unreadable root never yields an empty
    report.
    """



@dataclass(eq=False)
class Entry:
    """One visited node.  Only valid for the duration of its visit."""

    path: str
    name: str
    kind: EntryKind
    error: OSError | None = None
    _dir_entry: os.DirEntry | None = field(default=None, repr=False)
    _pruned: bool = field(default=False, repr=False)

    @property
    def pruned(self) -> bool:
        return self._pruned

    def prune(self) -> None:
        """Do not descend into this entry."""
        self._pruned = True

    def stat(self) -> os.stat_result:
        """Metadata of the entry, following symlinks.  May raise ``OSError``."""
        if self._dir_entry is not None:
            return self._dir_entry.stat()
        return os.stat(self.path)

    def is_dir(self, *, follow_symlinks: bool = False) -> bool:
        if self.kind is EntryKind.DIRECTORY:
            return True
        if self.kind is EntryKind.SYMLINK and follow_symlinks:
            try:
                return stat.S_ISDIR(self.stat().st_mode)
            except OSError:
                return False
        return False


def _kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def _from_dir_entry(parent: str, d: os.DirEntry) -> Entry:
    path = os.path.normpath(os.path.join(parent, d.name))
    try:
        if d.is_symlink():
            kind = EntryKind.SYMLINK
        elif d.is_dir(follow_symlinks=False):
            kind = EntryKind.DIRECTORY
        elif d.is_file(follow_symlinks=False):
            kind = EntryKind.FILE
        else:
            kind = EntryKind.OTHER
    except OSError as exc:
        return Entry(path=path, name=d.name, kind=EntryKind.OTHER, error=exc)
    return Entry(path=path, name=d.name, kind=kind, _dir_entry=d)


def _children(parent: Entry) -> Iterator[Entry]:
    # The listing is read in full and its handle closed before any child
    # is handed out.
    try:
        with os.scandir(parent.path) as it:
            listing = sorted(it, key=lambda d: d.name)
    except OSError as exc:
        yield Entry(path=parent.path, name=parent.name, kind=parent.kind, error=exc)
        return
    for d in listing:
        yield _from_dir_entry(parent.path, d)


def iter_entries(
    root: str | os.PathLike[str],
    *,
    follow_symlinks: bool = False,
) -> Iterator[Entry]:
    """Yield *root* and every node beneath it, depth-first.

    The root itself is resolved through symlinks.  Below it, symlinked
    directories are descended only when *follow_symlinks* is set, and a
    directory that is one of its own ancestors (same device and inode) is
    reported as an ``ELOOP`` error entry instead of being entered again.
    The same directory reached along two different non-cyclic paths is
    walked under both.

    Raises ``WalkError`` when the root cannot be stat'ed.
    """
    top_path = os.fspath(root)
    try:
        top_stat = os.stat(top_path)
    except OSError as exc:
        raise WalkError(exc.errno, exc.strerror, top_path) from exc

    top = Entry(
        path=top_path,
        name=os.path.basename(os.path.normpath(top_path)),
        kind=_kind_from_mode(top_stat.st_mode),
    )
    yield top
    if top.pruned or top.kind is not EntryKind.DIRECTORY:
        return

    # Each frame carries the (st_dev, st_ino) of the directory it lists;
    # ``ancestors`` holds the keys of the frames currently on the stack.
    top_key = (top_stat.st_dev, top_stat.st_ino)
    ancestors = {top_key}
    stack: list[tuple[Iterator[Entry], tuple[int, int] | None]] = [(_children(top), top_key)]
    while stack:
        children, frame_key = stack[-1]
        entry = next(children, None)
        if entry is None:
            stack.pop()
            ancestors.discard(frame_key)
            continue

        yield entry

        if entry.pruned or entry.error is not None:
            continue
        if not entry.is_dir(follow_symlinks=follow_symlinks):
            continue

        key = None
        if follow_symlinks:
            try:
                st = entry.stat()
            except OSError as exc:
                yield Entry(path=entry.path, name=entry.name, kind=entry.kind, error=exc)
                continue
            key = (st.st_dev, st.st_ino)
            if key in ancestors:
                loop = OSError(errno.ELOOP, "directory is its own ancestor", entry.path)
                yield Entry(path=entry.path, name=entry.name, kind=entry.kind, error=loop)
                continue
            ancestors.add(key)

        stack.append((_children(entry), key))
