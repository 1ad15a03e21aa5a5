"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — extraction completed (zero matches is still success)
  1   Error — output could not be created, the tree walk failed, bad config
  2   Usage error — reported by argparse itself
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
