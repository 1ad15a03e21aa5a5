"""Shared utilities for file_extractor."""

from file_extractor.utils.exit_codes import ExitCode

__all__ = ["ExitCode"]
