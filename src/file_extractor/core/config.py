"""Scan configuration — the immutable value threaded through every component."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

import jsonschema
import yaml

from file_extractor.contracts.load import validate_instance

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB

CONFIG_SCHEMA = "extract_config.schema.json"

_OUTPUT_NAME_FORMAT = "extracted_content_%Y%m%d_%H%M%S.txt"


class ConfigError(ValueError):
    """A configuration file or option value could not be used."""


def default_output_name(now: datetime | None = None) -> str:
    """Timestamped report name, e.g. ``extracted_content_20240131_235959.txt``."""
    return (now or datetime.now()).strftime(_OUTPUT_NAME_FORMAT)


def parse_comma_separated(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Split ``".go, .md,,"`` into ``(".go", ".md")``.

    An already-split iterable is accepted too; its items are trimmed the
    same way.  Blank items are dropped.
    """
    if value is None:
        return ()
    parts = value.split(",") if isinstance(value, str) else list(value)
    return tuple(p.strip() for p in parts if p and p.strip())


def normalize_extensions(items: Iterable[str]) -> tuple[str, ...]:
    """Lower-case each extension and make sure it starts with a dot."""
    out: list[str] = []
    for item in parse_comma_separated(items):
        ext = item.lower()
        out.append(ext if ext.startswith(".") else f".{ext}")
    return tuple(out)


@dataclass(frozen=True)
class ScanConfig:
    """Immutable extraction configuration.

    List fields accept any iterable of strings (or a comma-separated
    string) and are normalized to tuples on construction.
    """

    root: Path = field(default_factory=lambda: Path("."))
    output: Path = field(default_factory=lambda: Path(default_output_name()))
    include_exts: tuple[str, ...] = ()
    exclude_exts: tuple[str, ...] = ()
    include_dirs: tuple[str, ...] = ()
    exclude_dirs: tuple[str, ...] = ()
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    follow_symlinks: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "output", Path(self.output))
        object.__setattr__(self, "include_exts", normalize_extensions(self.include_exts))
        object.__setattr__(self, "exclude_exts", normalize_extensions(self.exclude_exts))
        object.__setattr__(self, "include_dirs", parse_comma_separated(self.include_dirs))
        object.__setattr__(self, "exclude_dirs", parse_comma_separated(self.exclude_dirs))
        if self.max_file_size < 0:
            raise ValueError(f"max_file_size must be >= 0, got {self.max_file_size}")


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML config file and validate it against the bundled schema.

    Raises ``ConfigError`` when the file cannot be read, is not valid YAML,
    or does not match ``extract_config.schema.json``.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    try:
        validate_instance(data, CONFIG_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"{path}: {exc.message}") from exc
    return data


def config_from_options(
    file_values: Mapping[str, Any] | None = None,
    *,
    root: str | Path | None = None,
    output: str | Path | None = None,
    include_ext: str | Iterable[str] | None = None,
    exclude_ext: str | Iterable[str] | None = None,
    include_dir: str | Iterable[str] | None = None,
    exclude_dir: str | Iterable[str] | None = None,
    max_size: int | None = None,
    follow_symlinks: bool | None = None,
    verbose: bool | None = None,
    now: datetime | None = None,
) -> ScanConfig:
    """Build a ``ScanConfig`` from command-line style options.

    Options left as ``None`` fall back to *file_values* (keys as in the
    config file schema), then to the built-in defaults.
    """
    fv = dict(file_values or {})

    def pick(given: Any, key: str, default: Any = None) -> Any:
        if given is not None:
            return given
        return fv.get(key, default)

    try:
        return ScanConfig(
            root=Path(pick(root, "dir", ".")),
            output=Path(pick(output, "output") or default_output_name(now)),
            include_exts=pick(include_ext, "include_ext", ()),
            exclude_exts=pick(exclude_ext, "exclude_ext", ()),
            include_dirs=pick(include_dir, "include_dir", ()),
            exclude_dirs=pick(exclude_dir, "exclude_dir", ()),
            max_file_size=int(pick(max_size, "max_size", DEFAULT_MAX_FILE_SIZE)),
            follow_symlinks=bool(pick(follow_symlinks, "follow_symlinks", False)),
            verbose=bool(pick(verbose, "verbose", False)),
        )
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
