"""
Configuration for the colview.io module.

Defines IoSettings, a frozen dataclass carrying runtime configuration for the
polars storage adapter and file readers. Defaults are sourced from
colview.core.constants (the single source of truth).

Precedence
- environment (COLVIEW_IO_*) > TOML (colview.toml or [tool.colview.io]) > defaults.

Notes
- Loaders ignore values they cannot parse and keep the previous layer's value;
  call IoSettings.validate() to reject out-of-range settings explicitly.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from colview.core.constants import CSV_SEPARATOR as CORE_CSV_SEPARATOR
from colview.core.constants import ENV_PREFIX
from colview.core.constants import INFER_SCHEMA_LENGTH as CORE_INFER_SCHEMA_LENGTH
from colview.core.constants import NULL_VALUES as CORE_NULL_VALUES
from colview.core.constants import STRICT_TYPES as CORE_STRICT_TYPES

from .errors import IoConfigError


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


@dataclass(frozen=True)
class IoSettings:
    """
    Runtime settings for the colview.io layer.

    Attributes:
        root_dir (str): Base directory for relative paths passed to readers.
        csv_separator (str): Single-character field separator for CSV reads.
        infer_schema_length (int): Rows inspected by polars to infer CSV dtypes (>=1).
        strict_types (bool): Reject columns whose dtype has no ColumnType tag.
            When False such columns are tagged ColumnType.UNKNOWN.
        null_values (tuple[str, ...]): Cell values read as null from CSV.

    Examples:
        >>> from colview.io import IoSettings
        >>> IoSettings(root_dir="data", strict_types=False)  # doctest: +ELLIPSIS
        IoSettings(...)
    """

    root_dir: str = "."
    csv_separator: str = CORE_CSV_SEPARATOR
    infer_schema_length: int = CORE_INFER_SCHEMA_LENGTH
    strict_types: bool = CORE_STRICT_TYPES
    null_values: tuple[str, ...] = CORE_NULL_VALUES

    def validate(self) -> IoSettings:
        """
        Check value ranges, returning self for chaining.

        Raises:
            IoConfigError: If a setting is out of range.
        """
        if len(self.csv_separator) != 1:
            raise IoConfigError(f"csv_separator must be a single character, got {self.csv_separator!r}")
        if self.infer_schema_length < 1:
            raise IoConfigError(
                f"infer_schema_length must be >= 1, got {self.infer_schema_length}"
            )
        return self

    def resolve(self, path: str | os.PathLike[str]) -> Path:
        """Resolve ``path`` against root_dir unless it is absolute."""
        p = Path(path)
        if p.is_absolute():
            return p
        return Path(self.root_dir) / p

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: IoSettings, cfg: dict[str, Any] | None) -> IoSettings:
        """Apply a loose config mapping onto IoSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "root_dir" in cfg and isinstance(cfg["root_dir"], str):
            s = replace(s, root_dir=cfg["root_dir"])

        if "csv_separator" in cfg and isinstance(cfg["csv_separator"], str):
            sep = cfg["csv_separator"]
            if sep in ("\\t", "tab"):
                sep = "\t"
            if len(sep) == 1:
                s = replace(s, csv_separator=sep)

        if "infer_schema_length" in cfg:
            try:
                s = replace(s, infer_schema_length=int(cfg["infer_schema_length"]))
            except (TypeError, ValueError):
                pass

        if "strict_types" in cfg:
            s = replace(s, strict_types=_bool(cfg["strict_types"]))

        if "null_values" in cfg:
            nv = cfg["null_values"]
            if isinstance(nv, str):
                nv = [part.strip() for part in nv.split(",")]
            if isinstance(nv, (list, tuple)):
                s = replace(s, null_values=tuple(str(v) for v in nv))

        return s

    @classmethod
    def from_env(cls, base: IoSettings | None = None, prefix: str = ENV_PREFIX) -> IoSettings:
        """
        Build IoSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - COLVIEW_IO_ROOT_DIR
            - COLVIEW_IO_CSV_SEPARATOR (single character, or "tab")
            - COLVIEW_IO_INFER_SCHEMA_LENGTH
            - COLVIEW_IO_STRICT_TYPES (1/0/true/false/yes/no/on/off)
            - COLVIEW_IO_NULL_VALUES (comma-separated)
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("root_dir", "csv_separator", "infer_schema_length", "strict_types", "null_values"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> IoSettings:
        """
        Build IoSettings from a TOML file.

        Search order when `path` is None:
            1) ./colview.toml (with either an [io] table or top-level keys)
            2) ./pyproject.toml under [tool.colview.io]

        Returns defaults if no file is present or none carries settings.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "colview.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("colview", {}).get("io", {}) if isinstance(tool, dict) else None
            elif "io" in data and isinstance(data["io"], dict):
                cfg = data["io"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> IoSettings:
        """
        Load IoSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (colview.toml, pyproject.toml).

        Returns:
            IoSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
