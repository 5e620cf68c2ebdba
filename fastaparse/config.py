"""Environment and configuration helpers for the fastaparse CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .record import PREVIEW_LENGTH, WRAP_WIDTH

ENVIRONMENT_VARIABLES = (
    "FASTA_WRAP_WIDTH",
    "FASTA_PREVIEW_LENGTH",
    "FASTA_PREVIEW_RECORDS",
    "FASTA_SKIP_UNREADABLE",
)

PathLike = Union[str, Path]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class FastaSettings:
    """Defaults for rendering and reading, overridable from the environment."""

    wrap_width: int = WRAP_WIDTH
    preview_length: int = PREVIEW_LENGTH
    preview_records: int = 5
    skip_unreadable: bool = False

    def as_dict(self) -> Dict[str, object]:
        return {
            "FASTA_WRAP_WIDTH": self.wrap_width,
            "FASTA_PREVIEW_LENGTH": self.preview_length,
            "FASTA_PREVIEW_RECORDS": self.preview_records,
            "FASTA_SKIP_UNREADABLE": self.skip_unreadable,
        }


def load_env_file(start_path: Optional[PathLike] = None) -> Optional[Path]:
    """Load the closest .env into os.environ without overriding pre-existing values."""
    if start_path is not None:
        env_path = _find_upwards(Path(start_path).resolve())
    else:
        found = find_dotenv(usecwd=True)
        env_path = Path(found) if found else None
    if env_path is None:
        return None
    load_dotenv(env_path, override=False)
    return env_path


def collect_settings(start_path: Optional[PathLike] = None, env: Optional[Mapping[str, str]] = None) -> FastaSettings:
    """Source the .env file and build settings from FASTA_* variables."""
    if env is None:
        load_env_file(start_path)
        env = os.environ
    defaults = FastaSettings()
    return FastaSettings(
        wrap_width=_positive_int(env, "FASTA_WRAP_WIDTH", defaults.wrap_width),
        preview_length=_positive_int(env, "FASTA_PREVIEW_LENGTH", defaults.preview_length),
        preview_records=_positive_int(env, "FASTA_PREVIEW_RECORDS", defaults.preview_records),
        skip_unreadable=_flag(env, "FASTA_SKIP_UNREADABLE", defaults.skip_unreadable),
    )


def _find_upwards(start: Path) -> Optional[Path]:
    current = start
    last = None
    while last != current:
        candidate = current / ".env"
        if candidate.is_file():
            return candidate
        last = current
        current = current.parent
    return None


def _positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value


def _flag(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean flag, got {raw!r}")
