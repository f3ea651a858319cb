"""
Keyspace Configuration Management
==================================

Centralized configuration for the Keyspace toolkit using Python dataclasses
and TOML-based persistence.

Configuration is kept separate from code: the guess rate, the demo
dictionary of known-weak passwords, and the meter thresholds can all be
overridden from a ``config.toml`` without touching the analyzers.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

# Illustrative list only -- not a breach corpus.
DEFAULT_DICTIONARY: tuple[str, ...] = (
    "password",
    "123456",
    "qwerty",
    "letmein",
    "welcome",
    "admin",
    "iloveyou",
    "12345678",
)

DEFAULT_GUESS_RATE: float = 2_000_000_000.0  # 2 billion guesses/s


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class MeterConfig:
    """Configuration for the strength meter and attack simulator.

    Parameters governing the crack-time projection, the demo dictionary
    attack, the requirement checklist, and password suggestions.
    """

    guess_rate: float = DEFAULT_GUESS_RATE
    dictionary: list[str] = field(default_factory=lambda: list(DEFAULT_DICTIONARY))
    min_length: int = 8
    max_entropy_bits: float = 80.0
    generator_length: int = 14
    animation_max_ms: int = 2500


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, output directory, and debug flag."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class KeyspaceConfig:
    """Master configuration aggregating global and meter settings.

    Usage:
        >>> config = KeyspaceConfig.load()                  # from default path
        >>> config = KeyspaceConfig.load("custom.toml")     # from custom path
        >>> print(config.meter.guess_rate)
        2000000000.0
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    meter: MeterConfig = field(default_factory=MeterConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> KeyspaceConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`KeyspaceConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            meter=cls._build_section(MeterConfig, raw.get("meter", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> KeyspaceConfig:
    """Module-level convenience wrapper around :meth:`KeyspaceConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = KeyspaceConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
