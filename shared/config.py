"""
Cryptex Configuration Management
=================================

Centralized configuration for the Cryptex classical cipher toolkit using
Python dataclasses and TOML-based persistence.

Configuration is kept apart from code: every tunable (logging, output
format, input limits, console extras) lives in an optional ``config.toml``
and falls back to the dataclass defaults below.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Config ===========================


@dataclass(frozen=False, slots=True)
class CryptexConfig:
    """Configuration for Cryptex -- Classical Cipher Library.

    Controls request limits and the optional console extras shown next
    to an encryption or decryption result.
    """

    default_cipher: str = "caesar"
    max_input_length: int = 1_048_576  # characters
    show_matrix: bool = True
    show_profile: bool = False
    output_format: str = "console"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, log destination and output directory."""

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class AppConfig:
    """Master configuration aggregating global and tool settings.

    Usage:
        >>> config = AppConfig.load()                  # from default path
        >>> config = AppConfig.load("custom.toml")     # from custom path
        >>> print(config.cryptex.default_cipher)
        'caesar'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    cryptex: CryptexConfig = field(default_factory=CryptexConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> AppConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`AppConfig` instance.

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
            cryptex=cls._build_section(CryptexConfig, raw.get("cryptex", {})),
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

def get_config(path: str | Path | None = None) -> AppConfig:
    """Module-level convenience wrapper around :meth:`AppConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = AppConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
