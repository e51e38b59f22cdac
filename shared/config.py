"""
PassGauge Configuration Management
===================================

Centralized configuration for the PassGauge service and CLI using Python
dataclasses and TOML-based persistence.

Configuration is kept apart from code following the Twelve-Factor App
methodology (Wiggins, 2011). Every key has a default, so a missing
configuration file simply yields the built-in settings.

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
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

# Known weak substrings shipped with the service.
DEFAULT_WEAK_TOKENS: tuple[str, ...] = ("1234", "password", "admin", "qwerty", "aaaa")

SUPPORTED_MATCHERS: tuple[str, ...] = ("kmp", "naive")


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class ServerConfig:
    """Configuration for the HTTP analysis endpoint.

    The defaults reproduce the historical deployment: listen on every
    interface, port 5000, and accept cross-origin requests from anywhere.
    """

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=False, slots=True)
class ScorerConfig:
    """Configuration for the password scoring heuristic.

    Attributes:
        weak_tokens: Dictionary of weak substrings, loaded once at startup.
        matcher:     Operative substring matcher (``"kmp"`` or ``"naive"``).
        cross_check: Run both matchers and log any disagreement.
    """

    weak_tokens: list[str] = field(default_factory=lambda: list(DEFAULT_WEAK_TOKENS))
    matcher: str = "kmp"
    cross_check: bool = False

    def dictionary(self) -> tuple[str, ...]:
        """Return the normalised, immutable weak-token dictionary.

        Tokens are trimmed of surrounding whitespace and lower-cased,
        entries left empty are dropped and duplicates are removed keeping
        the first occurrence.
        """
        seen: dict[str, None] = {}
        for token in self.weak_tokens:
            normalised = str(token).strip().lower()
            if normalised:
                seen.setdefault(normalised, None)
        return tuple(seen)


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, log destination and debug mode."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    console_logging: bool = True
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class GaugeConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = GaugeConfig.load()                  # from default path
        >>> config = GaugeConfig.load("custom.toml")     # from custom path
        >>> print(config.server.port)
        5000
        >>> print(config.gauge.matcher)
        'kmp'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    gauge: ScorerConfig = field(default_factory=ScorerConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> GaugeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root. Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`GaugeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: If the file is not valid TOML or a value has the
                wrong type.
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

        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> GaugeConfig:
        """Build a configuration from an already-parsed TOML mapping."""
        return cls(
            global_settings=cls._build_section(GlobalConfig, "global", raw.get("global", {})),
            server=cls._build_section(ServerConfig, "server", raw.get("server", {})),
            gauge=cls._build_section(ScorerConfig, "gauge", raw.get("gauge", {})),
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
    def _build_section(cls: type, name: str, data: Any) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that newer config
        files keep loading on older releases. Known keys must have the
        type of their default.

        Raises:
            ValueError: If the section is not a table or a value has the
                wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"[{name}] must be a table")

        defaults = cls()
        filtered: dict[str, Any] = {}
        for key in cls.__dataclass_fields__:  # type: ignore[attr-defined]
            if key not in data:
                continue
            value, default = data[key], getattr(defaults, key)
            expected = str if default is None else type(default)
            if not isinstance(value, expected) or (
                expected is int and isinstance(value, bool)
            ):
                raise ValueError(
                    f"[{name}] {key} must be of type {expected.__name__}"
                )
            filtered[key] = value
        return cls(**filtered)

