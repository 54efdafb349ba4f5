"""Configuration for convy."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from convy.errors import ConfigError

# Load .env file from project root
load_dotenv()

logger = logging.getLogger(__name__)

# Conventional commit types accepted without configuration
BUILTIN_TYPES = [
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
    "merge",
    "wip",
]

# Looked up in the working directory when no path is given
CONFIG_FILENAME = ".convy.json"

DEFAULT_CONFIG = {
    "additional_types": [],
    "require_breaking_change_footer": True,
    "strict_footers": False,
}

# Environment overrides
ENV_ADDITIONAL_TYPES = "CONVY_ADDITIONAL_TYPES"
ENV_REQUIRE_BREAKING_CHANGE_FOOTER = "CONVY_REQUIRE_BREAKING_CHANGE_FOOTER"
ENV_STRICT_FOOTERS = "CONVY_STRICT_FOOTERS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Config:
    """Validation policy.

    Attributes:
        additional_types: Extra commit types allowed on top of BUILTIN_TYPES
        require_breaking_change_footer: Require a BREAKING-CHANGE footer
            when the header carries '!'
        strict_footers: Reject non-footer lines in the footer paragraph
            instead of treating them as body text
    """

    additional_types: frozenset[str] = field(default_factory=frozenset)
    require_breaking_change_footer: bool = True
    strict_footers: bool = False

    def __post_init__(self):
        # Types are matched case-insensitively
        normalized = frozenset(t.strip().lower() for t in self.additional_types if t.strip())
        object.__setattr__(self, "additional_types", normalized)

    @property
    def allowed_types(self) -> frozenset[str]:
        return frozenset(BUILTIN_TYPES) | self.additional_types

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a Config from a decoded configuration file.

        Raises:
            ConfigError: If a key is unknown or has the wrong type
        """
        unknown = sorted(set(data) - set(DEFAULT_CONFIG))
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

        additional = data.get("additional_types") or []
        if isinstance(additional, str) or not all(isinstance(t, str) for t in additional):
            raise ConfigError("'additional_types' must be a list of strings")

        flags = {}
        for key in ("require_breaking_change_footer", "strict_footers"):
            value = data.get(key, DEFAULT_CONFIG[key])
            if not isinstance(value, bool):
                raise ConfigError(f"'{key}' must be true or false")
            flags[key] = value

        return cls(additional_types=frozenset(additional), **flags)

    def to_dict(self) -> dict:
        return {
            "additional_types": sorted(self.additional_types),
            "require_breaking_change_footer": self.require_breaking_change_footer,
            "strict_footers": self.strict_footers,
        }


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean environment value.

    Raises:
        ConfigError: If the value is not a recognised boolean
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def _read_config_file(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from a file and the environment.

    Defaults are overridden by the config file, which is overridden by
    environment variables.

    Args:
        path: Explicit config file. If None, .convy.json in the working
            directory is used when it exists.

    Returns:
        Config instance

    Raises:
        ConfigError: If an explicit file is missing or any source is invalid
    """
    data = dict(DEFAULT_CONFIG)

    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.is_file():
        logger.debug("Loading config from %s", config_path)
        data.update(_read_config_file(config_path))

    additional = os.getenv(ENV_ADDITIONAL_TYPES)
    if additional:
        data["additional_types"] = [t for t in additional.split(",") if t.strip()]

    for env_name, key in (
        (ENV_REQUIRE_BREAKING_CHANGE_FOOTER, "require_breaking_change_footer"),
        (ENV_STRICT_FOOTERS, "strict_footers"),
    ):
        raw = os.getenv(env_name)
        if raw:
            data[key] = parse_bool(raw, env_name)

    return Config.from_dict(data)


def write_default_config(path: Union[str, Path], force: bool = False) -> Path:
    """Write the default configuration file.

    Raises:
        ConfigError: If the file exists and force is False, or cannot be written
    """
    config_path = Path(path)
    if config_path.exists() and not force:
        raise ConfigError(f"Config file already exists: {config_path}")

    try:
        config_path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write config file {config_path}: {e}") from e

    return config_path
