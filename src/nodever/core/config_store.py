"""Global configuration data structures and loading.

Configuration is resolved once at the CLI entry point, in increasing order of
precedence: built-in defaults, ~/.nodever/config.toml, then NODEVER_*
environment variables.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

import tomlkit

DEFAULT_PREFIX = Path("/usr/local")
DEFAULT_MIRROR = "https://nodejs.org/dist"
DOWNLOADERS = ("auto", "requests", "curl", "wget")

ENV_PREFIX = "NODEVER_PREFIX"
ENV_MIRROR = "NODEVER_MIRROR"
ENV_DOWNLOADER = "NODEVER_DOWNLOADER"

CONFIG_KEYS = ("prefix", "mirror", "downloader", "http_timeout")


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in NodeverContext.
    """

    prefix: Path
    mirror: str
    downloader: str
    http_timeout: float | None

    @staticmethod
    def defaults() -> "GlobalConfig":
        return GlobalConfig(
            prefix=DEFAULT_PREFIX,
            mirror=DEFAULT_MIRROR,
            downloader="auto",
            http_timeout=None,
        )


def parse_config_value(key: str, raw: str) -> str | float:
    """Validate a value given as text (e.g. from `config set`).

    Raises:
        ValueError: If key is unknown or the value is invalid for it
    """
    if key not in CONFIG_KEYS:
        raise ValueError(f"Unknown configuration key '{key}' (known: {', '.join(CONFIG_KEYS)})")
    if key == "downloader" and raw not in DOWNLOADERS:
        raise ValueError(f"downloader must be one of: {', '.join(DOWNLOADERS)}")
    if key == "http_timeout":
        timeout = float(raw)
        if timeout <= 0:
            raise ValueError("http_timeout must be a positive number of seconds")
        return timeout
    if key == "mirror":
        return raw.rstrip("/")
    return raw


def apply_environment(config: GlobalConfig, environ: Mapping[str, str]) -> GlobalConfig:
    """Overlay NODEVER_* environment variables onto config."""
    if environ.get(ENV_PREFIX):
        config = replace(config, prefix=Path(environ[ENV_PREFIX]).expanduser())
    if environ.get(ENV_MIRROR):
        config = replace(config, mirror=environ[ENV_MIRROR].rstrip("/"))
    if environ.get(ENV_DOWNLOADER):
        downloader = environ[ENV_DOWNLOADER]
        if downloader not in DOWNLOADERS:
            raise ValueError(
                f"{ENV_DOWNLOADER} must be one of: {', '.join(DOWNLOADERS)} (got '{downloader}')"
            )
        config = replace(config, downloader=downloader)
    return config


class ConfigStore(ABC):
    """Abstract interface for persisted configuration.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a config file exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load config, falling back to defaults for missing keys.

        Raises:
            ValueError: If the file is malformed or holds invalid values
        """
        ...

    @abstractmethod
    def set_value(self, key: str, value: str | float) -> None:
        """Persist a single key."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Path of the config file (for messages)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation backed by ~/.nodever/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        config = GlobalConfig.defaults()
        config_path = self.path()
        if not config_path.exists():
            return config

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config file {config_path}: {e}") from e

        if "prefix" in data:
            config = replace(config, prefix=Path(str(data["prefix"])).expanduser())
        if "mirror" in data:
            config = replace(config, mirror=str(parse_config_value("mirror", str(data["mirror"]))))
        if "downloader" in data:
            downloader = parse_config_value("downloader", str(data["downloader"]))
            config = replace(config, downloader=str(downloader))
        if "http_timeout" in data:
            timeout = parse_config_value("http_timeout", str(data["http_timeout"]))
            config = replace(config, http_timeout=float(timeout))
        return config

    def set_value(self, key: str, value: str | float) -> None:
        """Write key into the config file, preserving existing formatting and comments."""
        config_path = self.path()

        if config_path.exists():
            with config_path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        else:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            doc = tomlkit.document()
            doc.add(tomlkit.comment("nodever configuration"))

        doc[key] = value

        with config_path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)

    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return Path.home() / ".nodever" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig.defaults()
        return self._config

    def set_value(self, key: str, value: str | float) -> None:
        current = self.load()
        if key == "prefix":
            self._config = replace(current, prefix=Path(str(value)))
        elif key == "http_timeout":
            self._config = replace(current, http_timeout=float(value))
        else:
            self._config = replace(current, **{key: str(value)})

    def path(self) -> Path:
        return Path("/fake/nodever/config.toml")


def load_config(store: ConfigStore, environ: Mapping[str, str] | None = None) -> GlobalConfig:
    """Resolve the effective configuration: file, then environment."""
    if environ is None:
        environ = os.environ
    return apply_environment(store.load(), environ)
