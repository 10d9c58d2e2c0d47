"""
Pydantic Settings for logfacade configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import LoggingConfig

CONFIG_FILE_NAME = ".logfacade.toml"


def _get_log():
    from .di import get_log

    return get_log()


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .logfacade.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.logfacade] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "logfacade" in data["tool"]:
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_log().debug0("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_log().debug0("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.path: Path | None = None
        self.error: Exception | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        self.path = path
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("logfacade", {})

            self._data = data

        except tomllib.TOMLDecodeError as e:
            _get_log().warn0("Failed to parse config file %s: %s", path, e)
            self.error = e
        except OSError as e:
            _get_log().warn0("Failed to read config file %s: %s", path, e)
            self.error = e

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class LogFacadeSettings(BaseSettings):
    """logfacade settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (LOGFACADE_<section>__<field>)
    3. TOML config file (.logfacade.toml or pyproject.toml [tool.logfacade])
    4. Model defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGFACADE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The TOML source is prepared by load_settings(); plain construction
        (``LogFacadeSettings()``) skips config files.
        """
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)
        if _current_toml_source is not None:
            sources = (*sources, _current_toml_source)
        return sources

    @property
    def config_file(self) -> str | None:
        """Path of the config file that was loaded, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Description of a config file read/parse failure, if any."""
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dict."""
        result: dict[str, Any] = {
            "logging": self.logging.model_dump(mode="json"),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


# Module-level variable for passing to settings_customise_sources
_current_toml_source: TomlConfigSource | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    *,
    strict: bool = False,
    **overrides: Any,
) -> LogFacadeSettings:
    """Load logfacade settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        strict: Raise instead of recording a config file failure
        **overrides: Explicit values, highest priority

    Returns:
        LogFacadeSettings instance with all sources merged

    Raises:
        ConfigFileError: In strict mode, if the config file cannot be read or parsed
        ConfigValidationError: If the merged values fail validation
    """
    global _current_toml_source

    toml_source = TomlConfigSource(LogFacadeSettings, config_path, start_dir)
    toml_source()

    if toml_source.error is not None and strict:
        raise ConfigFileError(
            f"Failed to load config file: {toml_source.error}",
            file_path=str(toml_source.path),
            cause=toml_source.error,
        )

    _current_toml_source = toml_source
    try:
        settings = LogFacadeSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        raise ConfigValidationError(
            f"Invalid logfacade settings: {first.get('msg', e)}",
            key=".".join(str(part) for part in first.get("loc", ())) or None,
            context={"config_file": str(toml_source.path)} if toml_source.path else None,
        ) from e
    finally:
        _current_toml_source = None

    if toml_source.path is not None:
        settings._config_file = str(toml_source.path)
    if toml_source.error is not None:
        settings._config_error = f"Failed to load config file: {toml_source.error}"
    return settings
