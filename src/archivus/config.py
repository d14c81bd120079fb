# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration loading for :mod:`archivus`.

Settings come from an optional TOML or YAML file and are then overridden by
``ARCHIVUS_*`` environment variables. Keys may sit at the top level or be
grouped under ``[traversal]`` and ``[logging]`` sections::

    [traversal]
    max_depth = 64
    follow_symlinks = false

    [logging]
    level = "DEBUG"
    format = "json"
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, cast

import yaml

from .errors import ConfigError, NotFoundError

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MAX_DEPTH",
    "ENV_FOLLOW_SYMLINKS",
    "ENV_LOG_FORMAT",
    "ENV_LOG_LEVEL",
    "ENV_MAX_DEPTH",
    "ArchivusConfig",
    "ConfigError",
    "load_config",
]

DEFAULT_CONFIG_PATH: Final[Path] = Path("~/.config/archivus/config.toml")
DEFAULT_MAX_DEPTH: Final[int] = 1000

ENV_MAX_DEPTH: Final[str] = "ARCHIVUS_MAX_DEPTH"
ENV_FOLLOW_SYMLINKS: Final[str] = "ARCHIVUS_FOLLOW_SYMLINKS"
ENV_LOG_LEVEL: Final[str] = "ARCHIVUS_LOG_LEVEL"
ENV_LOG_FORMAT: Final[str] = "ARCHIVUS_LOG_FORMAT"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})
_LOG_FORMATS: Final[frozenset[str]] = frozenset({"json", "text"})
_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
)


@dataclass(frozen=True, slots=True)
class ArchivusConfig:
    """Resolved archivus settings.

    Attributes:
        max_depth: Deepest directory level a recursive walk descends into.
            Direct children of the root are at depth 1.
        follow_symlinks: Descend into symlinked directories during recursive
            walks. Off by default; ``max_depth`` still bounds the walk.
        log_level: Level handed to :func:`archivus.logging.configure_logging`.
        log_format: ``"json"`` or ``"text"``.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    follow_symlinks: bool = False
    log_level: str | None = None
    log_format: str | None = None

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be at least 1 (got {self.max_depth})."
            raise ConfigError(msg)
        if self.log_level is not None and self.log_level.upper() not in _LOG_LEVELS:
            msg = f"log_level must be a logging level name (got {self.log_level!r})."
            raise ConfigError(msg)
        if self.log_format is not None and self.log_format not in _LOG_FORMATS:
            msg = f"log_format must be 'json' or 'text' (got {self.log_format!r})."
            raise ConfigError(msg)


def load_config(
    path: Path | str | Mapping[str, Any] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ArchivusConfig:
    """Load and validate archivus configuration.

    Args:
        path: Configuration file. ``None`` falls back to
            ``~/.config/archivus/config.toml`` when it exists. Tests may pass
            an in-memory mapping to skip filesystem I/O.
        env: Optional environment mapping. Defaults to :data:`os.environ`.

    Returns:
        The resolved :class:`ArchivusConfig`.

    Raises:
        NotFoundError: An explicitly named file does not exist.
        ConfigError: The file or an override holds an invalid value.
    """

    env_map = os.environ if env is None else env

    if isinstance(path, Mapping):
        config_data: dict[str, object] = dict(cast(Mapping[str, object], path))
    else:
        config_path = (
            Path(path) if path is not None else DEFAULT_CONFIG_PATH.expanduser()
        )
        config_data = _load_config_file(config_path, explicit=path is not None)

    config = _normalise_config(config_data)
    config = _apply_environment_overrides(config=config, env=env_map)
    return _build_config(config)


def _load_config_file(path: Path, *, explicit: bool) -> dict[str, object]:
    if not path.exists():
        if not explicit:
            return {}
        raise NotFoundError(
            "Configuration file not found", operation="load_config", path=str(path)
        )

    suffix = path.suffix.lower()
    data: object
    if suffix == ".toml" or not suffix:
        with path.open("rb") as handle:
            try:
                data = tomllib.load(handle)
            except tomllib.TOMLDecodeError as err:
                raise ConfigError(
                    str(err), operation="load_config", path=str(path)
                ) from err
    elif suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = yaml.safe_load(handle) or {}
            except yaml.YAMLError as err:
                raise ConfigError(
                    str(err), operation="load_config", path=str(path)
                ) from err
    else:
        msg = f"Unsupported configuration format: {path.suffix}"
        raise ConfigError(msg, operation="load_config", path=str(path))

    if not isinstance(data, MutableMapping):
        msg = "Configuration file must contain a mapping at the root."
        raise ConfigError(msg, operation="load_config", path=str(path))

    typed_data: dict[str, object] = {}
    for key, value in cast(MutableMapping[object, object], data).items():
        if not isinstance(key, str):
            msg = f"Configuration keys must be strings (got {key!r})."
            raise ConfigError(msg, operation="load_config", path=str(path))
        typed_data[key] = value
    return typed_data


def _section(raw: Mapping[str, object], name: str) -> Mapping[str, object]:
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        msg = f"[{name}] must be a table."
        raise ConfigError(msg)
    return cast(Mapping[str, object], section)


def _normalise_config(raw: Mapping[str, object]) -> dict[str, object]:
    traversal = _section(raw, "traversal")
    logging_section = _section(raw, "logging")
    return {
        "max_depth": traversal.get("max_depth", raw.get("max_depth")),
        "follow_symlinks": traversal.get(
            "follow_symlinks", raw.get("follow_symlinks")
        ),
        "log_level": logging_section.get("level", raw.get("log_level")),
        "log_format": logging_section.get("format", raw.get("log_format")),
    }


def _apply_environment_overrides(
    *, config: dict[str, object], env: Mapping[str, str]
) -> dict[str, object]:
    updated = dict(config)
    if (value := env.get(ENV_MAX_DEPTH)) is not None:
        updated["max_depth"] = value
    if (value := env.get(ENV_FOLLOW_SYMLINKS)) is not None:
        updated["follow_symlinks"] = value
    if (value := env.get(ENV_LOG_LEVEL)) is not None:
        updated["log_level"] = value
    if (value := env.get(ENV_LOG_FORMAT)) is not None:
        updated["log_format"] = value
    return updated


def _build_config(config: Mapping[str, object]) -> ArchivusConfig:
    max_depth = _coerce_int(config.get("max_depth"), "max_depth")
    follow_symlinks = _coerce_bool(config.get("follow_symlinks"), "follow_symlinks")
    log_level = _coerce_optional_str(config.get("log_level"), "log_level")
    log_format = _coerce_optional_str(config.get("log_format"), "log_format")
    return ArchivusConfig(
        max_depth=DEFAULT_MAX_DEPTH if max_depth is None else max_depth,
        follow_symlinks=bool(follow_symlinks),
        log_level=log_level.upper() if log_level is not None else None,
        log_format=log_format.lower() if log_format is not None else None,
    )


def _coerce_int(value: object, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        msg = f"{field_name} must be an integer (got {value!r})."
        raise ConfigError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    msg = f"{field_name} must be an integer (got {value!r})."
    raise ConfigError(msg)


def _coerce_bool(value: object, field_name: str) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    msg = f"{field_name} must be a boolean (got {value!r})."
    raise ConfigError(msg)


def _coerce_optional_str(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    msg = f"{field_name} must be a string (got {value!r})."
    raise ConfigError(msg)
