"""Load mbasic-term configuration"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import toml

from .config_classes import EngineConfig, FilesConfig, TerminalConfig
from .exceptions import UserResolvableError

LOG = logging.getLogger(__name__)

DEFAULT_CONFIG_FILEPATH = Path("mbasic.toml")


class ConfigError(UserResolvableError):
    """Error loading configuration"""


@dataclass
class Config:
    root: Path
    config_file: Union[Path, None]
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    files: FilesConfig = field(default_factory=FilesConfig)


def default() -> Config:
    """A configuration with every section at its defaults"""
    return Config(root=Path(".").resolve(), config_file=None)


def load(args: dict) -> Config:
    """Load the configuration named in ARGS, or the default file if it exists

    A missing default file is fine (everything has a default). A missing file
    the user asked for explicitly is not.
    """
    explicit = args.get("--config")
    config_file = Path(explicit) if explicit else DEFAULT_CONFIG_FILEPATH

    try:
        data = toml.load(config_file)
    except FileNotFoundError:
        if explicit:
            raise ConfigError(
                f"{config_file} not found", "Check the path given to --config."
            )
        LOG.info("No %s, using defaults", config_file)
        return default()
    except toml.TomlDecodeError as exc:
        raise ConfigError(f"Could not parse {config_file}", str(exc)) from exc

    root = config_file.parent.resolve()

    try:
        terminal = TerminalConfig(**data.pop("terminal", {}))
        engine = EngineConfig(**data.pop("engine", {}))
        files = FilesConfig(**data.pop("files", {}))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Bad value in {config_file}", str(exc)) from exc

    if data:
        LOG.warning("Ignoring unknown sections in %s: %s", config_file, list(data))

    # make the file dirs absolute
    if files.import_dir and not files.import_dir.is_absolute():
        files.import_dir = (root / files.import_dir).resolve()
    if not files.export_dir.is_absolute():
        files.export_dir = (root / files.export_dir).resolve()

    return Config(
        root=root,
        config_file=config_file,
        terminal=terminal,
        engine=engine,
        files=files,
    )
