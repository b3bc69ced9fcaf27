"""mbasic-term configuration data, usually stored in mbasic.toml"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

# Constants
DEFAULT_PROMPT = "Ok"
DEFAULT_WIDTH = 80
DEFAULT_ENGINE = "mbasic_term.engines.echo:EchoEngine"
DEFAULT_EXPORT_DIR = "."
DEFAULT_BANNER = (
    "MBASIC Version 5.21",
    "mbasic-term session",
    "",
)


@dataclass(unsafe_hash=True)
class TerminalConfig:
    prompt: str = DEFAULT_PROMPT
    width: int = DEFAULT_WIDTH
    banner: Tuple[str, ...] = DEFAULT_BANNER
    colours: bool = True

    def __post_init__(self):
        # lists are not hashable, and Config must be hashable
        self.banner = tuple(self.banner)
        self.width = int(self.width)
        if self.width <= 0:
            raise ValueError(f"Terminal width must be positive, not {self.width}")


@dataclass(unsafe_hash=True)
class EngineConfig:
    factory: str = DEFAULT_ENGINE


@dataclass(unsafe_hash=True)
class FilesConfig:
    case_insensitive: bool = True
    import_dir: Union[Path, None] = None
    export_dir: Path = Path(DEFAULT_EXPORT_DIR)

    def __post_init__(self):
        # ensure some keys are paths
        for key in ["import_dir", "export_dir"]:
            if getattr(self, key):
                setattr(self, key, Path(getattr(self, key)))
