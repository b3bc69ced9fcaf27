"""OutputItem class"""
import datetime
from dataclasses import asdict, dataclass

TEXT = "text"
ERROR = "error"
SYSTEM = "system"


@dataclass
class OutputItem:
    kind: str
    text: str
    time: str = None

    def __post_init__(self):
        if self.kind not in (TEXT, ERROR, SYSTEM):
            raise ValueError(self.kind)
        if self.time is None:
            self.time = datetime.datetime.now().isoformat()

    def serialise(self) -> dict:
        """Produce a JSON-serialisable object"""
        return asdict(self)
