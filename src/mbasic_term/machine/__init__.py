from .bridge import BridgeState, ExecutionBridge
from .continuation import Continuation
from .engine import Engine, load_engine
from .host import EngineHost
from .screen import Screen
from .session import Session
