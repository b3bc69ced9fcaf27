"""The statement-execution engine interface, and loading engines by name

The engine is an opaque collaborator: it parses and runs programs, and talks
back to the session only through the EngineHost it is given.

execute(host) may be a plain function, which runs the program to completion,
or a generator function. A generator suspends for a line of input with:

    line = yield host.request_input("? ")

and is resumed by the bridge with the text the user typed.

"""

import importlib
import logging
import sys
import traceback

from ..exceptions import UserResolvableError

LOG = logging.getLogger(__name__)


class ImportEngineError(UserResolvableError):
    """Error loading an engine"""


class Engine:
    """Base for engines. Subclasses must implement load_program and execute.

    Optional extras, discovered by the session with getattr:

    - execute_immediate(statement, host): run one statement (same suspension
      rules as execute).
    - set_width(columns): terminal width.

    """

    last_error = ""

    def load_program(self, source: str) -> bool:
        """Parse SOURCE, returning False (and setting last_error) on failure"""
        raise NotImplementedError("Must be subclassed")

    def execute(self, host):
        raise NotImplementedError("Must be subclassed")

    def stop(self):
        """Request an interrupt at the next check point"""

    def clear(self):
        """Forget the loaded program"""


def _split_ref(ref: str):
    modname, sep, attr = ref.partition(":")
    if not sep or not modname or not attr:
        raise ImportEngineError(
            f"Bad engine reference `{ref}'",
            "Engines are named like `package.module:factory'.",
        )
    return modname, attr


def load_engine(ref: str, *args, **kwargs) -> Engine:
    """Import the factory named by REF ("package.module:factory") and call it"""
    modname, attr = _split_ref(ref)
    LOG.info(f"Starting import {modname}.{attr}")
    try:
        module = importlib.import_module(modname)
    except ModuleNotFoundError as exc:
        raise ImportEngineError(f"Cannot find Python module `{modname}'", "") from exc
    except Exception as exc:
        tb = "".join(traceback.format_exception(*sys.exc_info()))
        raise ImportEngineError(f"Could not load Python module `{modname}'.", tb) from exc

    try:
        factory = getattr(module, attr)
    except AttributeError as exc:
        raise ImportEngineError(
            f"Could not find {attr} in {modname}.",
            f"({modname}.{attr} -> AttributeError)",
        ) from exc

    engine = factory(*args, **kwargs)
    LOG.info(f"Loaded engine {modname}.{attr}: {engine}")
    return engine
