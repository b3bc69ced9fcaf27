"""The execution bridge - runs the engine without giving up the host thread

There is only ever one thread of control. When the engine wants a line of
input it yields a Continuation; the bridge parks it on the session and
returns to whoever called run(). The engine picks up where it left off when
the terminal calls submit(text).

    Idle --run--> Running --(finished)--> Idle
                          --stop-------> Stopped (idle for UI purposes)

"""

import enum
import inspect
import logging
import sys
import traceback
from typing import Union

from ..exceptions import (
    EmptyProgram,
    EngineRuntimeError,
    InputContractError,
    LoadError,
    NotRunning,
    UnexpectedError,
    UnsupportedImmediate,
    UserResolvableError,
)
from .continuation import Continuation
from .host import EngineHost
from .screen import Screen
from .session import Session

LOG = logging.getLogger(__name__)


class AlreadyRunning(UserResolvableError):
    """A program is already running"""

    def __init__(self):
        super().__init__("Program already running", "Stop it first.")


class NotWaiting(UnexpectedError):
    """Input submitted with no outstanding request"""


class BridgeState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class ExecutionBridge:
    def __init__(self, session: Session, screen: Screen, host: EngineHost):
        self.session = session
        self.screen = screen
        self.host = host
        self.state = BridgeState.IDLE
        self.error_msg = None
        self._task = None
        self._in_engine = False

    @property
    def running(self) -> bool:
        return self.state is BridgeState.RUNNING

    @property
    def waiting_for_input(self) -> bool:
        return self.session.pending_input is not None

    def _set_state(self, state: BridgeState):
        LOG.debug("Bridge %s -> %s", self.state.value, state.value)
        self.state = state
        self.session.set_running(state is BridgeState.RUNNING)

    ## starting

    def run(self, source: str):
        """Load SOURCE into the engine and start executing it"""
        engine = self.session.require_engine()
        if self.running:
            raise AlreadyRunning()
        if not source.strip():
            raise EmptyProgram()

        self.screen.print("\n")
        if not engine.load_program(source):
            raise LoadError(engine.last_error)

        LOG.info("Running program (%d lines)", len(source.splitlines()))
        self._launch(engine.execute)

    def execute_immediate(self, statement: str):
        """Run a single statement, if the engine can"""
        engine = self.session.require_engine()
        if self.running:
            raise AlreadyRunning()
        entry = getattr(engine, "execute_immediate", None)
        if entry is None:
            raise UnsupportedImmediate()
        LOG.info("Immediate: %s", statement)
        self._launch(entry, statement)

    def _launch(self, entry, *args):
        self.error_msg = None
        self._set_state(BridgeState.RUNNING)
        task = self._call_engine(entry, *args, self.host)
        if not self.running:
            return  # failed on the first call
        if inspect.isgenerator(task):
            self._task = task
            self._advance(None)
        else:
            self._complete()

    ## stepping

    def _call_engine(self, fn, *args):
        """Call into the engine, ending the run if it raises"""
        self._in_engine = True
        try:
            return fn(*args)
        except StopIteration:
            self._complete()
        except EngineRuntimeError as exc:
            self._end_with_error(exc.msg)
        except InputContractError:
            self._reset()
            raise
        except Exception as exc:
            # Catch everything so the session is never left "running" with
            # nothing to resume
            self.error_msg = "Unexpected Exception:\n\n" + "".join(
                traceback.format_exception(*sys.exc_info())
            )
            LOG.warning("Engine raised %s", exc)
            self._end_with_error(f"Error: {exc}")
        finally:
            self._in_engine = False
        return None

    def _advance(self, value):
        """Resume the engine with VALUE, until it finishes or suspends"""
        request = self._call_engine(self._task.send, value)
        if not self.running:
            return
        self._suspend(request)

    def _suspend(self, request):
        if not isinstance(request, Continuation):
            self._reset()
            raise InputContractError(
                f"Engine yielded {request!r}, expected a Continuation from request_input"
            )
        if request is not self.session.pending_input or request.done:
            self._reset()
            raise InputContractError(f"{request} is not the outstanding input request")
        request.add_continuation(self._resume)
        LOG.info("Suspended on %s", request)

    def _resume(self, text):
        LOG.info("Resuming with %r", text)
        self._advance(text)

    ## input

    def submit(self, text: str):
        """Hand a line typed by the user to the waiting engine"""
        pending = self.session.pending_input
        if pending is None:
            raise NotWaiting("No input request is outstanding")
        self.session.pending_input = None
        pending.resolve(text)

    def push_key(self, key: str):
        self.session.push_key(key)

    def poll_key(self) -> Union[str, None]:
        return self.host.poll_key()

    ## stopping

    def stop(self):
        """Interrupt the running program"""
        if not self.running:
            raise NotRunning()
        engine = self.session.require_engine()
        self.session.break_requested = True
        engine.stop()

        if self._in_engine:
            # Called back from inside the engine: it will see break_requested
            # at its next check point and return
            LOG.info("Break requested while engine is executing")
            return

        self._close_task()
        self._set_state(BridgeState.STOPPED)
        self.screen.print("\nBreak\n")
        self.screen.acknowledge()

    def shutdown(self):
        """Drop any running program without reporting it (engine detach)"""
        if self.running:
            self.session.require_engine().stop()
        self._reset()

    ## endings

    def _close_task(self):
        pending = self.session.pending_input
        self.session.pending_input = None
        if pending is not None:
            pending.cancel()
        if self._task is not None:
            self._task.close()
            self._task = None

    def _complete(self):
        self._task = None
        self.session.pending_input = None
        if self.session.break_requested:
            # returned early because stop() was called from inside the engine
            LOG.info("Program stopped at a check point")
            self._set_state(BridgeState.STOPPED)
            self.screen.print("\nBreak\n")
            self.screen.acknowledge()
            return
        LOG.info("Program finished")
        self._set_state(BridgeState.IDLE)
        self.screen.acknowledge(newline_first=True)

    def _end_with_error(self, msg):
        LOG.info("Program failed: %s", msg)
        self._close_task()
        self._set_state(BridgeState.IDLE)
        self.screen.print_error("\n" + msg + "\n")
        self.screen.acknowledge()

    def _reset(self):
        self._close_task()
        self._set_state(BridgeState.IDLE)
