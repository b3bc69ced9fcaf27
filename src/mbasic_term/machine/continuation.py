"""Input continuations - a suspended request for a line of terminal input"""

import logging
from typing import Callable, List

from ..exceptions import InputContractError

LOG = logging.getLogger(__name__)


class Continuation:
    """A one-shot handle for an engine waiting on a line of input.

    The engine yields this to the bridge, which parks it on the session. When
    the terminal has a line, resolve(text) is called exactly once: the value is
    stored and every registered continuation callback is run with it.

    """

    def __init__(self, *, prompt="", continuations=None):
        self.prompt = prompt
        self.continuations: List[Callable] = [] if not continuations else continuations
        self.resolved = False
        self.cancelled = False
        self.value = None

    @property
    def done(self):
        return self.resolved or self.cancelled

    def add_continuation(self, fn: Callable):
        if self.done:
            raise InputContractError(f"{self} is already finished")
        self.continuations.append(fn)

    def resolve(self, value: str):
        if self.done:
            raise InputContractError(f"{self} cannot be resolved twice")
        self.resolved = True
        self.value = value
        LOG.info("Resolved %s. Continuations: %s", self, self.continuations)
        for fn in self.continuations:
            fn(value)

    def cancel(self):
        """Drop the request without resuming anything (e.g. on Break)"""
        if not self.done:
            self.cancelled = True
            LOG.info("Cancelled %s", self)

    def __repr__(self):
        return f"<Continuation {id(self)} {self.resolved} ({self.value!r})>"
