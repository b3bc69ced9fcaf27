"""CLI UI related functions"""

import contextlib
import logging
import sys
from traceback import format_exception, format_tb

import colorful as cf
from yaspin import yaspin
from yaspin.spinners import Spinners

TICK = "✔"
CROSS = "✘"

UI_COLORS = {
    # --
    "teal": "#027777",
    "grey": "#777777",
    "red": "#991010",
}

LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(name)-25s %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Flags that modify interface displays
QUIET = False
VERBOSE = False


def init(args):
    """Initialise the UI, including logging"""

    if args["--vverbose"]:
        level = "DEBUG"
    elif args["--verbose"]:
        level = "INFO"
    else:
        level = None

    global QUIET
    global VERBOSE
    QUIET = args["--quiet"]
    VERBOSE = args["--verbose"] or args["--vverbose"]

    root_logger = logging.getLogger("mbasic_term")

    if not args["--no-colours"]:
        import coloredlogs

        cf.use_true_colors()
        cf.use_palette(UI_COLORS)
        cf.update_palette(UI_COLORS)
        if level:
            coloredlogs.install(
                fmt=LOG_FORMAT, datefmt=LOG_DATEFMT, level=level, logger=root_logger,
            )
    else:
        cf.disable()
        if level:
            logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
            root_logger.setLevel(level)


## String colour modifiers


def dim(string):
    return cf.grey(string)


def good(string):
    return cf.bold_teal(string)


def bad(string):
    return cf.bold_red(string)


## And printing messages


def info(msg):
    if not QUIET:
        print(msg)


## graceful exits


def exit_problem(problem: str, suggested_fix: str):
    """Exit because of a user-correctable problem"""
    print("\n" + bad(problem))
    if suggested_fix:
        print(suggested_fix)
    if not suggested_fix.endswith("\n"):
        print("")
    sys.exit(1)


def exit_bug(msg, *, traceback=None):
    """Something broke unexpectedly while running"""
    print(bad("\nUnexpected error.\n" + str(msg)))

    exc_type, exc_value, exc_traceback = sys.exc_info()

    if exc_type:
        traceback = format_exception(exc_type, exc_value, exc_traceback)
        traceback_tail = "".join(format_tb(exc_traceback, limit=4))
    elif traceback:
        traceback_tail = "...\n" + "".join(traceback[-4:])
    else:
        traceback_tail = "No traceback"

    if VERBOSE and traceback:
        print("\n" + "".join(traceback))
    else:
        print(dim("\n" + traceback_tail))

    print("Run again with -V for the full log.\n")
    sys.exit(1)


## UI elements


class DummySpinner:
    """Something that quacks like yaspin, but does nothing"""

    text = ""

    def write(*args):
        pass

    def ok(*args):
        pass

    def fail(*args):
        pass


def spin(text):
    if QUIET or VERBOSE:
        return contextlib.nullcontext(DummySpinner())
    else:
        return yaspin(Spinners.dots, text=str(text))
