"""Top level mbasic-term exceptions"""


class MbasicError(Exception):
    """Base for all mbasic-term errors"""


class UserResolvableError(MbasicError):
    """An error which the user can probably solve"""

    def __init__(self, msg, suggested_fix=""):
        self.msg = msg
        self.suggested_fix = suggested_fix

    def __str__(self):
        if type(self) == UserResolvableError:
            return f"{self.msg}\n\n{self.suggested_fix}"
        else:
            return f"{self.__doc__}: {self.msg}\n\n{self.suggested_fix}"


class UnexpectedError(MbasicError):
    """An error which is unexpected and with no obvious solution"""

    def __init__(self, msg):
        self.msg = msg

    def __str__(self):
        if type(self) == UnexpectedError:
            return self.msg
        else:
            return f"{self.__doc__}:\n{self.msg}"


## Session errors. These are all recovered at the command boundary and shown
## to the user as a single error line.


class EmptyProgram(UserResolvableError):
    """Nothing to run"""

    def __init__(self):
        super().__init__("No program to run", "Enter some numbered lines, or LOAD a file.")


class LoadError(UserResolvableError):
    """The engine rejected the program"""

    def __init__(self, msg):
        super().__init__(msg, "")


class FileNotFound(UserResolvableError):
    """No such file"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"File not found: {name}", "Use FILES to see what is stored.")


class EngineUnavailable(UserResolvableError):
    """The engine is not loaded"""

    def __init__(self):
        super().__init__("Engine not loaded", "Wait for the engine to finish loading.")


class UnsupportedImmediate(UserResolvableError):
    """Immediate mode is not supported"""

    def __init__(self):
        super().__init__(
            "Immediate mode not yet supported. Use editor and RUN.",
            "Number the line to add it to the program.",
        )


class NotRunning(UserResolvableError):
    """Nothing is running"""

    def __init__(self):
        super().__init__("No program is running", "")


class EngineRuntimeError(UserResolvableError):
    """Runtime error"""

    def __init__(self, msg, line=None):
        self.line = line
        if line is not None:
            msg = f"Runtime error at line {line}: {msg}"
        super().__init__(msg, "")


class InputContractError(UnexpectedError):
    """Input requested while another request is outstanding"""
