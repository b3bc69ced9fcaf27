from .buffer import ProgramBuffer, ProgramLine
