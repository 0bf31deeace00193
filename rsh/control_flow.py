"""Control flow signals raised by built-ins and handled by the dispatch loop"""


class ControlFlowException(Exception):
    """Base class for control flow changes; never reported as an error"""
    pass


class ExitRequest(ControlFlowException):
    """Raised by the exit built-in to terminate the dispatch loop"""

    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status
