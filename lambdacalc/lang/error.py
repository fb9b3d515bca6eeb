"""Error handling for lambdacalc. Only LambdaErrors should be raised by the engine: if another type of error makes it
all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class LambdaError(Exception):
    """Base of every engine error. position/end point into the source text that caused the error and are used to draw
    a caret line beneath it. diagnosis says whether drawing that line makes sense at all.
    """
    diagnosis = True

    def __init__(self, message, position=0, end=None):
        super().__init__(message)
        self.message = message
        self.position = position
        self.end = end if end is not None else position + 1

    def caret(self):
        """Returns position spaces followed by '^'."""
        return " " * self.position + "^"


class TokenizeError(LambdaError):
    """Unrecognized character or malformed identifier."""


class ParseError(LambdaError):
    """Grammar violation: missing token, unmatched parentheses, invalid type syntax."""


class TypingError(LambdaError):
    """Static type mismatch, tagged with the offending subterm."""

    def __init__(self, node, message):
        start, end = node.span if node.span is not None else (0, 1)
        super().__init__(message, start, end)
        self.node = node


class AliasError(LambdaError):
    """Failure to add an alias to an ExecutionContext. Matched by kind, never positioned."""
    diagnosis = False

    def __init__(self, name, message):
        super().__init__(message)
        self.name = name


class DuplicateDefinition(AliasError):

    def __init__(self, name, existing):
        super().__init__(name, f"'{name}' is α-equivalent to existing alias '{existing}'")
        self.existing = existing


class BareVariable(AliasError):

    def __init__(self, name):
        super().__init__(name, f"'{name}' would alias a free variable")


class RecursiveDefinition(AliasError):

    def __init__(self, name):
        super().__init__(name, f"'{name}' refers to itself: recursive definitions not supported")


class AliasInUse(AliasError):

    def __init__(self, name, user):
        super().__init__(name, f"'{name}' is used by alias '{user}'")
        self.user = user


class EvaluationError(LambdaError):
    """Failure during reduction."""
    diagnosis = False


class ArithmeticUnderflow(EvaluationError):

    def __init__(self, term):
        super().__init__(f"'{term}' is undefined: zero has no predecessor")
        self.term = term


class StepLimitExceeded(EvaluationError):

    def __init__(self, steps):
        super().__init__(f"no normal form found within {steps} steps")
        self.steps = steps


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report lambdacalc errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.path = None
        self.line = None
        self.line_num = None

    def register_file(self, path):
        """Registers path for error messages."""
        self.path = path

    def register_line(self, line, line_num=None):
        """Registers the source line being run. Should be called prior to handing line to the engine."""
        self.line = line
        self.line_num = line_num

    def remove_line(self):
        """Forgets the registered line. Should be called after the line ran without errors."""
        self.line = None
        self.line_num = None

    @staticmethod
    def diagnose(error, expr, warning=False):
        """Returns expr with the offending part of it highlighted and a caret line underneath."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR
        start = min(error.position, len(expr))
        end = max(min(error.end, len(expr)), start + 1)

        diagnosis = "  " + expr[:start]
        diagnosis += colored(expr[start:end], color, attrs=["bold"])
        diagnosis += expr[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def _location(self):
        if self.path is not None and self.line_num is not None:
            return colored(f"{self.path}:{self.line_num}: ", attrs=["bold"])
        return ""

    def warn(self, message):
        """Prints a warning about the registered line."""
        print(self._location() + colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + message)

    def throw(self, error, internal=False):
        """Reports error against the registered line, exiting if this handler is fatal."""
        error_msg = self._location()
        if internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.message
        print(error_msg)

        if not internal and error.diagnosis and self.line:
            print(ErrorHandler.diagnose(error, self.line))

        if self.fatal or internal:
            sys.exit(1)
        self.remove_line()  # if error occurred, reset line (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LambdaError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            error = EvaluationError("normal form might exist, but maximum recursion depth exceeded")
            self.throw(error)
        elif exc_type is not None and issubclass(exc_type, LambdaError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(LambdaError(f"unknown error: '{exc_type.__name__}: {exc_val}'"), internal=True)
            do_exit = True

        return not do_exit
