"""Error handling for arith language. Only GenericExceptions should be encountered during running: if another type of
error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Parse and evaluation errors are raised by arith.pure and propagated unchanged. ErrorHandler is the only place where
they are formatted for display.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw an arith error."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        super().__init__(msg.format(*exprs))
        self.template = msg
        self.exprs = list(exprs)

        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

    @property
    def msg(self):
        """Message with expr snippets bolded."""
        return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))


class UndefinedVariable(GenericException):

    def __init__(self, name):
        super().__init__("undefined variable '{}'", name, diagnosis=False)
        self.name = name


class DivisionByZero(GenericException):

    def __init__(self):
        super().__init__("division by zero", diagnosis=False)


class UnknownOperator(GenericException):
    """Only reachable from trees that were not built by Parser."""

    def __init__(self, symbol):
        super().__init__("unknown operator '{}'", symbol, diagnosis=False)
        self.symbol = symbol


class MissingClosingParenthesis(GenericException):

    def __init__(self, expr="", start=0, end=-1):
        super().__init__("'{}' is missing a closing parenthesis", expr, start=start, end=end)


class UnexpectedToken(GenericException):

    def __init__(self, token, expr="", start=0):
        super().__init__("'{}' has unexpected token '{}'", (expr or token, token), start=start, end=start + len(token))
        self.token = token


class UnexpectedEndOfInput(GenericException):

    def __init__(self, expr=""):
        msg = "'{}' ended unexpectedly" if expr else "unexpected end of input"
        super().__init__(msg, expr, start=len(expr), end=len(expr) + 1)


class InvalidAssignment(GenericException):

    def __init__(self, name, expr):
        super().__init__("l-value of '{}' is not a valid variable", expr, end=expr.index(name) + len(name))
        self.name = name


class ErrorHandler:
    """Context manager that will report arith errors instead of letting them propagate as Python tracebacks."""
    ERROR = "red"

    def __init__(self, fatal=True, file=None):
        self.fatal = fatal
        self.file = file if file is not None else sys.stdout
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error):
        """Returns offending part of error.expr highlighted and bolded, with a caret line underneath."""
        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Reports error using self.traceback. error must be a GenericException, and self.traceback must be a dict of
        file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        for file, (line, line_num) in self.traceback.items():
            if line and line_num is not None:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"

        if error_msg:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=self.file)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error), file=self.file)

        if self.fatal:
            sys.exit(1)
        for path in self.traceback:  # if error occurred, reset traceback (no need if error is fatal)
            self.remove_line(path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None or exc_type is SystemExit:
            return False

        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt", diagnosis=False))
        elif exc_type is RecursionError:
            self.throw(GenericException("expression nested too deeply", diagnosis=False))
        elif issubclass(exc_type, GenericException):
            self.throw(exc_val)
        else:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
        return True
