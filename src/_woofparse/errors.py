from dataclasses import dataclass
from enum import Enum, unique

from _woofparse.position import Token


@unique
class DiagnosticKind(Enum):
    APPLICATION_MISSING_OPERATOR = "application: missing operator"
    APPLICATION_MISSING_CLOSE = "application: missing close parenthesis"
    DEFINE_MISSING_SYMBOL = "define: missing symbol"
    DEFINE_MISSING_FORM = "define: missing form"
    DEFINE_MISSING_CLOSE = "define: missing close curly"
    LAMBDA_MISSING_PARAMETERS = "lambda: missing parameter list"
    LAMBDA_DUPLICATE_PARAMETERS = "lambda: duplicate parameter names"
    LAMBDA_MISSING_PARAMETERS_CLOSE = "lambda: missing parameter list close curly"
    LAMBDA_MISSING_BODY = "lambda: missing body form"
    LAMBDA_MISSING_CLOSE = "lambda: missing close curly"
    SPECIAL_UNPARSEABLE = "special form: unable to parse"
    UNPARSED_INPUT = "woof: unparsed input"
    NESTING_TOO_DEEP = "woof: nesting too deep"

    @property
    def message(self):
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """
    The error artifact of a committed parse: what went wrong, and the token
    of the construct it went wrong in.

    The location is the opening delimiter of the construct that was being
    parsed, not necessarily the token where parsing stopped, ie. for
    "(a b" the location is the "(" at line 1, column 1.
    """

    kind: DiagnosticKind
    location: Token

    @property
    def message(self):
        return self.kind.message

    def __str__(self):
        return (
            f"{self.message} at line {self.location.line}, "
            f"column {self.location.column}"
        )


class WoofSyntaxError(Exception):
    """
    Raised by woofparse.parse and woofparse.read when the text is not
    valid woof. The diagnostic attribute holds the Diagnostic describing
    the malformed construct.
    """

    def __init__(self, diagnostic):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


class WoofWriteError(Exception):
    """
    Raised when writing forms that would not parse back to the same forms,
    such as negative numbers or symbols that are not valid woof symbols.
    """

    pass
