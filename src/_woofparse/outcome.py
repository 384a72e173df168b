"""
The result of running a parser is one of three outcomes:

* Success: the parser matched, giving a value and the cursor after the
  match.
* Failure: the parser did not match. Carries nothing, and a choice
  will try its next alternative.
* Error: the parser matched far enough to know what was intended, and
  the input is malformed. Carries a diagnostic, and is never turned into
  a Failure by a choice.
"""

from dataclasses import dataclass
from typing import Any

from _woofparse.cursor import Cursor
from _woofparse.errors import Diagnostic


@dataclass(frozen=True)
class Success:
    value: Any
    cursor: Cursor


class Failure:
    def __repr__(self):
        return "FAILURE"


FAILURE = Failure()


@dataclass(frozen=True)
class Error:
    diagnostic: Diagnostic
