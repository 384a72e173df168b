"""
The abstract syntax tree of woof. A woof program is a sequence of forms,
each form is one of the node types below. Nodes are immutable, sequences
of nodes are stored as tuples.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Symbol:
    name: str


@dataclass(frozen=True)
class Str:
    value: str


@dataclass(frozen=True)
class Lambda:
    """
    {lambda {params...} body...}, where body has at least one form.
    """

    params: Tuple[str, ...]
    body: Tuple["Form", ...]


@dataclass(frozen=True)
class Define:
    """
    {define "doc" name value}, where the doc string is optional.
    """

    doc: Optional[str]
    name: str
    value: "Form"


@dataclass(frozen=True)
class Application:
    operator: "Form"
    operands: Tuple["Form", ...]


Form = Union[Number, Symbol, Str, Lambda, Define, Application]

FORM_TYPES = (Number, Symbol, Str, Lambda, Define, Application)
