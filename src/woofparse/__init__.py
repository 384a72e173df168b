import woofparse.version
from _woofparse.errors import (
    Diagnostic,
    DiagnosticKind,
    WoofSyntaxError,
    WoofWriteError,
)
from _woofparse.forms import Application, Define, Lambda, Number, Str, Symbol
from _woofparse.position import Token, tag
from _woofparse.reading import parse, read
from _woofparse.writing import dump_form, dumps, write

__author__ = """woofparse developers"""

__version__ = woofparse.version.version

__all__ = [
    "Application",
    "Define",
    "Diagnostic",
    "DiagnosticKind",
    "Lambda",
    "Number",
    "Str",
    "Symbol",
    "Token",
    "WoofSyntaxError",
    "WoofWriteError",
    "dump_form",
    "dumps",
    "parse",
    "read",
    "tag",
    "write",
]
