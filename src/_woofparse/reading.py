import pathlib

from _woofparse.cursor import Cursor
from _woofparse.errors import Diagnostic, DiagnosticKind, WoofSyntaxError
from _woofparse.grammar import WoofGrammar
from _woofparse.outcome import Error, Success
from _woofparse.position import tag


def run_parser(parser, text):
    """
    Runs the given parser on the tagged characters of text.

    :returns: The outcome of the parser, see _woofparse.outcome.
    """
    return parser(Cursor(tag(text)))


def parse(text, on_form=None):
    """
    Parses woof source, ie. parse("(f 1)") gives
    [Application(Symbol("f"), (Number(1),))].

    :param text: The woof source.
    :param on_form: Optional function called with each top level
        form as soon as it is parsed, also for forms preceding a
        syntax error.
    :returns: List of the top level forms in text.
    :raises WoofSyntaxError: if the text is not valid woof, or if its
        forms are nested deeper than the interpreter recursion limit allows,
        in which case the diagnostic is located at the start of the text.
    """
    tokens = tag(text)
    try:
        outcome = WoofGrammar(on_form=on_form).program(Cursor(tokens))
    except RecursionError as err:
        raise WoofSyntaxError(
            Diagnostic(DiagnosticKind.NESTING_TOO_DEEP, tokens[0])
        ) from err
    if isinstance(outcome, Success):
        return outcome.value
    if isinstance(outcome, Error):
        raise WoofSyntaxError(outcome.diagnostic)
    raise RuntimeError("woof program did not match any input")


def read(filelike, on_form=None):
    """
    Reads a woof file and returns its top level forms,
    ie. forms = read("/my/file.woof")

    :param filelike: A file-like object, (string to path, pathlib.Path
        or opened text stream).
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rt", encoding="utf-8") as stream:
            text = stream.read()
    else:
        text = filelike.read()
    return parse(text, on_form=on_form)
