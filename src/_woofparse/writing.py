import pathlib
import warnings
from functools import wraps

from woofparse.version import version as woofparse_version

from _woofparse.errors import WoofWriteError
from _woofparse.forms import Application, Define, Lambda, Number, Str, Symbol
from _woofparse.grammar import DIGIT_CHUNK, WoofGrammar, first_duplicate


def takes_stream(i, mode):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode, encoding="utf-8") as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def check_valid_symbol(name):
    if not isinstance(name, str) or len(name) == 0:
        raise WoofWriteError(f"Symbols must be non-empty strings, found {name!r}")
    if name[0] not in WoofGrammar.symbol_starts:
        raise WoofWriteError(f"Symbols cannot start with {name[0]!r}, found {name!r}")
    for c in name[1:]:
        if c not in WoofGrammar.symbol_starts and c not in WoofGrammar.digits:
            raise WoofWriteError(f"Symbols cannot contain {c!r}, found {name!r}")


def cast_to_integer(value):
    if isinstance(value, bool):
        raise WoofWriteError(f"Numbers must be integers, found {value!r}")
    if isinstance(value, int):
        return value
    try:
        integer = int(value)
    except (TypeError, ValueError, OverflowError) as err:
        raise WoofWriteError(f"Numbers must be integers, found {value!r}") from err
    if integer != value:
        raise WoofWriteError(f"Numbers must be integers, found {value!r}")
    warnings.warn(
        f"casting number {value!r} of type {type(value).__name__} to int",
        stacklevel=1,
    )
    return integer


def quote_string(value):
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def integer_to_digits(value):
    chunk_size = 10**DIGIT_CHUNK
    chunks = []
    while value >= chunk_size:
        value, chunk = divmod(value, chunk_size)
        chunks.append(str(chunk).zfill(DIGIT_CHUNK))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def dump_number(number):
    value = cast_to_integer(number.value)
    if value < 0:
        raise WoofWriteError("Woof has no negative numbers")
    return integer_to_digits(value)


def dump_lambda(lambda_form):
    for param in lambda_form.params:
        check_valid_symbol(param)
    duplicate = first_duplicate(lambda_form.params)
    if duplicate is not None:
        raise WoofWriteError(f"Duplicate lambda parameter {duplicate!r}")
    if len(lambda_form.body) == 0:
        raise WoofWriteError("Lambda must have at least one body form")
    params = " ".join(lambda_form.params)
    body = " ".join(dump_form(f) for f in lambda_form.body)
    return f"{{lambda {{{params}}} {body}}}"


def dump_define(define):
    check_valid_symbol(define.name)
    parts = ["define"]
    if define.doc is not None:
        parts.append(quote_string(define.doc))
    parts.append(define.name)
    parts.append(dump_form(define.value))
    return "{" + " ".join(parts) + "}"


def dump_application(application):
    parts = [dump_form(application.operator)]
    parts.extend(dump_form(f) for f in application.operands)
    return "(" + " ".join(parts) + ")"


def dump_form(form):
    """
    :returns: The woof source for a single form, such that parsing it
        gives back the same form.
    :raises WoofWriteError: if the form has no woof source, such as
        Number(-1).
    """
    if isinstance(form, Number):
        return dump_number(form)
    if isinstance(form, Symbol):
        check_valid_symbol(form.name)
        return form.name
    if isinstance(form, Str):
        return quote_string(form.value)
    if isinstance(form, Lambda):
        return dump_lambda(form)
    if isinstance(form, Define):
        return dump_define(form)
    if isinstance(form, Application):
        return dump_application(form)
    raise WoofWriteError(f"Could not find woof syntax for {form!r}")


def dumps(forms):
    """
    :returns: woof source with one top level form on each line.
    """
    try:
        return "".join(dump_form(form) + "\n" for form in forms)
    except RecursionError as err:
        raise WoofWriteError("Forms are nested too deeply to write") from err


@takes_stream(0, "w")
def write(filelike, forms, header=True):
    """
    Writes the given forms to the file.
    :param filelike: A file-like object, (string to path, pathlib.Path or opened
        stream).
    :param forms: Iterable of forms.
    :param header: Whether to start the file with a comment naming the
        woofparse version that wrote it.
    """
    contents = dumps(forms)
    if header:
        filelike.write(f"; written by woofparse {woofparse_version}\n")
    filelike.write(contents)
