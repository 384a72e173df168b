"""
The woof grammar, built from the combinators in _woofparse.combinators.

Each structural parser first parses its opening delimiter (and keyword)
without committing, so that when it does not match the next alternative
of the enclosing choice is tried. After that point every failure is
committed to an Error whose location is the opening delimiter.
"""

import string
from functools import cached_property

from _woofparse.combinators import (
    chain,
    check,
    commit,
    end_of_input,
    fmap,
    item,
    keep_left,
    keep_right,
    many0,
    many1,
    negate1,
    one_of,
    optional,
    pure,
    raise_error,
    satisfy,
    sequence,
)
from _woofparse.errors import Diagnostic, DiagnosticKind
from _woofparse.forms import Application, Define, Lambda, Number, Str, Symbol
from _woofparse.outcome import Success


def character(char):
    return satisfy(lambda token: token.symbol == char)


def character_in(chars):
    return satisfy(lambda token: token.symbol in chars)


def joined(tokens):
    return "".join(token.symbol for token in tokens)


# Below the interpreter limit on int/str conversion of long digit strings
DIGIT_CHUNK = 4000


def digits_to_integer(digits):
    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start : start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def committed(kind, location, parser):
    return commit(Diagnostic(kind, location), parser)


def first_duplicate(names):
    seen = set()
    for name in names:
        if name in seen:
            return name
        seen.add(name)
    return None


class WoofGrammar:
    """
    Parsers for woof, the entry point being WoofGrammar.program.

    >>> from _woofparse.cursor import Cursor
    >>> from _woofparse.position import tag
    >>> grammar = WoofGrammar()
    >>> grammar.program(Cursor(tag("(f 1)"))).value
    [Application(operator=Symbol(name='f'), operands=(Number(value=1),))]

    The character classes are class attributes so that a variation of the
    grammar can be made by subclassing.
    """

    symbol_starts = string.ascii_letters + "!@#$%^&*_-+=:?<>"
    digits = string.digits
    whitespace_characters = " \n\t\r\f"

    def __init__(self, on_form=None):
        """
        :param on_form: Optional function called with each top level form
            as soon as it has been parsed.
        """
        self.on_form = on_form

    @cached_property
    def whitespace(self):
        return many1(character_in(self.whitespace_characters))

    @cached_property
    def comment(self):
        return keep_right(character(";"), many0(negate1(character("\n"))))

    @cached_property
    def trivia(self):
        return many0(one_of(self.whitespace, self.comment))

    def munch(self, parser):
        """
        :returns: parser, skipping any whitespace and comments before it.
        """
        return keep_right(self.trivia, parser)

    @cached_property
    def open_curly(self):
        return self.munch(character("{"))

    @cached_property
    def close_curly(self):
        return self.munch(character("}"))

    @cached_property
    def open_paren(self):
        return self.munch(character("("))

    @cached_property
    def close_paren(self):
        return self.munch(character(")"))

    @cached_property
    def number(self):
        digits = many1(character_in(self.digits))
        return self.munch(
            fmap(lambda tokens: digits_to_integer(joined(tokens)), digits)
        )

    @cached_property
    def symbol(self):
        start = character_in(self.symbol_starts)
        rest = many0(one_of(start, character_in(self.digits)))
        return self.munch(
            fmap(
                lambda values: values[0].symbol + joined(values[1]),
                sequence(start, rest),
            )
        )

    @cached_property
    def string_literal(self):
        """
        A double quoted string where backslash escapes backslash and
        double quote, giving the unescaped contents.
        """
        quote = character('"')
        backslash_or_quote = one_of(character("\\"), quote)
        escape = keep_right(character("\\"), backslash_or_quote)
        normal = negate1(backslash_or_quote)
        contents = many0(one_of(escape, normal))
        return self.munch(fmap(joined, keep_left(keep_right(quote, contents), quote)))

    def keyword(self, word):
        return check(lambda name: name == word, self.symbol)

    @cached_property
    def symbol_form(self):
        return fmap(Symbol, self.symbol)

    @cached_property
    def number_form(self):
        return fmap(Number, self.number)

    @cached_property
    def string_form(self):
        return fmap(Str, self.string_literal)

    @cached_property
    def application(self):
        """
        (operator operands...)
        """

        def after_open(open_paren):
            return fmap(
                lambda values: Application(values[0], tuple(values[1])),
                sequence(
                    committed(
                        DiagnosticKind.APPLICATION_MISSING_OPERATOR,
                        open_paren,
                        self.form,
                    ),
                    many0(self.form),
                    committed(
                        DiagnosticKind.APPLICATION_MISSING_CLOSE,
                        open_paren,
                        self.close_paren,
                    ),
                ),
            )

        return chain(self.open_paren, after_open)

    @cached_property
    def define(self):
        """
        {define "optional doc" name value}
        """

        def after_open(open_curly):
            body = sequence(
                optional(self.string_literal),
                committed(
                    DiagnosticKind.DEFINE_MISSING_SYMBOL, open_curly, self.symbol
                ),
                committed(DiagnosticKind.DEFINE_MISSING_FORM, open_curly, self.form),
                committed(
                    DiagnosticKind.DEFINE_MISSING_CLOSE, open_curly, self.close_curly
                ),
            )
            return fmap(
                lambda values: Define(values[0], values[1], values[2]),
                keep_right(self.keyword("define"), body),
            )

        return chain(self.open_curly, after_open)

    def distinct_params(self, params_open):
        def check_distinct(params):
            if first_duplicate(params) is not None:
                return raise_error(
                    Diagnostic(DiagnosticKind.LAMBDA_DUPLICATE_PARAMETERS, params_open)
                )
            return pure(tuple(params))

        return chain(many0(self.symbol), check_distinct)

    @cached_property
    def lambda_form(self):
        """
        {lambda {params...} body...}
        """

        def after_params_open(open_curly, params_open):
            rest = sequence(
                self.distinct_params(params_open),
                committed(
                    DiagnosticKind.LAMBDA_MISSING_PARAMETERS_CLOSE,
                    params_open,
                    self.close_curly,
                ),
                committed(
                    DiagnosticKind.LAMBDA_MISSING_BODY, open_curly, many1(self.form)
                ),
                committed(
                    DiagnosticKind.LAMBDA_MISSING_CLOSE, open_curly, self.close_curly
                ),
            )
            return fmap(lambda values: Lambda(values[0], tuple(values[2])), rest)

        def after_open(open_curly):
            params_open = committed(
                DiagnosticKind.LAMBDA_MISSING_PARAMETERS, open_curly, self.open_curly
            )
            return keep_right(
                self.keyword("lambda"),
                chain(
                    params_open, lambda p_open: after_params_open(open_curly, p_open)
                ),
            )

        return chain(self.open_curly, after_open)

    @cached_property
    def special(self):
        unparseable = chain(
            self.open_curly,
            lambda open_curly: raise_error(
                Diagnostic(DiagnosticKind.SPECIAL_UNPARSEABLE, open_curly)
            ),
        )
        return one_of(self.define, self.lambda_form, unparseable)

    @cached_property
    def _form(self):
        return one_of(
            self.symbol_form,
            self.number_form,
            self.string_form,
            self.application,
            self.special,
        )

    def form(self, cursor):
        return self._form(cursor)

    def top_level_form(self, cursor):
        outcome = self.form(cursor)
        if self.on_form is not None and isinstance(outcome, Success):
            self.on_form(outcome.value)
        return outcome

    @cached_property
    def end_check(self):
        """
        Skips trailing whitespace and comments, giving an Error located at
        the first remaining token if the input is not exhausted.
        """
        unparsed = chain(
            item,
            lambda token: raise_error(Diagnostic(DiagnosticKind.UNPARSED_INPUT, token)),
        )
        return self.munch(one_of(end_of_input, unparsed))

    @cached_property
    def program(self):
        return keep_left(many0(self.top_level_form), self.end_check)
