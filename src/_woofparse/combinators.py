"""
In this module, a parser is a function that takes a Cursor and returns
an outcome (see _woofparse.outcome). Parsers never change the cursor they
are given, so a parser that fails has consumed nothing and the caller can
try something else from the same cursor.

Parser combinator is any function which returns a parser.
"""

from _woofparse.outcome import FAILURE, Error, Success


def item(cursor):
    """
    Parser that consumes exactly one token, yielding that token. Fails
    on an empty cursor.
    """
    token = cursor.first
    if token is None:
        return FAILURE
    return Success(token, cursor.advance())


def pure(value):
    """
    :returns: Parser that succeeds with the given value without consuming
        anything.
    """

    def pure_parser(cursor):
        return Success(value, cursor)

    return pure_parser


def check(predicate, parser):
    """
    Combinator for filtering the value of a parser.

    :param predicate: Function from parsed value to bool.
    :param parser: Any parser.
    :returns: A parser that fails when the value parsed by
        parser does not satisfy the predicate.
    """

    def check_parser(cursor):
        outcome = parser(cursor)
        if isinstance(outcome, Success) and not predicate(outcome.value):
            return FAILURE
        return outcome

    return check_parser


def satisfy(predicate):
    """
    :returns: Parser of a single token for which predicate(token) is True.
    """
    return check(predicate, item)


def fmap(function, parser):
    def fmap_parser(cursor):
        outcome = parser(cursor)
        if isinstance(outcome, Success):
            return Success(function(outcome.value), outcome.cursor)
        return outcome

    return fmap_parser


def chain(parser, continuation):
    """
    Combinator for parsers depending on a previously parsed value.

    :param parser: Any parser.
    :param continuation: Function from the value parsed by parser
        to the parser to run next.
    :returns: A parser that runs parser, then the parser given by
        the continuation on the remaining tokens.
    """

    def chain_parser(cursor):
        outcome = parser(cursor)
        if isinstance(outcome, Success):
            return continuation(outcome.value)(outcome.cursor)
        return outcome

    return chain_parser


def sequence(*parsers):
    """
    Combinator for parsers.

    :param parsers: List of parsers.
    :returns: A parser that runs each parser in turn on the tokens
        remaining after the previous, giving the list of values. The
        first parser not to succeed decides the outcome.
    """

    def sequence_parser(cursor):
        values = []
        for parser in parsers:
            outcome = parser(cursor)
            if not isinstance(outcome, Success):
                return outcome
            values.append(outcome.value)
            cursor = outcome.cursor
        return Success(values, cursor)

    return sequence_parser


def keep_left(left, right):
    return fmap(lambda values: values[0], sequence(left, right))


def keep_right(left, right):
    return fmap(lambda values: values[1], sequence(left, right))


def one_of(*parsers):
    """
    Combinator for parsers, with backtracking.

    :param parsers: List of parsers.
    :returns: A parser giving the outcome of the first parser in parsers
        that does not fail. Each parser is tried from the same cursor, and
        an Error is returned as is without trying the remaining parsers.
    """

    def one_of_parser(cursor):
        for parser in parsers:
            outcome = parser(cursor)
            if outcome is not FAILURE:
                return outcome
        return FAILURE

    return one_of_parser


def many0(parser):
    """
    Combinator for parser.
    :param parser: Any parser.
    :returns: Parser that applies the parser zero or more times, until it
        fails, giving the list of values.
    """

    def many0_parser(cursor):
        values = []
        while True:
            outcome = parser(cursor)
            if outcome is FAILURE:
                return Success(values, cursor)
            if isinstance(outcome, Error):
                return outcome
            values.append(outcome.value)
            if len(outcome.cursor) == len(cursor):
                # Nothing consumed, repeating would give the same forever
                return Success(values, cursor)
            cursor = outcome.cursor

    return many0_parser


def many1(parser):
    return check(lambda values: len(values) > 0, many0(parser))


def negate1(parser):
    """
    :returns: Parser that consumes one token when parser does not match,
        and fails when it does. An Error from parser is passed on.
    """

    def negate1_parser(cursor):
        outcome = parser(cursor)
        if outcome is FAILURE:
            return item(cursor)
        if isinstance(outcome, Error):
            return outcome
        return FAILURE

    return negate1_parser


def optional(parser):
    """
    :returns: Parser giving the value of parser, or None when parser fails.
    """

    def optional_parser(cursor):
        outcome = parser(cursor)
        if outcome is FAILURE:
            return Success(None, cursor)
        return outcome

    return optional_parser


def end_of_input(cursor):
    if len(cursor) == 0:
        return Success(None, cursor)
    return FAILURE


def commit(diagnostic, parser):
    """
    Combinator for turning failure into error, used once the grammar knows
    which construct is being parsed (eg. after the opening keyword), so
    that a malformed construct is reported instead of having some other
    alternative tried.

    :param diagnostic: The Diagnostic to report if parser fails.
    :param parser: Any parser.
    """

    def commit_parser(cursor):
        outcome = parser(cursor)
        if outcome is FAILURE:
            return Error(diagnostic)
        return outcome

    return commit_parser


def raise_error(diagnostic):
    def raise_parser(cursor):
        return Error(diagnostic)

    return raise_parser


def recover(parser, handler):
    """
    Combinator for catching errors.

    :param parser: Any parser.
    :param handler: Function from Diagnostic to parser.
    :returns: A parser that, when parser gives an Error, runs the parser
        given by the handler from the original cursor instead.
    """

    def recover_parser(cursor):
        outcome = parser(cursor)
        if isinstance(outcome, Error):
            return handler(outcome.diagnostic)(cursor)
        return outcome

    return recover_parser
