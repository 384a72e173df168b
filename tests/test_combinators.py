import hypothesis.strategies as st
import pytest
from hypothesis import given

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
    recover,
    satisfy,
    sequence,
)
from _woofparse.cursor import Cursor
from _woofparse.errors import Diagnostic, DiagnosticKind
from _woofparse.outcome import FAILURE, Error, Success
from _woofparse.position import Token, tag

diagnostic = Diagnostic(DiagnosticKind.UNPARSED_INPUT, Token("x", 1, 1))
other_diagnostic = Diagnostic(DiagnosticKind.DEFINE_MISSING_FORM, Token("y", 2, 3))


def cursor_of(text):
    return Cursor(tag(text))


def character(char):
    return satisfy(lambda token: token.symbol == char)


def symbols(outcome):
    return "".join(t.symbol for t in outcome.value)


class Recording:
    """
    Wraps a parser, recording the cursors it was called with.
    """

    def __init__(self, parser):
        self.parser = parser
        self.calls = []

    def __call__(self, cursor):
        self.calls.append(cursor)
        return self.parser(cursor)


def test_item_empty():
    assert item(Cursor(())) is FAILURE


@given(st.text(min_size=1))
def test_item_consumes_one(text):
    cursor = cursor_of(text)
    outcome = item(cursor)
    assert outcome.value == Token(text[0], 1, 1)
    assert len(outcome.cursor) == len(text) - 1
    assert outcome.cursor.remaining() == cursor.remaining()[1:]


def test_item_does_not_change_given_cursor():
    cursor = cursor_of("ab")
    item(cursor)
    assert len(cursor) == 2
    assert cursor.first.symbol == "a"


def test_cursor_cannot_advance_past_end():
    with pytest.raises(ValueError, match="end of input"):
        Cursor(()).advance()


def test_satisfy():
    assert character("a")(cursor_of("ab")).value.symbol == "a"
    assert character("b")(cursor_of("ab")) is FAILURE
    assert character("a")(cursor_of("")) is FAILURE


def test_check_passes_errors():
    assert check(lambda _: False, raise_error(diagnostic))(cursor_of("a")) == Error(
        diagnostic
    )


def test_pure_consumes_nothing():
    cursor = cursor_of("abc")
    assert pure(3)(cursor) == Success(3, cursor)


def test_fmap():
    outcome = fmap(lambda t: t.symbol * 2, item)(cursor_of("ab"))
    assert outcome.value == "aa"
    assert len(outcome.cursor) == 1
    assert fmap(str, item)(cursor_of("")) is FAILURE
    assert fmap(str, raise_error(diagnostic))(cursor_of("")) == Error(diagnostic)


def test_chain_uses_value():
    repeat_first = chain(item, lambda token: character(token.symbol))
    assert repeat_first(cursor_of("aab")).cursor.consumed == 2
    assert repeat_first(cursor_of("abb")) is FAILURE


def test_sequence():
    outcome = sequence(character("a"), character("b"))(cursor_of("abc"))
    assert symbols(outcome) == "ab"
    assert outcome.cursor.first.symbol == "c"


def test_sequence_stops_at_failure():
    last = Recording(item)
    assert sequence(character("b"), last)(cursor_of("abc")) is FAILURE
    assert last.calls == []


def test_sequence_stops_at_error():
    last = Recording(item)
    assert sequence(item, raise_error(diagnostic), last)(cursor_of("abc")) == Error(
        diagnostic
    )
    assert last.calls == []


def test_keep_left_and_keep_right():
    cursor = cursor_of("ab")
    assert keep_left(character("a"), character("b"))(cursor).value.symbol == "a"
    assert keep_right(character("a"), character("b"))(cursor).value.symbol == "b"


@pytest.mark.parametrize(
    "first",
    [character("a"), raise_error(diagnostic)],
)
def test_one_of_left_biased(first):
    second = Recording(item)
    cursor = cursor_of("abc")
    assert one_of(first, second)(cursor) == first(cursor)
    assert second.calls == []


def test_one_of_backtracks_to_original_cursor():
    cursor = cursor_of("abc")
    second = Recording(character("a"))
    outcome = one_of(sequence(character("a"), character("c")), second)(cursor)
    assert second.calls == [cursor]
    assert outcome.value.symbol == "a"


def test_one_of_all_fail():
    assert one_of(character("x"), character("y"))(cursor_of("abc")) is FAILURE


def test_one_of_error_is_not_backtracked():
    committed = sequence(character("a"), commit(diagnostic, character("c")))
    assert one_of(committed, item)(cursor_of("abc")) == Error(diagnostic)


@given(st.text(alphabet="bc"))
def test_many0_never_fails(text):
    cursor = cursor_of(text)
    assert many0(character("a"))(cursor) == Success([], cursor)


def test_many0_collects():
    outcome = many0(character("a"))(cursor_of("aab"))
    assert symbols(outcome) == "aa"
    assert outcome.cursor.first.symbol == "b"


def test_many0_passes_errors():
    parser = many0(one_of(character("a"), raise_error(diagnostic)))
    assert parser(cursor_of("aab")) == Error(diagnostic)


def test_many0_stops_when_nothing_is_consumed():
    cursor = cursor_of("a")
    assert many0(pure(1))(cursor) == Success([1], cursor)


def test_many1():
    assert many1(character("a"))(cursor_of("bb")) is FAILURE
    assert symbols(many1(character("a"))(cursor_of("ab"))) == "a"
    parser = many1(one_of(character("a"), raise_error(diagnostic)))
    assert parser(cursor_of("b")) == Error(diagnostic)


def test_negate1():
    assert negate1(character("a"))(cursor_of("ba")).value.symbol == "b"
    assert negate1(character("a"))(cursor_of("ab")) is FAILURE
    assert negate1(character("a"))(cursor_of("")) is FAILURE
    assert negate1(raise_error(diagnostic))(cursor_of("a")) == Error(diagnostic)


def test_optional():
    cursor = cursor_of("ab")
    assert optional(character("b"))(cursor) == Success(None, cursor)
    assert optional(character("a"))(cursor).value.symbol == "a"
    assert optional(raise_error(diagnostic))(cursor) == Error(diagnostic)


def test_end_of_input():
    assert end_of_input(cursor_of("")) == Success(None, cursor_of(""))
    assert end_of_input(cursor_of("a")) is FAILURE


def test_commit():
    cursor = cursor_of("ab")
    assert commit(diagnostic, character("b"))(cursor) == Error(diagnostic)
    assert commit(diagnostic, character("a"))(cursor) == character("a")(cursor)
    assert commit(diagnostic, raise_error(other_diagnostic))(cursor) == Error(
        other_diagnostic
    )


def test_raise_error_consumes_nothing():
    assert raise_error(diagnostic)(cursor_of("")) == Error(diagnostic)


def test_recover_runs_handler_from_original_cursor():
    cursor = cursor_of("abc")
    handled = []

    def handler(diag):
        handled.append(diag)
        return item

    parser = recover(sequence(item, raise_error(diagnostic)), handler)
    outcome = parser(cursor)
    assert handled == [diagnostic]
    assert outcome.value.symbol == "a"


def test_recover_passes_failure_and_success():
    cursor = cursor_of("abc")
    assert recover(character("b"), lambda d: item)(cursor) is FAILURE
    assert recover(item, lambda d: pure(None))(cursor) == item(cursor)
