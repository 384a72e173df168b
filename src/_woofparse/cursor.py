from dataclasses import dataclass, field


@dataclass(frozen=True)
class Cursor:
    """
    The tokens remaining to be parsed.

    A cursor is never changed in place, advancing gives a new cursor. Parsers
    therefore backtrack by simply reusing the cursor they were given.

    >>> from _woofparse.position import tag
    >>> cursor = Cursor(tag("ab"))
    >>> len(cursor)
    2
    >>> cursor.first
    Token(symbol='a', line=1, column=1)
    >>> len(cursor.advance())
    1

    """

    tokens: tuple = field(repr=False)
    offset: int = 0

    def __len__(self):
        return len(self.tokens) - self.offset

    @property
    def consumed(self):
        """
        The number of tokens consumed before reaching this cursor.
        """
        return self.offset

    @property
    def first(self):
        """
        The next token, or None if there are no tokens remaining.
        """
        if self.offset < len(self.tokens):
            return self.tokens[self.offset]
        return None

    def advance(self):
        if self.offset >= len(self.tokens):
            raise ValueError("Cannot advance past the end of input")
        return Cursor(self.tokens, self.offset + 1)

    def remaining(self):
        return self.tokens[self.offset :]
