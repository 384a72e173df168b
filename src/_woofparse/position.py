from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """
    A single character of woof source, along with the line and column
    (both starting at 1) it was found at.
    """

    symbol: str
    line: int
    column: int


def tag(text):
    """
    Tags each character in the text with its position, ie.
    tag("ab\\ncd") gives the tokens ('a', 1, 1), ('b', 1, 2),
    ('\\n', 1, 3), ('c', 2, 1), ('d', 2, 2).

    A newline is tagged with the position it occupies, the
    character after it starts the next line at column 1.

    :param text: Any sequence of characters.
    :returns: Tuple of tokens, one for each character in text.
    """
    tokens = []
    line = 1
    column = 1
    for symbol in text:
        tokens.append(Token(symbol, line, column))
        if symbol == "\n":
            line += 1
            column = 1
        else:
            column += 1
    return tuple(tokens)
