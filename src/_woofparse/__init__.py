"""
Implementation of woofparse, a parser combinator library and a parser
for woof, a small lisp-like language.

The text is first tagged (see _woofparse.position), giving one token per
character with its line and column. Parsers (see _woofparse.combinators)
run on a cursor into these tokens, and give one of three outcomes (see
_woofparse.outcome): success, failure which lets a choice try its next
alternative, or error which carries a diagnostic and ends the parse.
"""
