"""Arithmetic syntax tree generator: a recursive descent parser over whitespace-separated tokens.

The `pure` directory contains the core arithmetic language: no statements, comments or sessions (see `lang`).

Formally, the grammar is

```
<expression> ::= <term> (("+" | "-") <term>)*          ; left-associative: a - b - c = (a - b) - c
<term>       ::= <factor> (("*" | "/") <factor>)*      ; binds tighter than + and -
<factor>     ::= "(" <expression> ")"
               | <number>                               ; any token float() accepts
               | <identifier>                           ; any other token but ")", operators included
```

Tokens must be separated by whitespace: "(2+3)" is a single token, and therefore a Variable. The grammar is LL(1), so
the parser never backtracks.
"""

import logging
import re

from arith.lang.error import MissingClosingParenthesis, UnexpectedEndOfInput, UnexpectedToken
from arith.lang.numerical import literal
from arith.pure.tree import BinaryOp, Number, Variable


logger = logging.getLogger(__name__)

TOKEN = re.compile(r"\S+")


def tokenize(expr):
    """Splits expr on runs of whitespace."""
    return [match.group() for match in TOKEN.finditer(expr)]


class Parser:
    """Parses a single expression. A Parser is used for exactly one parse. Parsing starts at character pos of expr, so
    that offsets in error messages stay relative to the whole of expr.
    """

    def __init__(self, expr, pos=0):
        self.expr = expr

        matches = list(TOKEN.finditer(expr, pos))
        self.tokens = tuple(match.group() for match in matches)
        self._offsets = tuple(match.start() for match in matches)  # used for error messages
        self._pos = 0

    def parse(self):
        """Returns root node of expr. Every token must be consumed, otherwise UnexpectedToken is raised."""
        logger.debug("tokens: %s", self.tokens)

        node = self.expression()
        if self._pos != len(self.tokens):
            raise UnexpectedToken(self.tokens[self._pos], self.expr, self._offsets[self._pos])

        logger.debug("parsed '%s' as %s", self.expr, node)
        return node

    def expression(self):
        node = self.term()
        while self._peek() in ("+", "-"):
            operator = self._consume()
            node = BinaryOp(operator, node, self.term())
        return node

    def term(self):
        node = self.factor()
        while self._peek() in ("*", "/"):
            operator = self._consume()
            node = BinaryOp(operator, node, self.factor())
        return node

    def factor(self):
        if self._peek() == "(":
            start = self._offsets[self._pos]
            self._consume()
            node = self.expression()

            if self._peek() != ")":
                raise MissingClosingParenthesis(self.expr, start=start, end=len(self.expr.rstrip()))

            self._consume()
            return node

        if self._peek() == ")":
            raise UnexpectedToken(")", self.expr, self._offsets[self._pos])

        token = self._consume()
        value = literal(token)
        if value is not None:
            return Number(value)
        return Variable(token)

    def _peek(self):
        """Current token, or None if all tokens have been consumed."""
        if self._pos < len(self.tokens):
            return self.tokens[self._pos]
        return None

    def _consume(self):
        """Returns current token and advances past it. Raises UnexpectedEndOfInput if there is none."""
        if self._pos >= len(self.tokens):
            raise UnexpectedEndOfInput(self.expr.rstrip())

        token = self.tokens[self._pos]
        self._pos += 1
        return token
