"""Recursive-descent parser machinery shared by the untyped and typed grammars: a cursor over a token list, matching
helpers that raise positioned ParseErrors, and the binder Scope used to compute de Bruijn indices.
"""

from abc import ABC, abstractmethod

from lambdacalc.lang.error import ParseError
from lambdacalc.lang.scope import Scope


class Parser(ABC):
    """Base class of both grammars. Subclasses implement term() and set IDENTIFIER to their identifier token kind."""
    IDENTIFIER = None

    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.index = 0
        reserved = [token.value for token in self.tokens if token.kind is self.IDENTIFIER]
        self.scope = Scope(reserved)

    @property
    def position(self):
        """Source offset errors are reported at: the next token, or just past the last one."""
        if not self.tokens:
            return 0
        if self.index >= len(self.tokens):
            return self.tokens[-1].start + 1
        return self.tokens[self.index].start

    @property
    def done(self):
        return self.index >= len(self.tokens)

    @property
    def previous(self):
        """Last consumed token."""
        return self.tokens[self.index - 1]

    def peek(self):
        return None if self.done else self.tokens[self.index]

    def next_is(self, kind):
        return not self.done and self.tokens[self.index].kind is kind

    def skip_is(self, kind):
        """Consumes the next token if it is of kind. Returns whether it did."""
        if self.next_is(kind):
            self.index += 1
            return True
        return False

    def match(self, kind, error):
        """Consumes and returns the next token, raising ParseError(error) if it is not of kind."""
        if self.next_is(kind):
            self.index += 1
            return self.previous
        raise ParseError(error, self.position)

    def error(self, message, position=None):
        return ParseError(message, self.position if position is None else position)

    @abstractmethod
    def term(self):
        """Parses one term starting at the cursor."""

    def parse(self):
        """Parses the whole token list as one term."""
        term = self.term()
        if not self.done:
            token = self.peek()
            if token.value == ")":
                raise self.error("unmatched ')'")
            raise self.error(f"unexpected '{token.value}'")
        return term
