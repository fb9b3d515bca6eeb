"""Generic rule-table tokenizer shared by the untyped and typed calculi.

A rule is a pair (pattern, emit). At each offset of the expression, whitespace is skipped, and otherwise the rules are
tried in order: the first pattern that matches at the offset hands its text to emit, which appends to (or extends the
last of) the tokens read since the last whitespace. Each calculus supplies its own rule table; see pure/lexical.py and
typed/lexical.py.
"""

from dataclasses import dataclass
from enum import Enum
import re

from lambdacalc.lang.error import TokenizeError


SEPARATOR = re.compile(r"\s+")


@dataclass(frozen=True)
class Token:
    kind: Enum
    start: int
    value: str

    @property
    def end(self):
        return self.start + len(self.value)

    def __str__(self):
        if self.kind.name in ("IDENTIFIER", "TYPE"):
            return f"Token{{{self.kind.name}, {self.start}, \"{self.value}\"}}"
        return f"Token{{{self.kind.name}, {self.start}}}"


def simply(kind):
    """Emitter for a token that is exactly its match."""

    def emit(tokens, text, pos):
        tokens.append(Token(kind, pos, text))

    return emit


def identifier(kind):
    """Emitter for an identifier. Extends an identifier directly before it, otherwise starts a new one."""

    def emit(tokens, text, pos):
        if tokens and tokens[-1].kind is kind:
            last = tokens.pop()
            tokens.append(Token(kind, last.start, last.value + text))
        else:
            tokens.append(Token(kind, pos, text))

    return emit


def continuation(kind, message):
    """Emitter for characters that may continue an identifier but never start one."""

    def emit(tokens, text, pos):
        if tokens and tokens[-1].kind is kind:
            last = tokens.pop()
            tokens.append(Token(kind, last.start, last.value + text))
        else:
            raise TokenizeError(message, pos)

    return emit


def tokenize(expression, rules):
    """Splits expression into tokens using rules, a list of (compiled pattern, emitter) pairs."""
    result = []
    pending = []  # tokens since the last whitespace; only these can be extended

    i = 0
    while i < len(expression):
        separation = SEPARATOR.match(expression, i)
        if separation:
            result.extend(pending)
            pending = []
            i = separation.end()
            continue

        for pattern, emit in rules:
            match = pattern.match(expression, i)
            if match:
                emit(pending, match.group(), i)
                i = match.end()
                break
        else:
            raise TokenizeError(f"unexpected character: {expression[i]}", i)

    return result + pending
