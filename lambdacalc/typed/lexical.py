"""Simply-typed lambda calculus tokenizer and parser.

```
term        ::= "λ" ID ":" type "." term | application
application ::= atom+ [abstraction]
atom        ::= "(" term ")" | ID | "true" | "false" | "zero"
              | "if" term "then" term "else" term     ; the else branch is greedy, like an abstraction body
              | ("succ" | "pred" | "iszero") atom
              | ("plus" | "minus") atom atom
type        ::= atom_type ["->" type]
atom_type   ::= "(" type ")" | TYPE                    ; Bool or Nat
```

Identifiers start with a lowercase letter and type names with an uppercase one. Keywords are only keywords as whole
words: `trueish` is an identifier.
"""

from enum import Enum
import re

from lambdacalc.lang import tokenize as lexer
from lambdacalc.pure import lexical as pure
from lambdacalc.pure.lexical import span
from lambdacalc.typed.term import ArrowType, Boolean, IfThenElse, PRIMITIVES, TYPE_NAMES, Zero


class TokenKind(Enum):
    DOT = "."
    COLON = ":"
    ARROW = "->"
    LAMBDA = "λ"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    TRUE = "true"
    FALSE = "false"
    ZERO = "zero"
    IF = "if"
    THEN = "then"
    ELSE = "else"
    SUCC = "succ"
    PRED = "pred"
    ISZERO = "iszero"
    PLUS = "plus"
    MINUS = "minus"
    TYPE = "<type>"
    IDENTIFIER = "<identifier>"


KEYWORDS = [
    TokenKind.TRUE, TokenKind.FALSE, TokenKind.ZERO, TokenKind.IF, TokenKind.THEN, TokenKind.ELSE,
    TokenKind.SUCC, TokenKind.PRED, TokenKind.ISZERO, TokenKind.PLUS, TokenKind.MINUS,
]

RULES = [
    (re.compile(r"\."), lexer.simply(TokenKind.DOT)),
    (re.compile(r":"), lexer.simply(TokenKind.COLON)),
    (re.compile(r"->"), lexer.simply(TokenKind.ARROW)),
    (re.compile(r"λ"), lexer.simply(TokenKind.LAMBDA)),
    (re.compile(r"\("), lexer.simply(TokenKind.LEFT_PAREN)),
    (re.compile(r"\)"), lexer.simply(TokenKind.RIGHT_PAREN)),
] + [
    (re.compile(keyword.value + r"(?![_0-9a-zA-Z'])"), lexer.simply(keyword)) for keyword in KEYWORDS
] + [
    (re.compile(r"[A-Z][_0-9a-zA-Z']*"), lexer.simply(TokenKind.TYPE)),
    (re.compile(r"[a-z][_0-9a-zA-Z']*"), lexer.identifier(TokenKind.IDENTIFIER)),
    (re.compile(r"[_0-9']+"), lexer.continuation(TokenKind.IDENTIFIER, "identifier must begin with a lowercase letter")),
]


def tokenize(expression):
    return lexer.tokenize(expression, RULES)


class Parser(pure.Parser):
    DOT = TokenKind.DOT
    LAMBDA = TokenKind.LAMBDA
    LEFT_PAREN = TokenKind.LEFT_PAREN
    RIGHT_PAREN = TokenKind.RIGHT_PAREN
    IDENTIFIER = TokenKind.IDENTIFIER

    def binder_type(self):
        self.match(TokenKind.COLON, "':' expected")
        return self.type()

    def type(self):
        input_type = self.atom_type()
        if self.skip_is(TokenKind.ARROW):
            return ArrowType(input_type, self.type())
        return input_type

    def atom_type(self):
        if self.skip_is(TokenKind.LEFT_PAREN):
            result = self.type()
            self.match(TokenKind.RIGHT_PAREN, "')' expected")
            return result

        if self.next_is(TokenKind.TYPE):
            token = self.match(TokenKind.TYPE, "type expected")
            if token.value not in TYPE_NAMES:
                raise self.error("type must be Bool or Nat", token.start)
            return TYPE_NAMES[token.value]

        if self.next_is(TokenKind.IDENTIFIER):
            raise self.error("type name must begin with uppercase letter")
        raise self.error("type expected")

    def atom(self):
        token = self.peek()
        if token is None:
            return None

        if token.kind in (TokenKind.TRUE, TokenKind.FALSE):
            self.index += 1
            return Boolean(token.kind is TokenKind.TRUE, span=span(token, token))

        if token.kind is TokenKind.ZERO:
            self.index += 1
            return Zero(span=span(token, token))

        if token.kind is TokenKind.IF:
            return self.conditional()

        if token.kind.value in PRIMITIVES:
            return self.primitive()

        return super().atom()

    def conditional(self):
        start = self.match(TokenKind.IF, "'if' expected")
        condition = self.term()
        self.match(TokenKind.THEN, "'then' expected")
        consequent = self.term()
        self.match(TokenKind.ELSE, "'else' expected")
        alternative = self.term()
        return IfThenElse(condition, consequent, alternative, span=span(start, alternative))

    def primitive(self):
        keyword = self.tokens[self.index]
        self.index += 1

        primitive = PRIMITIVES[keyword.value]
        arity = 2 if keyword.kind in (TokenKind.PLUS, TokenKind.MINUS) else 1

        operands = []
        for __ in range(arity):
            operand = self.atom()
            if operand is None:
                raise self.error("unexpected end of expression" if self.done else "argument expected")
            operands.append(operand)

        return primitive(*operands, span=span(keyword, operands[-1]))


def parse(tokens):
    """Parses a complete token list into a typed term."""
    return Parser(tokens).parse()


def read(expression):
    """Tokenizes and parses expression."""
    return parse(tokenize(expression))


def read_type(expression):
    """Tokenizes and parses a type expression such as 'Nat -> Bool'."""
    parser = Parser(tokenize(expression))
    result = parser.type()
    if not parser.done:
        raise parser.error(f"unexpected '{parser.peek().value}'")
    return result
