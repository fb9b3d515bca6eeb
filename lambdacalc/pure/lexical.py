"""Pure lambda calculus tokenizer and parser.

Formally, pure lambda calculus can be defined as

```
<λ-term> ::= <identifier>                   ; "variable"
                                            ; - a letter followed by letters, digits, '_' or "'"
           | "λ" <identifier> "." <λ-term>  ; "abstraction"
                                            ; - abstraction bodies are greedy: λx.x y = λx.(x y) != (λx.x) (y)
           | <λ-term> <λ-term>              ; "application"
                                            ; - associating by left: a b c d = (((a b) c) d)
```

The parser is a recursive-descent one over the grammar

```
term        ::= "λ" ID "." term | application
application ::= atom+ [abstraction]      ; a trailing abstraction is the last argument: x λy.y = x (λy.y)
atom        ::= "(" term ")" | ID
```

It tracks the binders in scope to give every variable its de Bruijn index. A binder whose name is already in scope is
renamed to a fresh name (f0, f1, ...) for its whole body, so that no parsed term ever shadows a name.
"""

from enum import Enum
import re

from lambdacalc.lang import parse as base
from lambdacalc.lang import tokenize as lexer
from lambdacalc.pure.term import Abstraction, Application, Variable


class TokenKind(Enum):
    DOT = "."
    LAMBDA = "λ"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    IDENTIFIER = "<identifier>"


RULES = [
    (re.compile(r"\."), lexer.simply(TokenKind.DOT)),
    (re.compile(r"λ"), lexer.simply(TokenKind.LAMBDA)),
    (re.compile(r"\("), lexer.simply(TokenKind.LEFT_PAREN)),
    (re.compile(r"\)"), lexer.simply(TokenKind.RIGHT_PAREN)),
    (re.compile(r"[a-zA-Z][_0-9a-zA-Z']*"), lexer.identifier(TokenKind.IDENTIFIER)),
    (re.compile(r"[_0-9']+"), lexer.continuation(TokenKind.IDENTIFIER, "identifier must begin with a letter")),
]


def tokenize(expression):
    return lexer.tokenize(expression, RULES)


def span(first, last):
    """Span from the start of first to the end of last (tokens or terms)."""
    start = first.start if isinstance(first, lexer.Token) else first.span[0]
    end = last.end if isinstance(last, lexer.Token) else last.span[1]
    return start, end


class Parser(base.Parser):
    DOT = TokenKind.DOT
    LAMBDA = TokenKind.LAMBDA
    LEFT_PAREN = TokenKind.LEFT_PAREN
    RIGHT_PAREN = TokenKind.RIGHT_PAREN
    IDENTIFIER = TokenKind.IDENTIFIER

    def term(self):
        if self.done:
            raise self.error("λ-term expected")
        if self.next_is(self.LAMBDA):
            return self.abstraction()
        return self.application()

    def binder_type(self):
        """Type annotation after a binder. The untyped calculus has none."""
        return None

    def abstraction(self):
        lam = self.match(self.LAMBDA, "'λ' expected")
        name = self.match(self.IDENTIFIER, "λ-abstraction binding expected")
        binder_type = self.binder_type()
        self.match(self.DOT, "'.' expected")

        with self.scope.binder(name.value) as binding:
            body = self.term()
        return Abstraction(binding, body, binder_type, span=span(lam, body))

    def application(self):
        lhs = self.atom()
        if lhs is None:
            raise self.error("λ-term expected")

        while True:
            if self.next_is(self.LAMBDA):
                rhs = self.abstraction()
                return Application(lhs, rhs, span=span(lhs, rhs))

            rhs = self.atom()
            if rhs is None:
                return lhs
            lhs = Application(lhs, rhs, span=span(lhs, rhs))

    def atom(self):
        """Parses an atom, or returns None if the next token cannot start one."""
        if self.next_is(self.DOT):
            previous = self.tokens[max(self.index - 1, 0)]
            raise self.error("'λ' expected", previous.start)

        if self.skip_is(self.LEFT_PAREN):
            term = self.term()
            self.match(self.RIGHT_PAREN, "')' expected")
            return term

        if self.next_is(self.IDENTIFIER):
            token = self.match(self.IDENTIFIER, "identifier expected")
            name = self.scope.resolve(token.value)
            return Variable(name, self.scope.index_of(name), span=span(token, token))

        return None


def parse(tokens):
    """Parses a complete token list into a term."""
    return Parser(tokens).parse()


def read(expression):
    """Tokenizes and parses expression."""
    return parse(tokenize(expression))
