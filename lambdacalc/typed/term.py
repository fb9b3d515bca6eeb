"""Simply-typed lambda calculus with booleans and natural numbers.

Abstractions are the ones of the pure calculus (pure/term.py) with their binder's type filled in. On top of those come
boolean literals, conditionals, zero and the Nat primitives succ, pred, iszero, plus and minus. A natural number is
written succ (succ (... zero)).

Reduction rules of the primitives:

```
if true then a else b      -> a
if false then a else b     -> b
pred (succ n)              -> n
pred zero                  -> undefined (ArithmeticUnderflow)
iszero zero                -> true
iszero (succ n)            -> false
plus m zero                -> m
plus m (succ n)            -> succ (plus m n)
minus m zero               -> m
minus zero (succ n)        -> zero             ; truncated: minus never underflows
minus (succ m) (succ n)    -> minus m n
```
"""

from dataclasses import dataclass

from lambdacalc.lang.error import ArithmeticUnderflow
from lambdacalc.pure.term import Term, de_bruijn, equals, operand


@dataclass(frozen=True)
class SimpleType:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class ArrowType:
    """Type of functions from input to output. Arrows associate to the right: A -> B -> C = A -> (B -> C)."""
    input: object
    output: object

    def __str__(self):
        if isinstance(self.input, ArrowType):
            return f"({self.input}) -> {self.output}"
        return f"{self.input} -> {self.output}"


BOOL = SimpleType("Bool")
NAT = SimpleType("Nat")
TYPE_NAMES = {"Bool": BOOL, "Nat": NAT}


@dataclass(frozen=True, eq=False, repr=False)
class Boolean(Term):
    value: bool
    span: tuple = None

    @property
    def nodes(self):
        return ()

    def with_nodes(self):
        return self

    @property
    def is_simple(self):
        return True

    def same_kind(self, other):
        return isinstance(other, Boolean) and self.value == other.value

    def __str__(self):
        return "true" if self.value else "false"

    def to_de_bruijn(self):
        return str(self)


TRUE = Boolean(True)
FALSE = Boolean(False)


@dataclass(frozen=True, eq=False, repr=False)
class Zero(Term):
    span: tuple = None

    @property
    def nodes(self):
        return ()

    def with_nodes(self):
        return self

    @property
    def is_simple(self):
        return True

    def __str__(self):
        return "zero"

    def to_de_bruijn(self):
        return "zero"


ZERO = Zero()


@dataclass(frozen=True, eq=False, repr=False)
class IfThenElse(Term):
    condition: Term
    consequent: Term
    alternative: Term
    span: tuple = None

    @property
    def nodes(self):
        return (self.condition, self.consequent, self.alternative)

    def with_nodes(self, condition, consequent, alternative):
        return IfThenElse(condition, consequent, alternative)

    @property
    def greedy(self):
        return True

    def reduce(self, step):
        if isinstance(self.condition, Boolean):
            return self.consequent if self.condition.value else self.alternative

        # branches only move once the condition is stuck
        condition = step(self.condition)
        if not equals(condition, self.condition):
            return IfThenElse(condition, self.consequent, self.alternative)
        return IfThenElse(condition, step(self.consequent), step(self.alternative))

    def __str__(self):
        return f"if {self.condition} then {self.consequent} else {self.alternative}"

    def to_de_bruijn(self):
        condition, consequent, alternative = (node.to_de_bruijn() for node in self.nodes)
        return f"if {condition} then {consequent} else {alternative}"


class Primitive(Term):
    """Nat primitive: a keyword applied to a fixed number of operands."""
    KEYWORD = None

    def __str__(self):
        return " ".join([self.KEYWORD] + [operand(node) for node in self.nodes])

    def to_de_bruijn(self):
        return " ".join([self.KEYWORD] + [operand(node, de_bruijn) for node in self.nodes])


@dataclass(frozen=True, eq=False, repr=False)
class Succ(Primitive):
    KEYWORD = "succ"
    term: Term
    span: tuple = None

    @property
    def nodes(self):
        return (self.term,)

    def with_nodes(self, term):
        return Succ(term)


@dataclass(frozen=True, eq=False, repr=False)
class Pred(Primitive):
    KEYWORD = "pred"
    term: Term
    span: tuple = None

    @property
    def nodes(self):
        return (self.term,)

    def with_nodes(self, term):
        return Pred(term)

    def reduce(self, step):
        if isinstance(self.term, Succ):
            return self.term.term
        if isinstance(self.term, Zero):
            raise ArithmeticUnderflow(self)
        return Pred(step(self.term))


@dataclass(frozen=True, eq=False, repr=False)
class IsZero(Primitive):
    KEYWORD = "iszero"
    term: Term
    span: tuple = None

    @property
    def nodes(self):
        return (self.term,)

    def with_nodes(self, term):
        return IsZero(term)

    def reduce(self, step):
        if isinstance(self.term, Zero):
            return TRUE
        if isinstance(self.term, Succ):
            return FALSE
        return IsZero(step(self.term))


@dataclass(frozen=True, eq=False, repr=False)
class Plus(Primitive):
    KEYWORD = "plus"
    left: Term
    right: Term
    span: tuple = None

    @property
    def nodes(self):
        return (self.left, self.right)

    def with_nodes(self, left, right):
        return Plus(left, right)

    def reduce(self, step):
        if isinstance(self.right, Zero):
            return self.left
        if isinstance(self.right, Succ):
            return Succ(Plus(self.left, self.right.term))
        return Plus(step(self.left), step(self.right))


@dataclass(frozen=True, eq=False, repr=False)
class Minus(Primitive):
    KEYWORD = "minus"
    left: Term
    right: Term
    span: tuple = None

    @property
    def nodes(self):
        return (self.left, self.right)

    def with_nodes(self, left, right):
        return Minus(left, right)

    def reduce(self, step):
        if isinstance(self.right, Zero):
            return self.left
        if isinstance(self.right, Succ):
            if isinstance(self.left, Zero):
                return ZERO
            if isinstance(self.left, Succ):
                return Minus(self.left.term, self.right.term)
        return Minus(step(self.left), step(self.right))


PRIMITIVES = {primitive.KEYWORD: primitive for primitive in (Succ, Pred, IsZero, Plus, Minus)}
