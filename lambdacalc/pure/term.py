"""Lambda calculus abstract syntax tree.

Every node is immutable. Children are exposed through `nodes` and a node with different children is built with
`with_nodes`, so substitution, reduction and canonicalization can walk node kinds they know nothing about (the typed
calculus adds its own, see typed/term.py). Nodes built by the parser remember the source span they were read from;
spans take no part in equality.

Two nodes are equal iff they are α-equivalent, i.e. iff their de Bruijn forms are identical: free variables compare by
name, bound variables by index only.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Term(ABC):
    """Superclass of every λ-term node."""

    @property
    @abstractmethod
    def nodes(self):
        """Immediate subterms, left to right."""

    @abstractmethod
    def with_nodes(self, *nodes):
        """Copy of self with its immediate subterms replaced by nodes."""

    @abstractmethod
    def __str__(self):
        """Named form with minimal parentheses."""

    @abstractmethod
    def to_de_bruijn(self):
        """De Bruijn form: binders print as bare λ, bound variables as their index."""

    @property
    def is_simple(self):
        """Whether this node never needs parentheses as an operand."""
        return False

    @property
    def greedy(self):
        """Whether this node extends as far right as possible, and so needs parentheses to the left of anything."""
        return False

    def same_kind(self, other):
        """Whether self and other agree on everything but their subterms."""
        return type(self) is type(other)

    def reduce(self, step):
        """One normal-order pass over this node, given step, the pass to run on subterms. By default every subterm is
        stepped. Nodes with their own reduction rules override this.
        """
        return self.with_nodes(*(step(node) for node in self.nodes))

    def __eq__(self, other):
        return isinstance(other, Term) and equals(self, other)

    def __hash__(self):
        return hash(self.to_de_bruijn())

    def __repr__(self):
        return f"{type(self).__name__}('{self}')"


def operand(node, render=str):
    """Renders node as an argument, parenthesized unless simple."""
    return render(node) if node.is_simple else f"({render(node)})"


def function(node, render=str):
    """Renders node as the left side of an application."""
    return f"({render(node)})" if node.greedy else render(node)


def de_bruijn(node):
    return node.to_de_bruijn()


@dataclass(frozen=True, eq=False, repr=False)
class Variable(Term):
    """Variable: free if index is 0, otherwise bound by the index-th enclosing abstraction."""
    name: str
    index: int = 0
    span: tuple = None

    @property
    def nodes(self):
        return ()

    def with_nodes(self):
        return self

    @property
    def is_simple(self):
        return True

    @property
    def is_free(self):
        return self.index == 0

    def __str__(self):
        return self.name

    def to_de_bruijn(self):
        return str(self.index) if self.index else self.name


@dataclass(frozen=True, eq=False, repr=False)
class Abstraction(Term):
    """Abstraction λbinding.body. type is the binder's type in the typed calculus and None otherwise."""
    binding: str
    body: Term
    type: object = None
    span: tuple = None

    @property
    def nodes(self):
        return (self.body,)

    def with_nodes(self, body):
        return Abstraction(self.binding, body, self.type)

    @property
    def greedy(self):
        return True

    def same_kind(self, other):
        return isinstance(other, Abstraction) and self.type == other.type

    def __str__(self):
        if self.type is None:
            return f"λ{self.binding}.{self.body}"
        return f"λ{self.binding}:{self.type}.{self.body}"

    def to_de_bruijn(self):
        if self.type is None:
            return f"λ {self.body.to_de_bruijn()}"
        return f"λ:{self.type}. {self.body.to_de_bruijn()}"


@dataclass(frozen=True, eq=False, repr=False)
class Application(Term):
    """Application of left to right. Applications associate to the left: a b c = (a b) c."""
    left: Term
    right: Term
    span: tuple = None

    @property
    def nodes(self):
        return (self.left, self.right)

    def with_nodes(self, left, right):
        return Application(left, right)

    def __str__(self):
        return f"{function(self.left)} {operand(self.right)}"

    def to_de_bruijn(self):
        return f"{function(self.left, de_bruijn)} {operand(self.right, de_bruijn)}"


def equals(first, second):
    """α-equivalence."""
    if isinstance(first, Variable) and isinstance(second, Variable):
        if first.is_free and second.is_free:
            return first.name == second.name
        return first.index == second.index

    if not first.same_kind(second):
        return False
    return all(equals(node, other) for node, other in zip(first.nodes, second.nodes))


def _unique(names):
    return list(dict.fromkeys(names))


def free(term):
    """Names of the free variables of term, in order of first occurrence."""

    def helper(term):
        if isinstance(term, Variable):
            return [term.name]
        elif isinstance(term, Abstraction):
            return [name for name in helper(term.body) if name != term.binding]
        return [name for node in term.nodes for name in helper(node)]

    return _unique(helper(term))


def bound(term):
    """Names bound by the abstractions of term, in order of first occurrence."""

    def helper(term):
        if isinstance(term, Abstraction):
            return [term.binding] + helper(term.body)
        return [name for node in term.nodes for name in helper(node)]

    return _unique(helper(term))


def variables(term):
    """Every name occurring in term, bound or free, in order of first occurrence."""

    def helper(term):
        if isinstance(term, Variable):
            return [term.name]
        elif isinstance(term, Abstraction):
            return [term.binding] + helper(term.body)
        return [name for node in term.nodes for name in helper(node)]

    return _unique(helper(term))


def closed(term):
    """Whether no variable of term is bound by an abstraction enclosing term."""

    def helper(term, depth):
        if isinstance(term, Variable):
            return term.index <= depth
        elif isinstance(term, Abstraction):
            return helper(term.body, depth + 1)
        return all(helper(node, depth) for node in term.nodes)

    return helper(term, 0)
