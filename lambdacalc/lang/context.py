"""Alias management. An ExecutionContext names terms so later expressions can use them: every name is replaced by its
(fully reduced) definition before an expression is reduced (forward aliasing), and every part of a result that is
α-equivalent to a definition is replaced by its name afterwards (backward aliasing), so results read in terms of the
names the user gave.
"""

import logging

from lambdacalc.lang import prelude
from lambdacalc.lang.error import (AliasInUse, BareVariable, DuplicateDefinition, RecursiveDefinition,
                                   StepLimitExceeded)
from lambdacalc.pure import lexical
from lambdacalc.pure.reduction import NormalOrderReducer
from lambdacalc.pure.substitution import canonical, subst
from lambdacalc.pure.term import Abstraction, Variable, equals, free

logger = logging.getLogger(__name__)


class ExecutionContext:
    """Governs the aliases of an untyped λ-calculus session. Every mutation happens only after all checks passed, so a
    failed add_alias leaves the context as it was.

    Redefining an existing name replaces its definition; the definition may use the old meaning of the name.
    """
    MAX_STEPS = 1000  # reduction passes allowed per evaluation; None for no limit
    PRELUDE = prelude.UNTYPED

    def __init__(self, max_steps=MAX_STEPS):
        self.max_steps = max_steps
        self._aliases = {}  # name: reduced, alias-free definition
        self._display = {}  # name: (source text, type text or None)

    @classmethod
    def standard(cls, max_steps=MAX_STEPS):
        """Returns a context seeded with the standard combinators."""
        context = cls(max_steps)
        context.load(cls.PRELUDE)
        return context

    def load(self, definitions):
        """Adds (name, source) definitions in order."""
        for name, source in definitions:
            self.add_alias(name, source)

    def read(self, expression):
        return lexical.read(expression)

    def check(self, term, name=None, declared=None):
        """Static check of term before it is reduced. Returns its type, if the calculus has types."""
        return None

    def recursive(self, name, term, declared=None):
        """Whether the definition of name is allowed to refer to name itself."""
        if name in free(term) and name not in self._aliases:
            raise RecursiveDefinition(name)
        return False

    def definitions(self, exclude=()):
        """Aliases the reducer unfolds on demand instead of forward aliasing them."""
        return {}

    @property
    def aliases(self):
        return dict(self._aliases)

    @property
    def aliases_as_strings(self):
        """(name, display text) of every alias, in order of definition."""
        result = []
        for name, (source, type_text) in self._display.items():
            result.append((name, source if type_text is None else f"{source} : {type_text}"))
        return result

    def __contains__(self, name):
        return name in self._aliases

    def __len__(self):
        return len(self._aliases)

    def add_alias(self, name, expression):
        """Reduces expression and binds name to it. Raises DuplicateDefinition if another alias already has the same
        value, BareVariable if the value is just a variable and AliasInUse when redefining a name another alias
        refers to.
        """
        self._define(name, expression)

    def _define(self, name, expression, declared=None):
        term = self.read(expression)
        term_type = self.check(term, name, declared)
        is_recursive = self.recursive(name, term, declared)

        keep = {name} if is_recursive else set()
        value, __ = self._reduce(self.forward_alias(term, keep), keep)

        for alias, existing in self._aliases.items():
            if alias != name and equals(existing, value):
                raise DuplicateDefinition(name, alias)
        if isinstance(value, Variable):
            raise BareVariable(name)
        if name in self._aliases:
            self._check_unused(name)

        self._commit(name, value, expression, term_type, is_recursive)

    def _commit(self, name, value, expression, term_type, is_recursive):
        self._aliases[name] = value
        self._display[name] = (expression, None if term_type is None else str(term_type))
        logger.info("alias %s := %s", name, value)

    def remove_alias(self, name):
        """Removes alias name. Returns whether it existed. Raises AliasInUse if another alias refers to name."""
        if name not in self._aliases:
            return False
        self._check_unused(name)

        del self._aliases[name]
        del self._display[name]
        logger.info("alias %s removed", name)
        return True

    def _check_unused(self, name):
        # values refer to recursive aliases by name, so those names must keep their meaning
        for alias, value in self._aliases.items():
            if alias != name and name in free(value):
                raise AliasInUse(name, alias)

    def _reduce(self, term, exclude=()):
        reducer = NormalOrderReducer(self.max_steps, self.definitions(exclude))
        return reducer.evaluate(term), reducer.steps

    def _run(self, expression):
        term = self.read(expression)
        self.check(term)
        expanded = self.forward_alias(term)
        result, steps = self._reduce(expanded)
        return expanded, steps, self.backward_alias(result)

    def evaluate(self, expression):
        """Reads expression, substitutes aliases into it, reduces it to normal form and substitutes aliases back."""
        __, __, result = self._run(expression)
        return result

    def verbose_evaluate(self, expression):
        """Like evaluate, but returns every stage as (label, text): the aliased term (α), each reduction pass (β) and
        the result (λ).
        """
        expanded, steps, result = self._run(expression)
        if steps and equals(steps[0], expanded):
            steps = steps[1:]
        return [("α", str(expanded))] + [("β", str(step)) for step in steps] + [("λ", str(result))]

    def _fixpoint(self, once, term):
        previous = once(term)
        current = once(previous)
        passes = 0
        while not equals(previous, current):
            passes += 1
            if self.max_steps is not None and passes > self.max_steps:
                raise StepLimitExceeded(self.max_steps)
            previous, current = current, once(current)
        return current

    def forward_alias(self, term, keep=()):
        """Substitutes every alias name free in term by its definition, except names in keep and names of recursive
        aliases, until nothing changes.
        """
        skip = set(keep) | set(self.definitions())

        def once(term):
            for alias, value in self._aliases.items():
                if alias not in skip and alias in free(term):
                    term = subst(term, alias, value)
            return term

        return self._fixpoint(once, term)

    def backward_alias(self, term):
        """Replaces every subterm α-equivalent to an alias' definition by the alias name, until nothing changes. A node
        is tried before its subterms.
        """

        def once(term, binders=()):
            for alias, value in self._aliases.items():
                # an alias name captured by an enclosing binder would change the meaning of the term
                if alias not in binders and equals(term, value):
                    return Variable(alias)

            if isinstance(term, Abstraction):
                return term.with_nodes(once(term.body, binders + (term.binding,)))
            return term.with_nodes(*(once(node, binders) for node in term.nodes))

        return canonical(self._fixpoint(once, term))
