"""ExecutionContext for the simply-typed calculus. Every expression is type checked before it is reduced; free
variables of an expression may only be aliases.

An alias added with a declared type may refer to itself. Such an alias is never substituted into expressions ahead of
time: the reducer unfolds it each time it is applied to an argument, so a recursion that terminates on every input it
is given (sumTo three) also terminates here.
"""

from lambdacalc.lang import prelude
from lambdacalc.lang.context import ExecutionContext
from lambdacalc.lang.error import TypingError
from lambdacalc.pure.term import free
from lambdacalc.typed import lexical
from lambdacalc.typed.checker import type_of


class TypedExecutionContext(ExecutionContext):
    PRELUDE = prelude.TYPED

    def __init__(self, max_steps=ExecutionContext.MAX_STEPS):
        super().__init__(max_steps)
        self.type_context = {}  # name: type of every alias
        self._recursive = set()

    def load(self, definitions):
        """Adds (name, source) and (name, type, source) definitions in order."""
        for definition in definitions:
            if len(definition) == 3:
                self.add_alias_with_type(*definition)
            else:
                self.add_alias(*definition)

    def read(self, expression):
        return lexical.read(expression)

    def check(self, term, name=None, declared=None):
        context = dict(self.type_context)
        if declared is not None:
            context[name] = declared

        inferred = type_of(term, context)
        if declared is not None and inferred != declared:
            raise TypingError(term, f"declared type {declared} does not match inferred type {inferred}")
        return inferred

    def recursive(self, name, term, declared=None):
        # without a declared type, name can only refer to a previous definition of itself
        return declared is not None and name in free(term)

    def definitions(self, exclude=()):
        return {name: self._aliases[name] for name in self._recursive if name not in exclude}

    def add_alias_with_type(self, name, declared, expression):
        """Like add_alias, but the alias is declared to have type declared (a type or its text, e.g. "Nat -> Nat"), and
        its definition may refer to the alias itself.
        """
        if isinstance(declared, str):
            declared = lexical.read_type(declared)
        self._define(name, expression, declared)

    def _commit(self, name, value, expression, term_type, is_recursive):
        super()._commit(name, value, expression, term_type, is_recursive)
        self.type_context[name] = term_type
        if is_recursive:
            self._recursive.add(name)
        else:
            self._recursive.discard(name)

    def remove_alias(self, name):
        if not super().remove_alias(name):
            return False

        del self.type_context[name]
        self._recursive.discard(name)
        return True
