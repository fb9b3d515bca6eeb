"""Normal-order beta reduction.

One pass (eval_once) contracts the redex at the root if there is one and otherwise moves into the subterms, so a single
pass may contract several redexes that do not overlap. evaluate repeats passes until two consecutive results are
α-equivalent. Terms without a normal form never get there: give evaluate a step limit when that matters.

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

import logging

from lambdacalc.lang.error import StepLimitExceeded
from lambdacalc.pure.substitution import canonical, subst
from lambdacalc.pure.term import Abstraction, Application, Variable, closed, equals

logger = logging.getLogger(__name__)


class NormalOrderReducer:
    """Drives a term towards its normal form.

    max_steps bounds the number of passes evaluate may take (None: unbounded). definitions maps names of recursive
    aliases to their values: a free variable applied to an argument is unfolded into its definition when it has one
    and the argument does not depend on an enclosing binder.
    Every intermediate term is recorded in steps.
    """

    def __init__(self, max_steps=None, definitions=None):
        self.max_steps = max_steps
        self.definitions = definitions or {}
        self.steps = []

    def step(self, term):
        """One normal-order pass over term, not yet canonical."""
        if isinstance(term, Application):
            left = term.left
            if isinstance(left, Abstraction):
                return subst(left.body, left.binding, term.right)
            # an argument that depends on an enclosing binder stays folded
            if isinstance(left, Variable) and left.is_free and left.name in self.definitions and closed(term.right):
                return Application(self.definitions[left.name], term.right)
        return term.reduce(self.step)

    def eval_once(self, term):
        return canonical(self.step(term))

    def evaluate(self, term):
        """Reduces term to normal form."""
        self.steps = []
        current = self.eval_once(term)
        self.steps.append(current)
        while True:
            following = self.eval_once(current)
            if equals(current, following):
                return following

            self.steps.append(following)
            logger.debug("β %d: %s", len(self.steps), following)
            if self.max_steps is not None and len(self.steps) > self.max_steps:
                raise StepLimitExceeded(self.max_steps)
            current = following


def eval_once(term, definitions=None):
    """One normal-order reduction pass over term."""
    return NormalOrderReducer(definitions=definitions).eval_once(term)


def evaluate(term, max_steps=None, definitions=None):
    """Reduces term to normal form, raising StepLimitExceeded after max_steps passes if max_steps is given."""
    return NormalOrderReducer(max_steps, definitions).evaluate(term)
