"""Substitution over λ-terms.

Substitution works on names. Afterwards the result is put back in canonical form: every variable gets the de Bruijn
index its name now has, and binders that ended up shadowing an enclosing binder are renamed, exactly as the parser
would do it if the printed result were read back in.
"""

from lambdacalc.lang.scope import Scope, fresh
from lambdacalc.pure.term import Abstraction, Variable, free, variables


def canonical(term):
    """Re-derives every de Bruijn index of term from its names, renaming shadowing binders."""
    scope = Scope(variables(term))

    def walk(term):
        if isinstance(term, Variable):
            name = scope.resolve(term.name)
            return Variable(name, scope.index_of(name), span=term.span)
        elif isinstance(term, Abstraction):
            with scope.binder(term.binding) as binding:
                body = walk(term.body)
            return Abstraction(binding, body, term.type, span=term.span)
        return term.with_nodes(*(walk(node) for node in term.nodes))

    return walk(term)


def _cap_subst(expr, target, value):
    if isinstance(expr, Variable):
        return value if expr.name == target else expr
    elif isinstance(expr, Abstraction) and expr.binding == target:
        return expr
    return expr.with_nodes(*(_cap_subst(node, target, value) for node in expr.nodes))


def cap_subst(expr, target, value):
    """expr[target := value], capturing: free variables of value may end up bound in the result."""
    return canonical(_cap_subst(expr, target, value))


def _subst(expr, target, value, value_free):
    if isinstance(expr, Variable):
        return value if expr.name == target else expr

    elif isinstance(expr, Abstraction):
        if expr.binding == target:
            return expr
        elif expr.binding not in value_free:
            return expr.with_nodes(_subst(expr.body, target, value, value_free))

        # expr.binding would capture a free variable of value: rename it first
        new_binding = fresh(variables(expr) + variables(value))
        avoidant_body = _cap_subst(expr.body, expr.binding, Variable(new_binding))
        return Abstraction(new_binding, _subst(avoidant_body, target, value, value_free), expr.type)

    return expr.with_nodes(*(_subst(node, target, value, value_free) for node in expr.nodes))


def subst(expr, target, value):
    """expr[target := value], renaming bound variables of expr where they would capture free variables of value."""
    return canonical(_subst(expr, target, value, set(free(value))))
