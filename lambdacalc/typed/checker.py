"""Type checking for the simply-typed calculus.

Variables bound by an abstraction take the binder's annotated type; free variables must be named in the context passed
to type_of (the ExecutionContext passes the types of its aliases). Every failure raises a TypingError tagged with the
subterm at fault, whose span points back into the source.
"""

from lambdacalc.lang.error import TypingError
from lambdacalc.pure.term import Abstraction, Application, Variable
from lambdacalc.typed.term import (BOOL, NAT, ArrowType, Boolean, IfThenElse, IsZero, Minus, Plus, Pred, Succ,
                                   Zero)


def type_of(term, context=None):
    """Returns the type of term, given context, a dict of free variable name: type."""
    context = context or {}
    binders = []  # types of the enclosing binders, innermost last

    def check_nat(primitive, operand):
        operand_type = infer(operand)
        if operand_type != NAT:
            raise TypingError(operand, f"'{primitive.KEYWORD}' expects an operand of type Nat, got {operand_type}")

    def infer(term):
        if isinstance(term, Variable):
            if term.index:
                return binders[-term.index]
            if term.name not in context:
                raise TypingError(term, f"unbound variable '{term.name}'")
            return context[term.name]

        elif isinstance(term, Abstraction):
            binders.append(term.type)
            try:
                return ArrowType(term.type, infer(term.body))
            finally:
                binders.pop()

        elif isinstance(term, Application):
            function_type = infer(term.left)
            if not isinstance(function_type, ArrowType):
                raise TypingError(term.left, f"'{term.left}' has type {function_type} and cannot be applied")

            argument_type = infer(term.right)
            if argument_type != function_type.input:
                msg = f"expected argument of type {function_type.input}, got {argument_type}"
                raise TypingError(term.right, msg)
            return function_type.output

        elif isinstance(term, Boolean):
            return BOOL

        elif isinstance(term, Zero):
            return NAT

        elif isinstance(term, IfThenElse):
            condition_type = infer(term.condition)
            if condition_type != BOOL:
                raise TypingError(term.condition, f"condition must have type Bool, got {condition_type}")

            consequent_type = infer(term.consequent)
            alternative_type = infer(term.alternative)
            if consequent_type != alternative_type:
                msg = f"branches of 'if' have different types: {consequent_type} and {alternative_type}"
                raise TypingError(term.alternative, msg)
            return consequent_type

        elif isinstance(term, (Succ, Pred)):
            check_nat(term, term.term)
            return NAT

        elif isinstance(term, IsZero):
            check_nat(term, term.term)
            return BOOL

        elif isinstance(term, (Plus, Minus)):
            check_nat(term, term.left)
            check_nat(term, term.right)
            return NAT

        raise TypingError(term, f"'{term}' cannot be typed")

    return infer(term)
