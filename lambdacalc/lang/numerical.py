"""Natural numbers in both calculi. The untyped calculus has no numbers, so they are encoded as Church numerals
(n = λf.λx.f (f (... x)), f applied n times); the typed calculus writes them as succ (succ (... zero)).

Operations on numbers are not implemented here (see lang/prelude.py): this module only builds and recognises numerals.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from lambdacalc.pure import lexical
from lambdacalc.pure.term import Abstraction, Application, Variable
from lambdacalc.typed.term import ZERO, Succ, Zero


def _natural(num):
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise ValueError(f"expected natural number, got '{num}'")
    return num


def cnumber(num):
    """Returns the Church numeral of num (cnum = Church numeral)."""
    num = _natural(num)
    return lexical.read("λf.λx." + "f (" * num + "x" + ")" * num)


def number(cnum):
    """Returns the number cnum encodes. If cnum isn't a Church numeral, returns None."""
    if not isinstance(cnum, Abstraction) or not isinstance(cnum.body, Abstraction):
        return None

    num = 0
    nth_body = cnum.body.body
    while isinstance(nth_body, Application):
        function = nth_body.left
        if not isinstance(function, Variable) or function.index != 2:
            return None

        nth_body = nth_body.right
        num += 1

    return num if isinstance(nth_body, Variable) and nth_body.index == 1 else None


def nat(num):
    """Returns num as a typed numeral."""
    term = ZERO
    for __ in range(_natural(num)):
        term = Succ(term)
    return term


def nat_number(term):
    """Returns the number typed numeral term stands for, or None."""
    num = 0
    while isinstance(term, Succ):
        term = term.term
        num += 1
    return num if isinstance(term, Zero) else None


def numeral(term):
    """Returns the number term stands for in either calculus, or None."""
    num = number(term)
    return num if num is not None else nat_number(term)
