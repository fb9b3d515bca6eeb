"""Standard definitions an ExecutionContext can be seeded with (see ExecutionContext.standard). Entries are added in
order, so every entry may use the ones before it. Typed entries with three fields declare their type, which lets them
be recursive.

The untyped numerals start at one: zero would be λf.λx.x, which is α-equivalent to false.
"""

NUMERALS = ["one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten"]


def _numerals(zero):
    previous = zero
    for name in NUMERALS:
        yield name, f"succ {previous}"
        previous = name


UNTYPED = [
    ("true", "λx.λy.x"),
    ("false", "λx.λy.y"),
    ("not", "λp.p false true"),
    ("and", "λp.λq.p q p"),
    ("or", "λp.λq.p p q"),
    ("succ", "λn.λf.λx.f (n f x)"),
    ("plus", "λm.λn.m succ n"),
    ("mult", "λm.λn.λf.m (n f)"),
    ("pow", "λb.λe.e b"),
    *_numerals("false"),
]

TYPED = [
    ("not", "λx:Bool.if x then false else true"),
    ("or", "λx:Bool.λy:Bool.if x then true else y"),
    ("and", "λx:Bool.λy:Bool.if x then y else false"),
    ("xor", "λx:Bool.λy:Bool.and (or x y) (or (not x) (not y))"),
    ("leq", "λx:Nat.λy:Nat.iszero (minus x y)"),
    ("eq", "λx:Nat.λy:Nat.and (leq x y) (leq y x)"),
    *_numerals("zero"),
    ("sumTo", "Nat -> Nat", "λx:Nat.if (eq x zero) then zero else (plus x (sumTo (pred x)))"),
]
