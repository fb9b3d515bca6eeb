"""Lambda calculus interpreter.

For reference:
- "Pure lambda calculus": lambda calculus as defined by Church (lambdacalc/pure)
- "Typed lambda calculus": simply-typed lambda calculus with Bool and Nat (lambdacalc/typed)

Basic program flow:
    1. Tokenizer: splits an expression into tokens (lambdacalc/lang/tokenize.py, rules per calculus in lexical.py)
    2. Parser: produces an AST whose variables already carry their de Bruijn indices (lambdacalc/lang/parse.py)
    3. Type checker (typed calculus only): rejects ill-typed terms before they run (lambdacalc/typed/checker.py)
    4. Reducer: normal-order reduction to normal form (lambdacalc/pure/reduction.py)

ExecutionContext (lambdacalc/lang/context.py) ties the steps together and lets terms be named.
"""
