"""Binder scope tracking shared by the parsers and by canonical (see pure/substitution.py)."""

from contextlib import contextmanager


def fresh(used):
    """Returns the first of f0, f1, f2, ... that is not in used."""
    used = set(used)
    i = 0
    while f"f{i}" in used:
        i += 1
    return f"f{i}"


class Scope:
    """Stack of in-scope binder names plus a swap table for binders that had to be renamed because they would have
    shadowed an outer binder. reserved names are never chosen as fresh names (they are free variables of the term being
    read, which a renamed binder must not capture).
    """

    def __init__(self, reserved=()):
        self.names = []
        self.reserved = set(reserved)
        self._swaps = {}  # original name: stack of fresh names, innermost last

    def index_of(self, name):
        """Distance of name's binder from the top of the stack (1 = innermost) or 0 if name is free."""
        for distance, bound in enumerate(reversed(self.names), 1):
            if bound == name:
                return distance
        return 0

    def resolve(self, name):
        """Name an identifier actually refers to, after renaming of shadowing binders."""
        swaps = self._swaps.get(name)
        return swaps[-1] if swaps else name

    @contextmanager
    def binder(self, name):
        """Brings a binder named name into scope for the duration of the block. Yields the name the binder ends up
        with: name itself, or a fresh name if name is already in scope.
        """
        if self.index_of(name) == 0:
            self.names.append(name)
            try:
                yield name
            finally:
                self.names.pop()
            return

        new_name = fresh(self.names + list(self.reserved) + [name])
        self.names.append(new_name)
        self._swaps.setdefault(name, []).append(new_name)
        try:
            yield new_name
        finally:
            self.names.pop()
            self._swaps[name].pop()
            if not self._swaps[name]:
                del self._swaps[name]
