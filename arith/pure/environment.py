"""Variable bindings used while evaluating arith syntax trees."""

from arith.lang.error import UndefinedVariable


class Environment:
    """Mutable mapping of variable name to float. Passed explicitly to every evaluate call."""

    def __init__(self, bindings=None):
        self._bindings = {}
        for name, value in (bindings or {}).items():
            self.set(name, value)

    def get(self, name):
        """Returns value bound to name, raises UndefinedVariable if name is unbound."""
        try:
            return self._bindings[name]
        except KeyError:
            raise UndefinedVariable(name) from None

    def set(self, name, value):
        """Binds name to value, overwriting any previous binding."""
        self._bindings[name] = float(value)

    def __contains__(self, name):
        return name in self._bindings

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self):
        return len(self._bindings)

    def __repr__(self):
        return f"Environment({self._bindings!r})"
