"""Exceptions raised by the graph, pattern and mining layers."""


class GraphError(RuntimeError):
    """The wrapper graph was asked to do something its structure forbids."""


class PatternError(ValueError):
    """A pattern is structurally inconsistent.

    Raised when a constraint is mapped to a label that no earlier constraint
    binds, when the arity of a mapping is wrong, or when a constraint that
    cannot generate candidates is asked to introduce a new label.
    """

    def __init__(self, pattern_name: str, label: str | None, message: str):
        self.pattern_name = pattern_name
        self.label = label
        where = f"pattern {pattern_name!r}"
        if label is not None:
            where += f", label {label!r}"
        super().__init__(f"{where}: {message}")


class MinerConfigurationError(ValueError):
    """An unsupported SIF type was requested."""
