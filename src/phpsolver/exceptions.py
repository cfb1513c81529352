# Custom exceptions for phpsolver

class PhpSolverError(Exception):
    """Base exception for all application-specific errors."""
    pass

class IndexCorruptionError(PhpSolverError):
    """Raised if a symbol index snapshot fails to load or validate."""
    pass

class ConfigError(PhpSolverError):
    """Raised for configuration-related problems."""
    pass


class TypeSyntaxError(PhpSolverError, ValueError):
    """Raised when the textual form of a type expression cannot be decoded."""

    def __init__(self, text: str, position: int, message: str):
        self.text = text
        self.position = position
        self.message = message
        super().__init__(f"Bad type expression {text!r} at offset {position}: {message}")


class InvariantViolation(PhpSolverError):
    """
    Raised when the producer of a type expression or syntax tree broke its
    encoding contract. Never a property of the analyzed program, so callers
    must not treat it as an ordinary empty result.
    """
    pass


class UnknownTypeExpressionError(InvariantViolation):
    """Raised when the type resolver meets a variant it has no rule for."""

    def __init__(self, expr: object):
        self.expr = expr
        super().__init__(f"Unexpected type expression: {expr!r}")


class UnexpectedNodeShapeError(InvariantViolation):
    """Raised when a tree walk reaches a child key its node kind cannot have."""

    def __init__(self, node_kind: str, key: str):
        self.node_kind = node_kind
        self.key = key
        super().__init__(f"Unexpected child key '{key}' for {node_kind}")
