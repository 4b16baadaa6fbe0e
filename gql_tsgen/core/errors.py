"""Exceptions raised while generating code from a schema."""


class GeneratorError(Exception):
    """Base class for all generation failures."""


class ParseError(GeneratorError):
    """Raised when the schema document is not valid GraphQL SDL."""

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class UnsupportedTypeShape(GeneratorError):
    """Raised for type nestings outside the four supported shapes.

    Supported shapes are ``T``, ``T!``, ``[T]``/``[T!]`` and ``[T]!``/``[T!]!``.
    Nested lists and other combinations are rejected.
    """

    def __init__(self, type_repr: str, context: str | None = None):
        self.type_repr = type_repr
        self.context = context
        message = f"Unsupported type shape: {type_repr}"
        if context:
            message = f"{message} (in {context})"
        super().__init__(message)


class MissingRootOperation(GeneratorError):
    """Raised when a requested root operation type is not defined."""

    def __init__(self, root_name: str, operation_type: str):
        self.root_name = root_name
        self.operation_type = operation_type
        super().__init__(
            f"Schema has no '{root_name}' type; cannot generate {operation_type} operations"
        )


class DuplicateRootOperation(GeneratorError):
    """Raised when a root operation type is defined more than once."""

    def __init__(self, root_name: str, count: int):
        self.root_name = root_name
        self.count = count
        super().__init__(f"Root type '{root_name}' is defined {count} times")


class OutputSinkError(GeneratorError):
    """Raised when an output directory or file cannot be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")
