"""Errors raised by the singleton registry."""


class SingletonError(Exception):
    """Base class for singleton lifecycle errors."""


class ConstructionFailure(SingletonError):
    """The factory of a singleton raised while building the shared instance."""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to construct singleton '{name}': {cause}")


class IllegalDuplication(SingletonError):
    """An attempt was made to copy or unpickle a second instance."""

    def __init__(self, name: str, operation: str):
        self.name = name
        self.operation = operation
        super().__init__(f"Singleton '{name}' cannot be duplicated via {operation}")
