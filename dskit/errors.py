"""Exceptions raised by the containers in this package."""


class UnderflowError(IndexError):
    """Raised when an item is taken from an empty container."""

    def __init__(self, message="Underflow Error!"):
        super().__init__(message)


class CapacityError(Exception):
    """Raised when an item is added to a container that is already full."""

    def __init__(self, message="Overflow Error!"):
        super().__init__(message)


class InvalidPositionError(IndexError):
    """Raised when a position lies outside the valid range of a container."""

    def __init__(self, message="Invalid Position Error!"):
        super().__init__(message)