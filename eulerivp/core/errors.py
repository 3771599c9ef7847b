"""Exceptions raised by eulerivp."""


class InvalidArgumentError(ValueError):
    """Invalid numerical parameter or malformed input to an integrator."""
