"""
Exceptions raised while resolving a formatted key.
Path: keyfmt/errors.py
"""

from typing import List


class KeyResolutionError(ValueError):
    """Base class for every failure raised by the key resolver."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class MissingTemplateError(KeyResolutionError):
    """No template is registered for section.key."""

    def __init__(self, path: str):
        super().__init__(path, f"Key '{path}' not found in key templates")


class MissingParametersError(KeyResolutionError):
    """Named parameters do not cover every placeholder of the template."""

    def __init__(self, path: str, names: List[str]):
        self.names = list(names)
        super().__init__(
            path,
            f"Key '{path}' is missing required parameters: " + ", ".join(self.names)
        )


class ExtraParametersError(KeyResolutionError):
    """Named parameters include names the template never references."""

    def __init__(self, path: str, names: List[str]):
        self.names = list(names)
        super().__init__(
            path,
            f"Key '{path}' was given extra parameters: " + ", ".join(self.names)
        )


class CountMismatchError(KeyResolutionError):
    """Positional value count differs from the placeholder occurrence count."""

    def __init__(self, path: str, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(path, f"Key '{path}' expects {expected} parameters, {actual} given")
