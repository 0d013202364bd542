"""Exceptions raised by bddgen"""


class BddGenError(Exception):
    """Base class for bddgen errors"""


class ConfigurationError(BddGenError):
    """Configuration file is malformed or names an unknown option"""


class DocumentReadError(BddGenError):
    """A feature document could not be read or decoded"""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
