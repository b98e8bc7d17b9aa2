"""
Exceptions
==========

Error kinds raised by the material system.
"""


class ConfigurationError(ValueError):
    """
    Input is inconsistent with the chosen model.

    Raised for missing or invalid parameters, unsupported dimensions and
    unsupported kinematics. Not recoverable: the run is aborted once at the
    top level.
    """


class MissingPropertyError(KeyError):
    """A property was read before any model wrote it."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(kind, name)

    def __str__(self) -> str:
        return f"{self.kind} property '{self.name}' has not been written"
