"""
Exceptions raised inside pymmff.

Loading and lookup entry points convert these into
:class:`pymmff.core.result.Result` values; they only escape from
configuration helpers and explicit ``*_or_raise`` calls.
"""


class MmffError(Exception):
    """Base class for all pymmff errors."""


class ParameterSourceError(MmffError):
    """A parameter source could not be opened or read."""

    def __init__(self, source: str, reason: str = "cannot open source") -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{reason}: {source}")


class UnknownFormatError(MmffError):
    """No parameter format is registered under the requested name."""


class UnknownForceFieldError(MmffError):
    """No force field is registered under the requested name."""


class ConfigurationError(MmffError):
    """A configuration file is missing, unreadable or invalid."""
