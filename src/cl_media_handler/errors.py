"""Errors raised by cl_media_handler.

Resolution itself never raises for "no match"; these cover configuration
and content-store failures only.
"""


class MediaHandlerError(Exception):
    """Base class for cl_media_handler errors."""


class UnknownMediaFormatError(MediaHandlerError, KeyError):
    def __init__(self, name: str):
        self.name: str = name
        super().__init__(f"Unknown media format '{name}'")

    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateMediaFormatError(MediaHandlerError):
    def __init__(self, name: str):
        self.name: str = name
        super().__init__(f"Media format '{name}' is already registered")


class AssetStoreError(MediaHandlerError):
    def __init__(self, location: str, reason: str):
        self.location: str = location
        self.reason: str = reason
        super().__init__(f"Cannot read asset at '{location}': {reason}")
