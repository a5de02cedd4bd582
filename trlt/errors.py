#!/usr/bin/env python3
# ABOUTME: Exception types raised by the trlt modules.
# ABOUTME: The CLI reports any TrltError to the user and exits non-zero.

from typing import Optional


class TrltError(Exception):
    """Base class for all errors reported by trlt."""


class ConfigError(TrltError):
    """The configuration could not be created or used."""


class ConfigNotFoundError(ConfigError):
    """The configuration file is missing or cannot be parsed."""

    def __init__(self, detail: str = ""):
        message = (
            "Failed to read config file. "
            "Please run `trlt init --help` to help you create a config file."
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.detail = detail


class ConfigDirectoryError(ConfigError):
    """The per-user configuration directory could not be determined."""


class FileAccessError(TrltError):
    """A file could not be read or written."""


class TranslationError(TrltError):
    """Base class for failures while talking to the translation API."""


class RemoteAPIError(TranslationError):
    """The API answered with an error payload instead of a completion."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to translate text: {message}")
        self.message = message
        self.status_code = status_code


class MalformedResponseError(TranslationError):
    """The API response did not have the expected shape."""


class EmptyTranslationError(TranslationError):
    """The API returned an empty translation."""

    def __init__(self):
        super().__init__("Failed to translate text: Empty response from API")


class NetworkError(TranslationError):
    """The request never reached the API or the connection dropped."""
