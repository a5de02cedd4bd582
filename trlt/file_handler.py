#!/usr/bin/env python3
# ABOUTME: File input/output utilities for trlt.
# ABOUTME: Resolves the translate input from stdin, a file, or a literal string.

import os
import sys
from typing import Optional, TextIO

from trlt.errors import FileAccessError

STDIN_MARKER = "-"


class FileHandler:
    """File input/output utilities for trlt."""

    @staticmethod
    def read_file(file_path: str) -> str:
        """Read content from a file.

        Args:
            file_path: The path to the file to read

        Returns:
            The content of the file as a string

        Raises:
            FileAccessError: If the file cannot be read or is not valid UTF-8
        """
        try:
            with open(file_path, "r", encoding="utf-8", newline="") as file:
                return file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Failed to read input file: {e}") from e

    @staticmethod
    def write_file(file_path: str, content: str) -> None:
        """Write content to a file, replacing it if it exists.

        Args:
            file_path: The path to the file to write
            content: The content to write to the file

        Raises:
            FileAccessError: If the file cannot be written
        """
        try:
            with open(file_path, "w", encoding="utf-8", newline="") as file:
                file.write(content)
        except OSError as e:
            raise FileAccessError(f"Failed to write file: {e}") from e

    @staticmethod
    def read_stdin(stream: Optional[TextIO] = None) -> str:
        """Read standard input until end of stream."""
        stream = stream if stream is not None else sys.stdin
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Failed to read from stdin: {e}") from e

    @classmethod
    def resolve_input(cls, raw: str, stdin: Optional[TextIO] = None) -> str:
        """Turn the translate input argument into the text to translate.

        "-" reads standard input, the path of an existing file reads that file,
        and anything else is taken as the text itself. Empty text is allowed.

        Args:
            raw: The input argument as given on the command line
            stdin: Stream to use instead of sys.stdin

        Returns:
            The text to translate
        """
        if raw == STDIN_MARKER:
            return cls.read_stdin(stdin)
        if os.path.isfile(raw):
            return cls.read_file(raw)
        return raw
