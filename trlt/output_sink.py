#!/usr/bin/env python3
# ABOUTME: Writes a translation to a file or stdout and copies it to the clipboard.
# ABOUTME: Clipboard problems are reported as warnings and never fail the command.

from typing import Optional

import pyperclip
from rich.console import Console
from rich.markup import escape

from trlt.file_handler import FileHandler

console = Console(stderr=True)


def copy_to_clipboard(text: str) -> bool:
    """Place text on the system clipboard.

    Returns:
        True if the text was copied, False if the clipboard is unavailable
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        console.print(
            f"[bold yellow]Warning:[/] Failed to copy to clipboard: {escape(str(e))}",
            soft_wrap=True,
        )
        return False

    console.print("[dim]Output copied to clipboard.[/]")
    return True


def emit(text: str, output_path: Optional[str] = None) -> None:
    """Deliver the translated text.

    Args:
        text: The translated text
        output_path: File to overwrite with the text; stdout when None

    Raises:
        FileAccessError: If the output file cannot be written
    """
    if output_path is not None:
        FileHandler.write_file(output_path, text)
    else:
        print(text)

    copy_to_clipboard(text)
