#!/usr/bin/env python3
# ABOUTME: Command-line interface for trlt.
# ABOUTME: Parses the init and translate subcommands and runs them.

import argparse
import os
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.markup import escape

from trlt.config import DEFAULT_MODEL, ConfigStore
from trlt.errors import TrltError
from trlt.file_handler import FileHandler
from trlt.output_sink import emit
from trlt.translator import DEFAULT_TARGET_LANGUAGE, Translator

__version__ = "0.1.0"

console = Console()
err_console = Console(stderr=True)


class TrltCLI:
    """Command-line interface for trlt."""

    @classmethod
    def build_parser(cls) -> argparse.ArgumentParser:
        """Build the argument parser for both subcommands.

        The --api-key default is taken from OPENAI_API_KEY, after loading a
        .env file from the working directory if there is one.
        """
        load_dotenv(find_dotenv(usecwd=True))

        parser = argparse.ArgumentParser(
            prog="trlt",
            description=(
                "Translate text, a file or stdin using the OpenAI API. "
                "The result is written to a file or stdout and copied to the clipboard."
            ),
        )
        parser.add_argument(
            "-V", "--version", action="version", version=f"%(prog)s {__version__}"
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        init_parser = subparsers.add_parser(
            "init",
            help="Create the configuration file ($XDG_CONFIG_HOME/trlt.toml or ~/.config/trlt.toml)",
        )
        init_parser.add_argument(
            "-a",
            "--api-key",
            default=os.getenv("OPENAI_API_KEY"),
            help="The OpenAI API key (default: $OPENAI_API_KEY, asked for if unset)",
        )
        init_parser.add_argument(
            "-m",
            "--model",
            default=DEFAULT_MODEL,
            help=f"The language model to use (default: {DEFAULT_MODEL})",
        )

        translate_parser = subparsers.add_parser(
            "translate", help="Translate text, a file or stdin"
        )
        translate_parser.add_argument(
            "input",
            help='Text to translate, a path to a file, or "-" to read stdin',
        )
        translate_parser.add_argument(
            "output", nargs="?", help="Output file path (default: stdout)"
        )
        translate_parser.add_argument(
            "-f",
            "--from",
            dest="from_language",
            help="The language to translate from (default: auto-detected)",
        )
        translate_parser.add_argument(
            "-t",
            "--to",
            dest="to_language",
            default=DEFAULT_TARGET_LANGUAGE,
            help=f"The language to translate to (default: {DEFAULT_TARGET_LANGUAGE})",
        )

        return parser

    @staticmethod
    def init(store: ConfigStore, api_key: Optional[str], model: str) -> None:
        """Write the config file and report where it went."""
        store.write(api_key, model)
        console.print(
            f"[bold green]Config file created successfully in[/] {escape(str(store.path))}",
            soft_wrap=True,
        )

    @staticmethod
    def translate(
        store: ConfigStore,
        raw_input: str,
        output: Optional[str],
        from_language: Optional[str],
        to_language: str,
    ) -> None:
        """Resolve the input, translate it, and emit the result."""
        text = FileHandler.resolve_input(raw_input)
        translator = Translator(store.read())
        translated_text = translator.translate(
            text, to_language=to_language, from_language=from_language
        )
        emit(translated_text, output)

    @classmethod
    def run(
        cls, argv: Optional[List[str]] = None, store: Optional[ConfigStore] = None
    ) -> int:
        """Run the trlt command-line interface.

        Args:
            argv: Arguments without the program name; sys.argv[1:] when None
            store: Config store to use instead of the per-user one

        Returns:
            The process exit code
        """
        args = cls.build_parser().parse_args(argv)
        store = store if store is not None else ConfigStore()

        try:
            if args.command == "init":
                cls.init(store, args.api_key, args.model)
            else:
                cls.translate(
                    store,
                    args.input,
                    args.output,
                    args.from_language,
                    args.to_language,
                )
        except TrltError as e:
            err_console.print(f"[bold red]Error:[/] {escape(str(e))}", soft_wrap=True)
            return 1
        except KeyboardInterrupt:
            err_console.print("\n[bold red]Interrupted.[/]")
            return 130

        return 0


def main() -> None:
    """Main entry point for the trlt CLI."""
    sys.exit(TrltCLI.run())
