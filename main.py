#!/usr/bin/env python3
# ABOUTME: Command-line interface for translating text with the OpenAI API.
# ABOUTME: Translates literal text, files or stdin and prints or saves the result.

from trlt.cli import main


if __name__ == "__main__":
    main()
