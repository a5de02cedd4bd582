#!/usr/bin/env python3
# ABOUTME: Contains the prompts sent to the chat-completion API.
# ABOUTME: Builds the user prompt from the source text and languages.

from typing import Optional


class Prompts:
    """Class containing the prompts used for translation."""

    SYSTEM_PROMPT = "You are a translator that only gives the translated text."

    @staticmethod
    def translation_system_prompt() -> str:
        """Get the system prompt fixing the assistant's role."""
        return Prompts.SYSTEM_PROMPT

    @staticmethod
    def translation_user_prompt(
        text: str, to_language: str, from_language: Optional[str] = None
    ) -> str:
        """Get the user prompt for translation.

        Args:
            text: The text to translate
            to_language: The language to translate into
            from_language: The language of the text; left to the model when None

        Returns:
            The user prompt for translation
        """
        if from_language is not None:
            return f"Translate this from {from_language} to {to_language}: {text}"
        return f"Translate this to {to_language}: {text}"
