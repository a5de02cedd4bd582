#!/usr/bin/env python3
# ABOUTME: Core translation logic using the OpenAI chat-completion API.
# ABOUTME: Sends one request per translation and extracts the translated text.

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import openai

from trlt.config import Config, ConfigStore
from trlt.errors import (
    EmptyTranslationError,
    MalformedResponseError,
    NetworkError,
    RemoteAPIError,
)
from trlt.prompts import Prompts

API_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TARGET_LANGUAGE = "en"


@dataclass
class TranslationRequest:
    """A single piece of text to translate."""

    source_text: str
    to_language: str = DEFAULT_TARGET_LANGUAGE
    from_language: Optional[str] = None

    @property
    def prompt(self) -> str:
        return Prompts.translation_user_prompt(
            self.source_text, self.to_language, self.from_language
        )

    def messages(self) -> List[Dict[str, str]]:
        """Chat messages for the completion request."""
        return [
            {"role": "system", "content": Prompts.translation_system_prompt()},
            {"role": "user", "content": self.prompt},
        ]


def create_client(api_key: str) -> openai.OpenAI:
    """Set up and return an OpenAI client for the given key.

    Retries are disabled so each translation is exactly one request.
    """
    return openai.OpenAI(api_key=api_key, base_url=API_BASE_URL, max_retries=0)


def parse_response(payload: Any) -> str:
    """Extract the translated text from a decoded completion response.

    Args:
        payload: The JSON body returned by the API

    Returns:
        The translated text

    Raises:
        RemoteAPIError: If the body carries an error message
        MalformedResponseError: If choices[0].message.content is missing
        EmptyTranslationError: If the translated text is empty
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("Unexpected response from API: not a JSON object")

    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        raise RemoteAPIError(error["message"])

    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError(
            "Unexpected response from API: missing choices[0].message.content"
        ) from e

    if not isinstance(content, str):
        raise MalformedResponseError(
            "Unexpected response from API: message content is not a string"
        )
    if not content:
        raise EmptyTranslationError()

    return content


def _error_message(error: openai.APIStatusError) -> str:
    """Get the provider's error message out of an HTTP error response."""
    body = error.body
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict):
            body = nested
        if isinstance(body.get("message"), str):
            return body["message"]
    return error.message


class Translator:
    """Translates text with the model named in the trlt config."""

    def __init__(self, config: Config, client: Optional[openai.OpenAI] = None):
        """Initialize the translator.

        Args:
            config: Provides the API key and the model name
            client: OpenAI client instance; one is created from the config when None
        """
        self.config = config
        self.client = client if client is not None else create_client(config.api_key)

    def translate(
        self,
        text: str,
        to_language: str = DEFAULT_TARGET_LANGUAGE,
        from_language: Optional[str] = None,
    ) -> str:
        """Translate text into the target language.

        Args:
            text: The text to translate; empty text is sent as is
            to_language: The language to translate into
            from_language: The language of the text, or None to let the model detect it

        Returns:
            The translated text

        Raises:
            RemoteAPIError: If the API reports an error
            MalformedResponseError: If the response cannot be understood
            EmptyTranslationError: If the API returns no text
            NetworkError: If the API cannot be reached
        """
        request = TranslationRequest(
            source_text=text, to_language=to_language, from_language=from_language
        )

        try:
            raw_response = self.client.chat.completions.with_raw_response.create(
                model=self.config.model,
                messages=request.messages(),
            )
        except openai.APIStatusError as e:
            raise RemoteAPIError(_error_message(e), status_code=e.status_code) from e
        except openai.APIConnectionError as e:
            raise NetworkError(f"Failed to reach the OpenAI API: {e}") from e

        try:
            payload = json.loads(raw_response.text)
        except ValueError as e:
            raise MalformedResponseError(
                "Unexpected response from API: body is not valid JSON"
            ) from e

        return parse_response(payload)


def translate(
    text: str,
    from_language: Optional[str],
    to_language: str,
    store: Optional[ConfigStore] = None,
    client: Optional[openai.OpenAI] = None,
) -> str:
    """Load the config and translate text in one call.

    Raises:
        ConfigNotFoundError: If no usable config file exists
        TranslationError: If the translation fails
    """
    store = store if store is not None else ConfigStore()
    config = store.read()
    return Translator(config, client=client).translate(
        text, to_language=to_language, from_language=from_language
    )
