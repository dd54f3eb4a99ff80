"""
Word validity lookups against a dictionary web service.

The default oracle asks dictionaryapi.dev for the word's entries. A
404 or an entry with no meanings means the word is not valid; network
errors, other HTTP errors and unreadable bodies raise DictionaryError
so the caller can tell the player to try again.
"""

import logging
from typing import Any, Protocol
from urllib.parse import quote

import requests
from pydantic import BaseModel, Field

from .models import DEFAULT_DICTIONARY_URL, WordLookup


logger = logging.getLogger(__name__)

NO_DEFINITION = "No definition available"


class DictionaryError(Exception):
    """The dictionary service could not answer."""


class WordOracle(Protocol):
    def lookup(self, word: str) -> WordLookup:
        ...


def shorten_definition(definition: str, max_length: int = 100) -> str:
    """Trim long definitions for display, marking the cut with an ellipsis."""
    if len(definition) > max_length:
        return definition[:max_length - 3] + "..."
    return definition


class DictionaryClient(BaseModel):
    """
    Oracle backed by a dictionaryapi.dev style HTTP endpoint.

    Attributes:
        base_url: URL prefix the lower-cased word is appended to
        timeout: Request timeout in seconds
        max_definition_length: Definitions longer than this are shortened
    """

    base_url: str = DEFAULT_DICTIONARY_URL
    timeout: float = Field(default=10.0, gt=0)
    max_definition_length: int = Field(default=100, ge=4)

    def lookup(self, word: str) -> WordLookup:
        """
        Look a word up.

        Args:
            word: The candidate word (any case)

        Returns:
            WordLookup with validity and a short definition when valid

        Raises:
            DictionaryError: If the service could not be reached or answered badly
        """
        url = self.base_url + quote(word.lower())

        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DictionaryError(f"Dictionary request failed for '{word}': {e}") from e

        if response.status_code == 404:
            return WordLookup(valid=False)

        try:
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            raise DictionaryError(f"Dictionary returned HTTP {response.status_code} for '{word}'") from e
        except ValueError as e:
            raise DictionaryError(f"Dictionary returned an unreadable body for '{word}'") from e

        return self._parse_entries(data)

    def _parse_entries(self, data: Any) -> WordLookup:
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return WordLookup(valid=False)

        meanings = data[0].get("meanings")
        if not isinstance(meanings, list) or not meanings:
            return WordLookup(valid=False)

        definition = NO_DEFINITION
        first = meanings[0] if isinstance(meanings[0], dict) else {}
        definitions = first.get("definitions")
        if isinstance(definitions, list) and definitions and isinstance(definitions[0], dict):
            text = definitions[0].get("definition")
            if isinstance(text, str) and text.strip():
                definition = shorten_definition(text.strip(), self.max_definition_length)

        return WordLookup(valid=True, short_definition=definition)
