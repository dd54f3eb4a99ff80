"""Test suite for the dictionary oracle, with HTTP calls mocked."""

from unittest.mock import Mock, patch

import pytest
import requests

from src.game import DictionaryClient, DictionaryError
from src.game.dictionary import NO_DEFINITION, shorten_definition


def create_mock_response(status_code: int = 200, payload=None) -> Mock:
    """Mock a requests.Response as returned by dictionaryapi.dev."""
    response = Mock(status_code=status_code)
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


def entry(definition: str = "A small domesticated carnivorous mammal."):
    return [{
        "word": "cat",
        "meanings": [{
            "partOfSpeech": "noun",
            "definitions": [{"definition": definition}],
        }],
    }]


class TestLookup:
    """Test cases for DictionaryClient.lookup()."""

    @patch("src.game.dictionary.requests.get")
    def test_valid_word(self, mock_get):
        mock_get.return_value = create_mock_response(payload=entry())
        result = DictionaryClient().lookup("CAT")

        assert result.valid is True
        assert result.short_definition == "A small domesticated carnivorous mammal."

    @patch("src.game.dictionary.requests.get")
    def test_url_and_timeout(self, mock_get):
        mock_get.return_value = create_mock_response(payload=entry())
        DictionaryClient(base_url="https://dict.example/", timeout=3.0).lookup("CAT")

        mock_get.assert_called_once_with("https://dict.example/cat", timeout=3.0)

    @patch("src.game.dictionary.requests.get")
    def test_long_definition_is_shortened(self, mock_get):
        mock_get.return_value = create_mock_response(payload=entry("x" * 150))
        result = DictionaryClient().lookup("CAT")

        assert len(result.short_definition) == 100
        assert result.short_definition.endswith("...")

    @patch("src.game.dictionary.requests.get")
    def test_not_found_is_invalid(self, mock_get):
        mock_get.return_value = create_mock_response(status_code=404, payload={"title": "No Definitions Found"})
        result = DictionaryClient().lookup("XQZ")

        assert result.valid is False
        assert result.short_definition is None

    @patch("src.game.dictionary.requests.get")
    @pytest.mark.parametrize("payload", [
        [],
        {},
        [{"word": "cat"}],
        [{"meanings": []}],
        "cat",
        [{"meanings": {"noun": []}}],
        [{"meanings": "noun"}],
    ])
    def test_entries_without_meanings_are_invalid(self, mock_get, payload):
        mock_get.return_value = create_mock_response(payload=payload)
        assert DictionaryClient().lookup("CAT").valid is False

    @patch("src.game.dictionary.requests.get")
    def test_meaning_without_definitions(self, mock_get):
        mock_get.return_value = create_mock_response(payload=[{"meanings": [{"partOfSpeech": "noun"}]}])
        result = DictionaryClient().lookup("CAT")

        assert result.valid is True
        assert result.short_definition == NO_DEFINITION

    @patch("src.game.dictionary.requests.get")
    @pytest.mark.parametrize("definitions", [
        {"0": {"definition": "A pet."}},
        [{"definition": 12345}],
        [{"definition": ["A pet."]}],
        [{"definition": "   "}],
        ["A pet."],
    ])
    def test_malformed_definitions_fall_back(self, mock_get, definitions):
        """Odd definition shapes still give a valid word with the fallback text."""
        mock_get.return_value = create_mock_response(payload=[{"meanings": [{"definitions": definitions}]}])
        result = DictionaryClient().lookup("CAT")

        assert result.valid is True
        assert result.short_definition == NO_DEFINITION

    @patch("src.game.dictionary.requests.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(DictionaryError):
            DictionaryClient().lookup("CAT")

    @patch("src.game.dictionary.requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.Timeout("slow")
        with pytest.raises(DictionaryError):
            DictionaryClient().lookup("CAT")

    @patch("src.game.dictionary.requests.get")
    def test_server_error(self, mock_get):
        mock_get.return_value = create_mock_response(status_code=500)
        with pytest.raises(DictionaryError):
            DictionaryClient().lookup("CAT")

    @patch("src.game.dictionary.requests.get")
    def test_unreadable_body(self, mock_get):
        response = create_mock_response()
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response
        with pytest.raises(DictionaryError):
            DictionaryClient().lookup("CAT")


class TestShortenDefinition:
    """Test cases for shorten_definition()."""

    def test_short_text_unchanged(self):
        assert shorten_definition("A pet.") == "A pet."

    def test_exact_limit_unchanged(self):
        text = "y" * 100
        assert shorten_definition(text) == text

    def test_over_limit(self):
        assert shorten_definition("abcdefghij", max_length=8) == "abcde..."
