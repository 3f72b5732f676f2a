#!/usr/bin/env python3
"""
Translation client for the Yandex Cloud Translate v2 API
--------------------------------------------------------
Sends a single text in one blocking POST request and returns the first
translation from the response.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests

from .config import DEFAULT_ENDPOINT, DEFAULT_TARGET_LANGUAGE, DEFAULT_TIMEOUT, PipelineConfig
from .errors import ConfigError, MalformedRequestError, NetworkError, ParseError

logger = logging.getLogger(__name__)


def build_request_body(text: str, target_language: str = DEFAULT_TARGET_LANGUAGE) -> bytes:
    """
    Serialize a translation request.

    Args:
        text: Text to translate
        target_language: Target language code

    Returns:
        UTF-8 encoded JSON body

    Raises:
        MalformedRequestError: If the text cannot be encoded
    """
    payload = {
        'targetLanguageCode': target_language,
        'texts': [text],
    }
    try:
        return json.dumps(payload, ensure_ascii=False).encode('utf-8')
    except (TypeError, ValueError) as e:
        # UnicodeEncodeError (lone surrogates) is a ValueError
        raise MalformedRequestError(f"Could not serialize translation request: {e}") from e


def extract_translation(payload: Any) -> str:
    """
    Pull translations[0].text out of a decoded response.

    Raises:
        ParseError: If the response does not have the expected shape
    """
    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")

    translations = payload.get('translations')
    if translations is None:
        raise ParseError("Response has no 'translations' field")
    if not isinstance(translations, list):
        raise ParseError("'translations' is not a list")
    if not translations:
        raise ParseError("'translations' is empty")

    first = translations[0]
    if not isinstance(first, dict):
        raise ParseError("translations[0] is not an object")
    text = first.get('text')
    if not isinstance(text, str):
        raise ParseError("translations[0] has no string 'text' field")
    return text


def _error_detail(response: requests.Response) -> str:
    """Best-effort message from an API error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()[:200]
    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return ''


class YandexTranslator:
    """
    Client for the translate/v2/translate endpoint.

    The translate method is a plain text -> text callable, so it can sit at
    the center of a stage chain.
    """

    def __init__(self,
                 api_key: str,
                 endpoint: str = DEFAULT_ENDPOINT,
                 target_language: str = DEFAULT_TARGET_LANGUAGE,
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        if not api_key:
            raise ConfigError("API key is not configured")
        self.api_key = api_key
        self.endpoint = endpoint
        self.target_language = target_language
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_config(cls, config: PipelineConfig,
                    session: Optional[requests.Session] = None) -> 'YandexTranslator':
        """Create a translator from a PipelineConfig."""
        return cls(
            api_key=config.api_key,
            endpoint=config.endpoint,
            target_language=config.target_language,
            timeout=config.timeout,
            session=session,
        )

    @property
    def headers(self) -> Dict[str, str]:
        return {
            'Authorization': f'Api-Key {self.api_key}',
            'Content-Type': 'application/json',
        }

    def translate(self, text: str) -> str:
        """
        Translate text to the configured target language.

        Args:
            text: Text to translate

        Returns:
            First translation returned by the API

        Raises:
            MalformedRequestError: If the request body cannot be built
            NetworkError: On transport failure or non-success status
            ParseError: If the response is not the expected JSON
        """
        body = build_request_body(text, self.target_language)
        response = self._post(body)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Translation response is not valid JSON: {e}")
            raise ParseError(f"Translation response is not valid JSON: {e}") from e

        try:
            translated = extract_translation(payload)
        except ParseError as e:
            logger.error(f"Unexpected translation response: {e}")
            raise

        logger.info(f"Received translation ({len(translated)} characters)")
        return translated

    def _post(self, body: bytes) -> requests.Response:
        """Send the request and check the HTTP status."""
        post = self.session.post if self.session is not None else requests.post
        logger.debug(f"POST {self.endpoint} ({len(body)} bytes, timeout={self.timeout})")

        try:
            response = post(self.endpoint, headers=self.headers, data=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Translation request failed: {e}")
            raise NetworkError(f"Translation request failed: {e}") from e

        if not response.ok:
            detail = _error_detail(response)
            message = f"Translation API returned HTTP {response.status_code}"
            if detail:
                message = f"{message}: {detail}"
            logger.error(message)
            raise NetworkError(message, status_code=response.status_code)

        return response


# Convenience function for direct usage
def translate_text(text: str, config: Optional[PipelineConfig] = None) -> str:
    """
    Translate text with a one-off client.

    Args:
        text: Text to translate
        config: Configuration with the API key (optional, defaults used otherwise)

    Returns:
        Translated text
    """
    translator = YandexTranslator.from_config(config or PipelineConfig())
    return translator.translate(text)
