"""LLM Service - Abstraction layer for AI model calls.

This module provides a unified interface for calling different LLM providers
(Gemini, OpenAI) with consistent error handling and response formatting.

Interface Contract:
- call(prompt) returns str (raw text)
- All methods raise LLMServiceError on failure
- Credentials are passed in at construction; nothing reads the environment
  at call time
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import google.generativeai as genai
from openai import OpenAI

import config

logger = logging.getLogger(__name__)


class LLMServiceError(Exception):
    """Raised when LLM call fails."""
    pass


class BaseLLMService(ABC):
    """Abstract base class for LLM services."""

    @abstractmethod
    def call(self, prompt: str) -> str:
        """Call the LLM with a prompt.

        Args:
            prompt: The prompt to send to the LLM

        Returns:
            str: The LLM response text

        Raises:
            LLMServiceError: If the call fails
        """
        pass


class GeminiService(BaseLLMService):
    """Google Gemini LLM service implementation."""

    def __init__(self, api_key: str | None, model: str = config.DEFAULT_MODEL):
        self.api_key = api_key
        self.model = model
        self._configured = False

    def _configure(self) -> None:
        """Configure Gemini API (lazy initialization)."""
        if self._configured:
            return
        if not self.api_key:
            raise LLMServiceError("Gemini API key not configured (set GEMINI_API_KEY)")
        genai.configure(api_key=self.api_key)
        self._configured = True

    def call(self, prompt: str) -> str:
        """Call Gemini model."""
        self._configure()
        try:
            model = genai.GenerativeModel(self.model)
            response = model.generate_content(prompt)
            return response.text
        except Exception as e:
            raise LLMServiceError(f"Gemini call failed: {e}") from e


class OpenAIService(BaseLLMService):
    """OpenAI LLM service implementation."""

    def __init__(self, api_key: str | None, model: str = config.OPENAI_MODEL):
        self.api_key = api_key
        self.model = model
        self._client: OpenAI | None = None

    def _get_client(self) -> OpenAI:
        """Get or create OpenAI client (lazy initialization)."""
        if self._client is None:
            if not self.api_key:
                raise LLMServiceError("OpenAI API key not configured (set OPENAI_API_KEY)")
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def call(self, prompt: str) -> str:
        """Call OpenAI model."""
        client = self._get_client()
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
            return response.choices[0].message.content or ""
        except Exception as e:
            raise LLMServiceError(f"OpenAI call failed: {e}") from e


def create_llm_service(provider: str = config.LLM_PROVIDER) -> BaseLLMService:
    """Build the service for ``provider`` from configuration."""
    if provider == "gemini":
        return GeminiService(api_key=config.GEMINI_API_KEY, model=config.DEFAULT_MODEL)
    if provider == "openai":
        return OpenAIService(api_key=config.OPENAI_API_KEY, model=config.OPENAI_MODEL)
    raise LLMServiceError(f"Unknown LLM provider: {provider!r}")


# Default service instance (can be swapped for testing)
class LLMService:
    """Facade for LLM services with provider switching."""

    _instance: BaseLLMService | None = None

    @classmethod
    def get_instance(cls) -> BaseLLMService:
        """Get the configured LLM service instance."""
        if cls._instance is None:
            cls._instance = create_llm_service()
            logger.info("[llm] provider=%s", config.LLM_PROVIDER)
        return cls._instance

    @classmethod
    def set_instance(cls, service: BaseLLMService) -> None:
        """Set a custom LLM service (useful for testing)."""
        cls._instance = service

    @classmethod
    def reset(cls) -> None:
        """Reset to default service."""
        cls._instance = None
