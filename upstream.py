# upstream.py
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types

from errors import GenerationError
from settings import Settings

logger = logging.getLogger(__name__)


class ChatGenerator(ABC):
    """Produces reply text for a list of role-tagged contents."""

    @abstractmethod
    def generate(self, contents: List[Dict[str, Any]]) -> str:
        pass


class GeminiGenerator(ChatGenerator):
    def __init__(self, settings: Settings, client: Optional[genai.Client] = None):
        self.model = settings.MODEL_NAME
        self.temperature = settings.TEMPERATURE
        self.system_instruction = settings.SYSTEM_INSTRUCTION
        self._client = client
        self._api_key = settings.API_KEY

    @property
    def client(self) -> genai.Client:
        # built lazily so the app can start (and serve static files) without a key
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def generate(self, contents: List[Dict[str, Any]]) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config=types.GenerateContentConfig(
                    system_instruction=self.system_instruction,
                    temperature=self.temperature,
                ),
            )
        except Exception as e:
            raise GenerationError(str(e)) from e

        text = response.text if hasattr(response, "text") else ""
        logger.debug("Upstream %s returned %s chars", self.model, len(text or ""))
        return text or ""
