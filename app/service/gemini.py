import asyncio
import logging
from typing import Optional

from google import genai
from google.genai import types

from app.config import GEMINI_API_KEY, GEMINI_MODEL

logger = logging.getLogger(__name__)


class GeminiService:
    def __init__(self, api_key: Optional[str] = None, model: str = GEMINI_MODEL):
        """
        Initialize the GeminiService.

        The google-genai client is built on first use with the given key, or
        GEMINI_API_KEY from the environment when none is passed.
        """
        self.model = model
        self.api_key = api_key or GEMINI_API_KEY
        self._client = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    @client.setter
    def client(self, value):
        self._client = value

    @staticmethod
    def file_to_generative_part(data: bytes, mime_type: str) -> types.Part:
        """Wrap raw file bytes as an inline part; the SDK base64-encodes it on the wire"""
        return types.Part.from_bytes(data=data, mime_type=mime_type)

    async def generate(self, prompt: str, data: bytes, mime_type: str) -> str:
        """Send the prompt together with one file and return the model's text"""
        logger.info(f"Calling {self.model} with a {mime_type} file of {len(data)} bytes")
        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.model,
            contents=[prompt, self.file_to_generative_part(data, mime_type)],
        )
        # Blocked or empty candidates carry no text
        if response.text is None:
            raise ValueError(f"{self.model} returned no text")
        return response.text


_service: Optional[GeminiService] = None


def get_generation_service() -> GeminiService:
    """Dependency returning the shared GeminiService, created on first use"""
    global _service
    if _service is None:
        _service = GeminiService()
    return _service
