from __future__ import annotations

import logging
from typing import List, Optional

import google.generativeai as genai

from .config import Settings

logger = logging.getLogger("inventory_assistant.gemini")


class GeminiClient:
    """Thin wrapper around the Gemini SDK with sampling defaults from Settings."""

    def __init__(self, settings: Settings) -> None:
        """Purpose: Configure the Gemini SDK and resolve the model name.
        Inputs/Outputs: Input is Settings; no return value.
        Side Effects / State: Configures the SDK API key.
        Dependencies: Uses google.generativeai and Settings from config.
        Failure Modes: A missing API key only logs a warning; generation calls then
            fail inside the SDK and the fallback turns that into its apology reply.
            A missing model name raises ValueError.
        If Removed: Unclassified questions cannot reach the model.
        Testing Notes: Tests inject a fake client instead of this class.
        """
        # Configure API key and resolve the model name.
        self._settings = settings
        if settings.gemini_api_key:
            genai.configure(api_key=settings.gemini_api_key)
        else:
            logger.warning("GEMINI_API_KEY is not set; AI fallback answers will fail.")
        self._model_name = _normalize_model_name(settings.gemini_model)
        if not self._model_name:
            raise ValueError("Gemini model name is required")

    def _build_model(self, system_instruction: Optional[str]) -> genai.GenerativeModel:
        # The system instruction embeds the request's inventory, so models are per call.
        if system_instruction:
            return genai.GenerativeModel(self._model_name, system_instruction=system_instruction)
        return genai.GenerativeModel(self._model_name)

    def generate_content(
        self,
        contents: List[str],
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        """Purpose: Run one completion for user contents under a system instruction.
        Inputs/Outputs: Input is a list of user text parts plus optional overrides;
            returns the stripped response text ("" when the model returned none).
        Side Effects / State: One outbound request.
        Dependencies: Uses genai.GenerativeModel.generate_content and _response_text.
        Failure Modes: Transport, auth and quota errors propagate. Candidates without
            text parts (MAX_TOKENS, SAFETY, RECITATION) yield "".
        If Removed: The generative fallback has no completion service.
        Testing Notes: Replace with a fake exposing the same method signature.
        """
        # Resolve sampling parameters, then issue the request.
        generation_config = {
            "temperature": self._settings.temperature if temperature is None else temperature,
            "max_output_tokens": (
                self._settings.max_output_tokens if max_output_tokens is None else max_output_tokens
            ),
        }
        response = self._build_model(system_instruction).generate_content(
            contents,
            generation_config=generation_config,
        )
        return _response_text(response).strip()


def _response_text(response: object) -> str:
    """Join the text parts of the first candidate without the raising ``.text`` accessor."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    return "".join(part.text for part in parts if getattr(part, "text", ""))


def _normalize_model_name(name: Optional[str]) -> str:
    """Strip whitespace and an optional "models/" prefix from a model name."""
    if not name:
        return ""
    cleaned = name.strip()
    if cleaned.startswith("models/"):
        return cleaned.split("/", 1)[1]
    return cleaned
