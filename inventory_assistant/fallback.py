from __future__ import annotations

import json
import logging
from typing import Optional, Sequence

from .locale_loader import LocalePack
from .models import InventoryItem

logger = logging.getLogger("inventory_assistant.fallback")

INVENTORY_PLACEHOLDER = "<<INVENTORY_JSON>>"


def build_system_prompt(template: str, inventory: Optional[Sequence[InventoryItem]]) -> str:
    """Purpose: Embed the full inventory snapshot into the output-grammar prompt.
    Inputs/Outputs: Inputs are the locale's prompt template and the snapshot;
        output is the system instruction text.
    Side Effects / State: None.
    Dependencies: json.dumps over InventoryItem.to_payload (caller field names).
    Failure Modes: Values json cannot encode are rendered with str().
    If Removed: The model answers without seeing the inventory or the formats.
    Testing Notes: Placeholder is replaced; minStock and extra fields are present.
    """
    # Serialize with the caller's field names so the prompt matches its schema.
    payload = [item.to_payload() for item in (inventory or [])]
    inventory_json = json.dumps(payload, ensure_ascii=False, indent=2, default=str)
    return template.replace(INVENTORY_PLACEHOLDER, inventory_json)


class GenerativeFallback:
    """Answers unclassified questions through the injected completion client."""

    def __init__(
        self,
        client: object,
        locale: LocalePack,
        temperature: float = 0.2,
        max_output_tokens: int = 600,
    ) -> None:
        """Purpose: Bind the completion client, locale pack and sampling parameters.
        Inputs/Outputs: Input is any object exposing generate_content(contents,
            system_instruction=..., temperature=..., max_output_tokens=...) -> str.
        Side Effects / State: Stores references only.
        Dependencies: GeminiClient in production, fakes in tests.
        Failure Modes: None at init.
        If Removed: Unclassified questions have no answer path.
        Testing Notes: Inject a fake client that records calls or raises.
        """
        self._client = client
        self._locale = locale
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens

    def answer(self, message: str, inventory: Optional[Sequence[InventoryItem]] = None) -> str:
        """Purpose: Ask the model for an answer in the closed output grammar.
        Inputs/Outputs: Inputs are the raw user message and the snapshot; output is
            the model text, or a fixed sentence on failure or empty content.
        Side Effects / State: One outbound completion call.
        Dependencies: build_system_prompt and the completion client.
        Failure Modes: Never raises; any client error becomes the apology sentence.
        If Removed: The orchestrator cannot handle unclassified questions.
        Testing Notes: Raising client -> apology; blank text -> "no response".
        """
        # One call, no retries; every failure path resolves to a string.
        system_prompt = build_system_prompt(self._locale.system_prompt_template, inventory)
        try:
            text = self._client.generate_content(
                [message or ""],
                system_instruction=system_prompt,
                temperature=self._temperature,
                max_output_tokens=self._max_output_tokens,
            )
        except Exception:
            logger.exception("Completion service call failed")
            return self._locale.fallback_error
        if not text or not str(text).strip():
            logger.info("Completion service returned no content")
            return self._locale.fallback_empty
        return str(text)
