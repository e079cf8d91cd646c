"""Request orchestration for the inventory assistant.

Flow per request (no state survives the call):
    classify:             message -> Intent via the locale's ordered keyword rules.
    deterministic_answer: recognized intents are answered from the snapshot; the
                          completion service is never consulted for them.
    generative_answer:    unclassified messages go to the generative fallback.
    normalize_reply:      generative text gets the one-item-per-line repair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .fallback import GenerativeFallback
from .intent_classifier import Intent, IntentClassifier
from .locale_loader import LocalePack
from .models import AssistantRequest, AssistantResponse, InventoryItem
from .pipeline import PipelineStep, StepRunner
from .query_engine import DETERMINISTIC_REPLIES
from .response_normalizer import ensure_low_stock_newlines

logger = logging.getLogger("inventory_assistant.assistant")

ROUTE_DETERMINISTIC = "deterministic"
ROUTE_GENERATIVE = "generative"


@dataclass
class AssistantContext:
    """Per-request state passed between pipeline steps."""
    message: str
    inventory: Sequence[InventoryItem]
    intent: Intent = Intent.UNCLASSIFIED
    route: Optional[str] = None
    reply: Optional[str] = None
    steps: List[str] = field(default_factory=list)

    @property
    def answered(self) -> bool:
        return self.reply is not None


class InventoryAssistant:
    def __init__(self, locale: LocalePack, fallback: GenerativeFallback) -> None:
        """Purpose: Wire the classifier, deterministic engine and fallback together.
        Inputs/Outputs: Inputs are the locale pack and a GenerativeFallback.
        Side Effects / State: Compiles the locale's intent rules once.
        Dependencies: IntentClassifier, DETERMINISTIC_REPLIES, StepRunner.
        Failure Modes: Bad intent names or patterns in the pack raise at init.
        If Removed: The HTTP route has nothing to delegate to.
        Testing Notes: Build with a fake completion client and assert routing.
        """
        # Compile rules and register the ordered request steps.
        self._locale = locale
        self._fallback = fallback
        self._classifier = IntentClassifier.from_patterns(locale.intent_patterns)
        self._runner: StepRunner[AssistantContext] = StepRunner(
            [
                PipelineStep("classify", self._step_classify),
                PipelineStep(
                    "deterministic_answer",
                    self._step_deterministic_answer,
                    skip_if=lambda ctx: ctx.intent is Intent.UNCLASSIFIED,
                ),
                PipelineStep(
                    "generative_answer",
                    self._step_generative_answer,
                    skip_if=lambda ctx: ctx.answered,
                ),
                PipelineStep(
                    "normalize_reply",
                    self._step_normalize_reply,
                    skip_if=lambda ctx: ctx.route != ROUTE_GENERATIVE,
                ),
            ]
        )

    @property
    def classifier(self) -> IntentClassifier:
        return self._classifier

    def run(self, message: Optional[str], inventory: Optional[Sequence[InventoryItem]] = None) -> AssistantContext:
        """Run the full pipeline and return the populated context."""
        context = AssistantContext(message=message or "", inventory=list(inventory or []))
        context.steps = self._runner.run(context)
        logger.info(
            "intent=%s route=%s items=%d",
            context.intent.value,
            context.route,
            len(context.inventory),
        )
        return context

    def reply(self, message: Optional[str], inventory: Optional[Sequence[InventoryItem]] = None) -> str:
        context = self.run(message, inventory)
        return context.reply or ""

    def handle(self, request: AssistantRequest) -> AssistantResponse:
        return AssistantResponse(reply=self.reply(request.message, request.inventory))

    def _step_classify(self, context: AssistantContext) -> None:
        context.intent = self._classifier.classify(context.message)

    def _step_deterministic_answer(self, context: AssistantContext) -> None:
        reply_fn = DETERMINISTIC_REPLIES[context.intent]
        context.reply = reply_fn(self._locale, context.inventory)
        context.route = ROUTE_DETERMINISTIC

    def _step_generative_answer(self, context: AssistantContext) -> None:
        context.reply = self._fallback.answer(context.message, context.inventory)
        context.route = ROUTE_GENERATIVE

    def _step_normalize_reply(self, context: AssistantContext) -> None:
        context.reply = ensure_low_stock_newlines(context.reply, self._locale.low_stock_marker)
