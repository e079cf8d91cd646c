from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

ContextT = TypeVar("ContextT")


@dataclass
class PipelineStep(Generic[ContextT]):
    """Named step; skipped when ``skip_if`` returns True for the current context."""
    name: str
    fn: Callable[[ContextT], None]
    skip_if: Optional[Callable[[ContextT], bool]] = None


class StepRunner(Generic[ContextT]):
    """Runs an ordered list of steps against one per-request context."""

    def __init__(self, steps: List[PipelineStep[ContextT]]) -> None:
        self._steps = list(steps)

    @property
    def step_names(self) -> List[str]:
        return [step.name for step in self._steps]

    def run(self, context: ContextT) -> List[str]:
        """Purpose: Execute steps in order, honoring skip_if guards.
        Inputs/Outputs: Input is a mutable context; output is the names of steps run.
        Side Effects / State: Step functions mutate the context.
        Dependencies: PipelineStep.fn and PipelineStep.skip_if.
        Failure Modes: Exceptions in step functions propagate to the caller.
        If Removed: The orchestrator cannot sequence classify/answer/repair.
        Testing Notes: Verify skip_if and order with simple recording steps.
        """
        # Evaluate each guard against the context as left by earlier steps.
        executed: List[str] = []
        for step in self._steps:
            if step.skip_if and step.skip_if(context):
                continue
            step.fn(context)
            executed.append(step.name)
        return executed
