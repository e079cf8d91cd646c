from __future__ import annotations

from typing import Optional


def ensure_low_stock_newlines(text: Optional[str], marker: str) -> Optional[str]:
    """Purpose: Put each clause of a generated low-stock listing on its own line.
    Inputs/Outputs: Inputs are model text and the locale's low-stock marker phrase;
        output is the repaired text, or the input unchanged when the marker is absent.
    Side Effects / State: None; pure function.
    Dependencies: Used by the orchestrator on generative answers only.
    Failure Modes: Heuristic, not a parser: periods inside names or prices
        ("3.5", "Ltd.") are treated as clause ends and split the line.
    If Removed: Model listings that run items together on one line reach the caller.
    Testing Notes: Text without the marker is returned as-is; two run-on items
        become two period-terminated lines.
    """
    # Split on periods, drop blanks, and rejoin one clause per line.
    if not text or marker not in text:
        return text
    parts = [part.strip() for part in text.split(".")]
    parts = [part for part in parts if part]
    return ".\n".join(parts) + ("." if parts else "")
