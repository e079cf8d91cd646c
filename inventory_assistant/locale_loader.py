"""Locale packs: keyword rules, reply templates and fallback prompt per language.

A pack is a JSON file under ``locales/`` plus the system prompt template it names
under ``prompts/``. Keeping vocabulary in data lets a deployment switch language
without touching the dispatch code.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

REQUIRED_REPLY_KEYS = (
    "low_stock_none",
    "low_stock_line",
    "total_value",
    "total_stock",
    "distinct_items",
)


@dataclass(frozen=True)
class LocalePack:
    """Language-specific vocabulary and fixed sentences for one deployment."""
    language: str
    currency_symbol: str
    intent_patterns: Tuple[Tuple[str, str], ...]
    replies: Dict[str, str]
    low_stock_marker: str
    fallback_error: str
    fallback_empty: str
    internal_error: str
    system_prompt_template: str = field(repr=False)


def read_text_file(path: Path) -> str:
    """Purpose: Load a text file as UTF-8 and strip BOM if present.
    Inputs/Outputs: Input is a Path; output is the decoded string.
    Side Effects / State: None beyond reading the filesystem.
    Dependencies: Uses Path.read_text/read_bytes; used for prompts and locale JSON.
    Failure Modes: UnicodeDecodeError triggers a fallback decode with errors ignored,
        which can drop invalid bytes. Missing files raise FileNotFoundError.
    If Removed: Locale packs and fallback prompts cannot be loaded.
    Testing Notes: Validate BOM-stripping and fallback decoding on non-UTF8 files.
    """
    # Read as UTF-8 and fall back to a tolerant decode if needed.
    try:
        return path.read_text(encoding="utf-8").lstrip("\ufeff")
    except UnicodeDecodeError:
        raw = path.read_bytes()
        text = raw.decode("utf-8", errors="ignore")
        return text.lstrip("\ufeff")


def load_locale(locales_dir: Path, prompts_dir: Path, name: str) -> LocalePack:
    """Purpose: Build a LocalePack from ``<locales_dir>/<name>.json`` and its prompt.
    Inputs/Outputs: Inputs are the two directories and a locale name; returns LocalePack.
    Side Effects / State: Reads two files.
    Dependencies: read_text_file, json.
    Failure Modes: Unknown locale or prompt raises FileNotFoundError; missing keys
        raise KeyError; malformed JSON raises json.JSONDecodeError.
    If Removed: Classifier, calculators and fallback have no vocabulary.
    Testing Notes: Load both shipped packs; verify rule order is preserved.
    """
    # Parse the pack, validate reply templates, then attach the prompt template.
    data = json.loads(read_text_file(locales_dir / f"{name}.json"))
    replies = {str(key): str(value) for key, value in data["replies"].items()}
    missing = [key for key in REQUIRED_REPLY_KEYS if key not in replies]
    if missing:
        raise KeyError(f"locale {name!r} is missing replies: {', '.join(missing)}")

    patterns: List[Tuple[str, str]] = []
    for rule in data.get("intents", []):
        patterns.append((str(rule["intent"]), str(rule["pattern"])))

    return LocalePack(
        language=str(data.get("language", name)),
        currency_symbol=str(data.get("currency_symbol", "€")),
        intent_patterns=tuple(patterns),
        replies=replies,
        low_stock_marker=str(data["low_stock_marker"]),
        fallback_error=str(data["fallback_error"]),
        fallback_empty=str(data["fallback_empty"]),
        internal_error=str(data.get("internal_error", "Internal server error")),
        system_prompt_template=read_text_file(prompts_dir / str(data["prompt_file"])),
    )
