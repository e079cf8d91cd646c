from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class Settings:
    """Configuration container for the completion service, locale, and HTTP shell."""
    gemini_api_key: str
    gemini_model: str
    temperature: float
    max_output_tokens: int
    locale: str
    locales_dir: Path
    prompts_dir: Path
    public_dir: Path
    host: str
    port: int


def load_settings() -> Settings:
    """Purpose: Load configuration from environment variables and defaults.
    Inputs/Outputs: No inputs; returns a Settings instance.
    Side Effects / State: Reads environment variables and filesystem paths.
    Dependencies: Uses os.getenv and BASE_DIR for default paths.
    Failure Modes: Invalid GEMINI_TEMPERATURE/GEMINI_MAX_OUTPUT_TOKENS/PORT values
        raise ValueError.
    If Removed: The app cannot build its completion client or pick a locale.
    Testing Notes: Verify defaults and overrides via environment variables.
    """
    # Resolve static and data paths, then build Settings.
    public_dir = os.getenv("PUBLIC_DIR")
    if public_dir:
        public_path = Path(public_dir)
    else:
        public_path = (BASE_DIR / ".." / "public").resolve()

    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        temperature=float(os.getenv("GEMINI_TEMPERATURE", "0.2")),
        max_output_tokens=int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "600")),
        locale=os.getenv("ASSISTANT_LOCALE", "en").strip().lower() or "en",
        locales_dir=(BASE_DIR / "locales").resolve(),
        prompts_dir=(BASE_DIR / "prompts").resolve(),
        public_dir=public_path,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3006")),
    )
