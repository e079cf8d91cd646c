from pathlib import Path

import pytest

from inventory_assistant.config import Settings
from inventory_assistant.locale_loader import load_locale
from inventory_assistant.models import InventoryItem

PACKAGE_DIR = Path(__file__).resolve().parent.parent / "inventory_assistant"
LOCALES_DIR = PACKAGE_DIR / "locales"
PROMPTS_DIR = PACKAGE_DIR / "prompts"


class FakeCompletionClient:
    """Stands in for GeminiClient; records calls and replays a canned result."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, contents, system_instruction=None, temperature=None, max_output_tokens=None):
        self.calls.append(
            {
                "contents": contents,
                "system_instruction": system_instruction,
                "temperature": temperature,
                "max_output_tokens": max_output_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.text


def make_item(**fields):
    return InventoryItem(**fields)


@pytest.fixture
def en_locale():
    return load_locale(LOCALES_DIR, PROMPTS_DIR, "en")


@pytest.fixture
def nl_locale():
    return load_locale(LOCALES_DIR, PROMPTS_DIR, "nl")


@pytest.fixture
def fake_client():
    return FakeCompletionClient(text="The item was added successfully.")


@pytest.fixture
def sample_inventory():
    return [
        make_item(code="A1", name="Bolt", category="Hardware", stock="5,00", minStock=10, price="€ 1,50", location="R1"),
        make_item(code="B2", name="Nut", category="Hardware", stock=40, minStock=20, price=0.25, location="R1"),
        make_item(code="C3", name="Washer", category="Hardware", stock="2", minStock="3", price="0.10", location="R2"),
    ]


@pytest.fixture
def settings(tmp_path):
    return Settings(
        gemini_api_key="",
        gemini_model="gemini-2.5-flash",
        temperature=0.2,
        max_output_tokens=600,
        locale="en",
        locales_dir=LOCALES_DIR,
        prompts_dir=PROMPTS_DIR,
        public_dir=tmp_path / "public",
        host="127.0.0.1",
        port=3006,
    )


@pytest.fixture
def make_client():
    return FakeCompletionClient
