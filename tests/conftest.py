"""Shared test fixtures for model comparison."""

import pytest

from model_compare.models import CompareRequest, ModelInput
from payloads import ANTHROPIC_URL, OPENAI_URL


@pytest.fixture
def compare_request():
    return CompareRequest(
        model1=ModelInput(endpoint=OPENAI_URL, api_key="sk-one", model="gpt-4o-mini"),
        model2=ModelInput(endpoint=ANTHROPIC_URL, api_key="sk-two", model="claude-haiku"),
        prompt="Say hi",
        highlight=True,
    )
