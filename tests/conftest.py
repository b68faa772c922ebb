"""Shared fixtures for workflow generation tests."""

import json
import os
from typing import Any, Dict
from unittest.mock import AsyncMock, Mock

import pytest

os.environ.setdefault("OPENAI_API_KEY", "test-key")

SAMPLE_DIAGRAM = """Sequence: Main Sequence
  Assign: Get User Credentials
  If: Credentials Found
    then:
      Log Message: Login Successful
    else:
      Throw: Credentials Invalid Exception
  For Each: Data Row in DataTable
    body:
      Type Into: Enter Row Data"""


def build_payload(title: str = "Invoice Processing", diagram: Any = SAMPLE_DIAGRAM) -> Dict[str, Any]:
    return {
        "title": title,
        "summary": "Reads invoices and enters them into the ERP.",
        "diagram": diagram,
        "components": [
            {"name": "Assign", "package": "UiPath.System.Activities", "description": "Sets values"},
        ],
        "variables": [
            {"name": "dtInvoices", "type": "DataTable", "scope": "Main Sequence"},
            {"name": "retries", "type": "Int32", "scope": "Main Sequence", "defaultValue": "3"},
        ],
        "arguments": [
            {"name": "in_FilePath", "direction": "In", "type": "String", "description": "Input file"},
        ],
    }


@pytest.fixture
def sample_diagram() -> str:
    return SAMPLE_DIAGRAM


@pytest.fixture
def payload() -> Dict[str, Any]:
    return build_payload()


@pytest.fixture
def fake_llm():
    """LLM stand-in whose reply depends on the requested strategy."""
    replies = {
        "ai-centric": json.dumps(build_payload(title="AI Invoice Processing")),
        "traditional": "Here is the workflow:\n```json\n"
        + json.dumps(build_payload(title="Rule-based Invoice Processing"))
        + "\n```\nLet me know if you need changes.",
    }

    async def generate(description, allow_marketplace, strategy, registries):
        return replies[strategy]

    llm = Mock()
    llm.replies = replies
    llm.generate_solution_json = AsyncMock(side_effect=generate)
    return llm
