"""
Pytest configuration and fixtures for the n8n-codegen project.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import httpx
import pytest

from n8n_codegen.config import Settings, get_features, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep real credentials and cached settings out of every test."""
    for var in ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL", "N8N_URL", "N8N_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(Path(__file__).parent)
    get_settings.cache_clear()
    get_features.cache_clear()
    yield
    get_settings.cache_clear()
    get_features.cache_clear()


@pytest.fixture
def settings_without_ai():
    return Settings(_env_file=None, openai_api_key=None)


@pytest.fixture
def settings_with_ai():
    return Settings(
        _env_file=None,
        openai_api_key="sk-test",
        openai_model="gpt-test",
        openai_base_url="https://llm.example.com/v1",
    )


@pytest.fixture
def sample_workflow_data():
    """A small n8n export covering every built-in emitter."""
    return {
        "id": "42",
        "name": "Sample",
        "active": False,
        "nodes": [
            {
                "name": "Start",
                "type": "n8n-nodes-base.manualTrigger",
                "parameters": {},
                "position": [250, 300],
            },
            {
                "name": "Get Users",
                "type": "n8n-nodes-base.httpRequest",
                "parameters": {"method": "GET", "url": "https://api.example.com/users"},
                "position": [450, 300],
            },
            {
                "name": "Defaults",
                "type": "n8n-nodes-base.set",
                "parameters": {"values": [{"name": "limit", "value": 10}]},
                "position": [650, 300],
            },
            {
                "name": "Transform",
                "type": "n8n-nodes-base.function",
                "parameters": {"functionCode": "let total = 0;\nreturn items;"},
                "position": [850, 300],
            },
        ],
        "connections": {
            "Start": {"main": [[{"node": "Get Users", "type": "main", "index": 0}]]},
            "Get Users": {"main": [[{"node": "Defaults", "type": "main", "index": 0}]]},
            "Defaults": {"main": [[{"node": "Transform", "type": "main", "index": 0}]]},
        },
    }


@pytest.fixture
def completion_response():
    """Build a chat-completion response carrying ``content``."""
    def factory(content, status_code=200):
        return httpx.Response(
            status_code,
            json={"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]},
        )
    return factory


@pytest.fixture
def make_llm_client():
    """Build an httpx client whose requests are answered by ``handler``."""
    def factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return factory
