"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("HF_API_KEY", "hf_test-key-000000000000")
os.environ.setdefault("GITHUB_TOKEN", "ghp_test-token")
os.environ.setdefault("ENVIRONMENT", "test")

from notionify.config import Settings  # noqa: E402
from notionify.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    monkeypatch.setenv("HF_API_KEY", "hf_test-key-000000000000")
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test-token")
    monkeypatch.setenv("ENVIRONMENT", "test")


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def daily_planner_reply() -> str:
    return (
        '{"title":"Daily Planner","sections":[{"name":"Today","description":"Tasks for today"}],'
        '"properties":[{"name":"Status","type":"status","description":"Task status"}]}'
    )


@pytest.fixture
def valid_template() -> dict:
    return {
        "title": "Reading Log",
        "sections": [
            {"name": "Currently Reading", "description": "Books in progress"},
            {"name": "Finished", "description": "Books completed this year"},
        ],
        "properties": [
            {"name": "Author", "type": "text", "description": "Who wrote it"},
            {"name": "Rating", "type": "number", "description": "Score out of five"},
        ],
        "notes": "Review monthly.",
    }
