"""
Shared fixtures: an in-memory store, scripted AI providers and a TestClient
wired to both through FastAPI dependency overrides.
"""
import os

# Selected at import time by the service modules
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ["AI_PROVIDER"] = "none"
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient

from services.ai_client import AIProvider, get_ai_provider
from services.storage_svc import InMemoryStorage, get_storage


class FakeProvider(AIProvider):
    """Returns a canned reply (or raises it, when it is an exception) and records prompts."""

    name = "fake"

    def __init__(self, reply=None):
        self.reply = reply
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


SAMPLE_PROFILE = {
    "name": "Ada Student",
    "email": "ada@example.com",
    "educationLevel": "undergraduate-junior",
    "fieldOfStudy": "Computer Science",
    "gpa": "3.8",
    "graduationYear": "2026",
    "skills": "Python, robotics",
    "activities": "Coding club",
    "financialNeed": "moderate",
    "location": "national",
}


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def client(storage, provider):
    from app import app

    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_ai_provider] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def profile(storage):
    """A stored profile owned by user 'user-1'."""
    return storage.create_profile("user-1", dict(SAMPLE_PROFILE))
