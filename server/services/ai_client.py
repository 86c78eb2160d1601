"""
AI suggestion providers.

Every provider exposes the same surface:
- generate(prompt): provider-specific call, may raise
- complete(prompt): one attempt, never raises, returns the JSON-bearing
  text or None
- suggest_matches / suggest_guidance: build the prompt and complete it

The concrete provider (Gemini, OpenAI, or disabled) is chosen once at
startup from AI_PROVIDER.
"""
import os
import re
import logging
from typing import Any, Dict, List, Optional

import httpx
import google.generativeai as genai
from openai import OpenAI

from services.prompt_builder import build_match_prompt, build_guidance_prompt

logger = logging.getLogger(__name__)

AI_PROVIDER = os.getenv("AI_PROVIDER", "gemini").lower()
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash-latest")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
AI_TIMEOUT_S = float(os.getenv("AI_TIMEOUT_S", "60"))

_FENCED_BLOCK_RE = re.compile(r"```(?:json|JSON)?\s*\n?(.*?)\n?\s*```", re.DOTALL)


def extract_json_payload(text: Optional[str]) -> Optional[str]:
    """
    Pull the JSON out of a model reply.

    Models often wrap JSON in a markdown fence; if one is present its body
    is returned, otherwise the whole (stripped) reply is treated as JSON.
    """
    if not text or not text.strip():
        return None
    match = _FENCED_BLOCK_RE.search(text)
    payload = match.group(1) if match else text
    payload = payload.strip()
    return payload or None


class AIProvider:
    """Base class; subclasses implement generate()."""

    name = "base"

    def generate(self, prompt: str) -> Optional[str]:
        raise NotImplementedError

    def complete(self, prompt: str) -> Optional[str]:
        try:
            raw = self.generate(prompt)
        except Exception as e:
            logger.error(f"❌ {self.name} API error: {type(e).__name__}: {e}")
            return None
        payload = extract_json_payload(raw)
        if payload is None:
            logger.warning(f"⚠️  {self.name} returned an empty response")
        return payload

    def suggest_matches(self, profile: Dict[str, Any], scholarships: List[Dict[str, Any]]) -> Optional[str]:
        return self.complete(build_match_prompt(profile, scholarships))

    def suggest_guidance(self, profile: Dict[str, Any], scholarship: Dict[str, Any]) -> Optional[str]:
        return self.complete(build_guidance_prompt(profile, scholarship))


class GeminiProvider(AIProvider):
    name = "gemini"

    def __init__(self, api_key: str, model_name: str = GEMINI_MODEL, timeout: float = AI_TIMEOUT_S):
        genai.configure(api_key=api_key)
        self._model_name = model_name
        self._model = genai.GenerativeModel(model_name)
        self._timeout = timeout
        logger.info(f"🤖 Gemini provider initialized with model {model_name}")

    def generate(self, prompt: str) -> Optional[str]:
        response = self._model.generate_content(
            prompt,
            request_options={"timeout": self._timeout},
        )
        # .text raises ValueError when the candidate was blocked; complete() logs it
        return response.text


class OpenAIProvider(AIProvider):
    name = "openai"

    SYSTEM_PROMPT = (
        "You are an expert scholarship counselor who helps students find the best funding "
        "opportunities. Answer with JSON only."
    )

    def __init__(self, api_key: str, model_name: str = OPENAI_MODEL, timeout: float = AI_TIMEOUT_S):
        http_client = httpx.Client(timeout=httpx.Timeout(timeout))
        # Single attempt per call: the SDK's own retries are turned off
        self._client = OpenAI(api_key=api_key, http_client=http_client, max_retries=0)
        self._model_name = model_name
        logger.info(f"🤖 OpenAI provider initialized with model {model_name}")

    def generate(self, prompt: str) -> Optional[str]:
        response = self._client.chat.completions.create(
            model=self._model_name,
            messages=[
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        )
        if not response.choices:
            return None
        return response.choices[0].message.content


class DisabledProvider(AIProvider):
    """No AI configured: every call degrades to the fallback path."""

    name = "disabled"

    def generate(self, prompt: str) -> Optional[str]:
        return None


# ==================== Provider Selection ====================

_provider: Optional[AIProvider] = None


def _api_key_for(provider: str) -> Optional[str]:
    if provider == "gemini":
        return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    if provider == "openai":
        return os.getenv("OPENAI_API_KEY")
    return None


def init_ai_provider(provider: Optional[str] = None, require_key: bool = False) -> AIProvider:
    """
    Build the process-wide provider.

    With require_key=True (persistent deployments) a missing key is fatal;
    otherwise the service runs on the fallback path with a warning.
    """
    global _provider
    provider = (provider or AI_PROVIDER).lower()

    if provider == "none":
        _provider = DisabledProvider()
        logger.info("🤖 AI provider disabled, using fallback scoring")
        return _provider

    if provider not in ("gemini", "openai"):
        raise RuntimeError(f"Unknown AI_PROVIDER '{provider}' (expected 'gemini', 'openai' or 'none')")

    api_key = _api_key_for(provider)
    if not api_key:
        if require_key:
            raise RuntimeError(f"Missing API key for AI provider '{provider}'")
        logger.warning(f"⚠️  No API key for '{provider}', AI provider disabled")
        _provider = DisabledProvider()
        return _provider

    _provider = GeminiProvider(api_key) if provider == "gemini" else OpenAIProvider(api_key)
    return _provider


def get_ai_provider() -> AIProvider:
    """FastAPI dependency returning the process-wide provider."""
    if _provider is None:
        return init_ai_provider()
    return _provider
