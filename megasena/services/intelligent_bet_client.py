"""AI-assisted bet proposals through the Gemini ``generateContent`` REST API."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from megasena.errors import ServiceUnavailableError, UpstreamError
from megasena.services.lottery_types import AnalysisData, Bet, is_valid_bet, normalize_numbers
from megasena.services.statistics_service import most_delayed, most_frequent

logger = logging.getLogger(__name__)

PROMPT_TOP_N = 20

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "bets": {
            "type": "ARRAY",
            "description": "A list of generated lottery bets.",
            "items": {
                "type": "ARRAY",
                "description": "One bet with 6 unique numbers between 1 and 60, ascending.",
                "items": {"type": "INTEGER"},
            },
        },
    },
    "required": ["bets"],
}


def build_http_session(retries: int = 2, backoff_factor: float = 0.5) -> requests.Session:
    """Create a requests session with retry/backoff for transient errors."""

    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("POST",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)

    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def build_prompt(analysis: AnalysisData, count: int) -> str:
    top_frequent = [{str(s.number): s.count} for s in most_frequent(analysis, PROMPT_TOP_N)]
    top_delayed = [{str(s.number): s.delay} for s in most_delayed(analysis, PROMPT_TOP_N)]

    return f"""
Based on the following analysis of past Mega-Sena results, generate {count} new unique bets.

Generation rules:
1. Each bet must contain 6 unique numbers from 1 to 60, sorted ascending.
2. Favor numbers from the "Most Frequent" list.
3. Consider "delayed" numbers (not drawn for a while) as potential candidates.
4. Each bet should balance even and odd numbers (e.g. 3 even/3 odd, 2/4 or 4/2).
5. Each bet should be spread across the ranges 1-20, 21-40 and 41-60.
6. All generated bets must be different from each other.

Statistics over {analysis.total_draws} draws:
- {PROMPT_TOP_N} most frequent numbers (number: count): {json.dumps(top_frequent)}
- {PROMPT_TOP_N} most delayed numbers (number: draws since last seen): {json.dumps(top_delayed)}

Generate {count} bets.
""".strip()


class IntelligentBetClient:
    """Ask the language model for bets and keep only well-formed ones."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout_seconds: float = 30.0,
        http: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = float(timeout_seconds)
        self._http = http or build_http_session()

    def _request(self, prompt: str) -> dict[str, Any]:
        url = f"{self._base_url}/models/{self._model}:generateContent"
        body = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }
        try:
            resp = self._http.post(
                url,
                json=body,
                headers={"x-goog-api-key": self._api_key},
                timeout=self._timeout,
            )
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("AI service call failed: %s", exc)
            raise UpstreamError(message="Failed to communicate with the AI service.") from exc

    @staticmethod
    def _extract_text(payload: dict[str, Any]) -> str:
        try:
            parts = payload["candidates"][0]["content"]["parts"]
            return "".join(str(p.get("text", "")) for p in parts).strip()
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            raise UpstreamError(message="Unexpected AI response format.") from exc

    def generate(self, analysis: AnalysisData, count: int) -> list[Bet]:
        if not self._api_key:
            raise ServiceUnavailableError(message="GEMINI_API_KEY is not configured")

        payload = self._request(build_prompt(analysis, count))
        text = self._extract_text(payload)

        try:
            result = json.loads(text)
        except ValueError as exc:
            raise UpstreamError(message="Unexpected AI response format.") from exc

        raw_bets = result.get("bets") if isinstance(result, dict) else None
        if not isinstance(raw_bets, list):
            raise UpstreamError(message="Unexpected AI response format.")

        bets: list[Bet] = []
        for raw in raw_bets:
            if not isinstance(raw, list) or not all(isinstance(n, int) for n in raw):
                logger.info("Dropping malformed AI bet: %r", raw)
                continue
            if not is_valid_bet(raw):
                logger.info("Dropping invalid AI bet: %r", raw)
                continue
            bets.append(normalize_numbers(raw))

        if not bets:
            raise UpstreamError(message="The AI service returned no valid bets.")

        logger.info("AI service proposed %d valid bets (%d requested)", len(bets), count)
        return bets[:count]
