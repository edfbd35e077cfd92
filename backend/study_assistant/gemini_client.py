from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, Optional
from .extraction import loads_object
from .settings import settings

logger = logging.getLogger(__name__)

# finishReason values that mean the reply was withheld
_BLOCK_REASONS = {"SAFETY", "RECITATION", "BLOCKLIST", "PROHIBITED_CONTENT", "SPII"}


class GeminiError(RuntimeError):
	def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
		super().__init__(message)
		self.status_code = status_code


class GeminiClient:
	def __init__(self, api_key: Optional[str] = None, *, base_url: Optional[str] = None, model: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
		self.api_key = api_key or settings.gemini_api_key
		if not self.api_key:
			raise ValueError("GEMINI_API_KEY is not configured")
		self.model = model or settings.gemini_model
		self.provider = settings.gemini_provider
		if self.provider == "vertex":
			region = settings.vertex_region
			project = settings.vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint
			self.base_url = base_url or (
				f"https://{region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{region}/publishers/google/models/{self.model}:generateContent"
			)
		else:
			# Google AI Studio (Generative Language API)
			self.base_url = base_url or f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent"
		# Key goes in a header for both providers so it never shows up in URLs or error messages
		self._headers = {"x-goog-api-key": self.api_key}
		self._client = httpx.AsyncClient(timeout=settings.gemini_timeout_seconds, transport=transport)

	async def generate(self, prompt: str, *, response_schema: Optional[Dict[str, Any]] = None) -> str:
		payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
		if response_schema is not None:
			payload["generationConfig"] = {
				"responseMimeType": "application/json",
				"responseSchema": response_schema,
			}
		return await self._post_payload(payload)

	async def _post_payload(self, payload: Dict[str, Any]) -> str:
		logger.debug("POST %s (structured=%s)", self.base_url, "generationConfig" in payload)
		r = await self._client.post(self.base_url, headers=self._headers, json=payload)
		if r.is_error:
			raise GeminiError(
				f"Gemini API error {r.status_code}: {self._error_message(r)}",
				status_code=r.status_code,
			)
		data = loads_object(r.text)
		if data is None:
			raise GeminiError(f"Unexpected Gemini response: {r.text[:200]}")
		return self._text_from(data)

	@staticmethod
	def _error_message(r: httpx.Response) -> str:
		body = loads_object(r.text) or {}
		err = body.get("error")
		if isinstance(err, dict) and err.get("message"):
			return str(err["message"])
		return r.text.strip() or r.reason_phrase

	@staticmethod
	def _text_from(data: Dict[str, Any]) -> str:
		feedback = data.get("promptFeedback") or {}
		if feedback.get("blockReason"):
			raise GeminiError(f"Response blocked due to {feedback['blockReason']}")
		candidates = data.get("candidates") or []
		if not candidates:
			raise GeminiError("Unexpected Gemini response: no candidates")
		first = candidates[0]
		parts = (first.get("content") or {}).get("parts") or []
		text = "".join(str(p.get("text", "")) for p in parts if isinstance(p, dict))
		reason = first.get("finishReason")
		if not text and reason in _BLOCK_REASONS:
			raise GeminiError(f"Response blocked due to {reason}")
		if not text:
			raise GeminiError(f"Unexpected Gemini response: empty text (finishReason={reason})")
		return text

	async def aclose(self) -> None:
		await self._client.aclose()
