"""
Request orchestrators, one per feature.

Each one checks its input, builds the prompt, makes a single Gemini call and
turns the reply into a result. Any failure on the way out is classified and
re-raised as a UserError; blank input fails with a localized validation
message before the model is contacted.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Protocol, TypeVar

from .errors import ErrorCategory, UserError, classify
from .extraction import parse_json_payload, split_bullet_lines
from .gemini_client import GeminiClient
from .i18n import Language, text
from .prompts import RequestKind, build_prompt
from .schemas import EXAM_INFO_SCHEMA, FACT_SCHEMA, ExamInfoResult, FactResult


T = TypeVar("T")


class Oracle(Protocol):
	async def generate(self, prompt: str, *, response_schema: Optional[Dict[str, Any]] = None) -> str: ...


def _require(value: Optional[str], language: Language, message_key: str) -> str:
	if value is None or not value.strip():
		raise UserError(ErrorCategory.VALIDATION_FAILED, text(language, message_key))
	return value


async def _call(
	context: str,
	client: Optional[Oracle],
	prompt: str,
	handle: Callable[[str], T],
	*,
	response_schema: Optional[Dict[str, Any]] = None,
) -> T:
	owned: Optional[GeminiClient] = None
	try:
		if client is None:
			owned = client = GeminiClient()
		raw = await client.generate(prompt, response_schema=response_schema)
		return handle(raw)
	except Exception as exc:
		raise classify(exc, context) from exc
	finally:
		if owned is not None:
			await owned.aclose()


async def generate_facts(topic: str, language: Language, *, client: Optional[Oracle] = None) -> FactResult:
	_require(topic, language, "errorEnterTopic")
	prompt = build_prompt(RequestKind.FACTS, language, topic=topic)
	return await _call(
		"generating facts",
		client,
		prompt,
		lambda raw: parse_json_payload(raw, FactResult),
		response_schema=FACT_SCHEMA,
	)


async def summarize_text(content: str, language: Language, *, client: Optional[Oracle] = None) -> str:
	_require(content, language, "errorNoFile")
	prompt = build_prompt(RequestKind.SUMMARY, language, text=content)
	return await _call("summarizing text", client, prompt, lambda raw: raw)


async def get_fact_of_the_day(language: Language, *, client: Optional[Oracle] = None) -> str:
	prompt = build_prompt(RequestKind.FACT_OF_THE_DAY, language)
	return await _call("getting fact of the day", client, prompt, lambda raw: raw)


async def generate_current_affairs(language: Language, *, client: Optional[Oracle] = None) -> List[str]:
	prompt = build_prompt(RequestKind.CURRENT_AFFAIRS, language)
	return await _call("generating current affairs", client, prompt, split_bullet_lines)


async def generate_exam_info(exam_name: str, language: Language, *, client: Optional[Oracle] = None) -> ExamInfoResult:
	_require(exam_name, language, "errorExamName")
	prompt = build_prompt(RequestKind.EXAM_INFO, language, exam_name=exam_name)
	return await _call(
		"generating exam information",
		client,
		prompt,
		lambda raw: parse_json_payload(raw, ExamInfoResult),
		response_schema=EXAM_INFO_SCHEMA,
	)
