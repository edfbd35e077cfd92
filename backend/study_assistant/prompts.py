from __future__ import annotations
import enum
from typing import Any, Dict

from .i18n import PROMPT_LANGUAGE, Language


class RequestKind(str, enum.Enum):
	FACTS = "facts"
	SUMMARY = "summary"
	FACT_OF_THE_DAY = "fact_of_the_day"
	CURRENT_AFFAIRS = "current_affairs"
	EXAM_INFO = "exam_info"


def _facts_prompt(lang: str, topic: str) -> str:
	return (
		f'In {lang}, for the topic "{topic}", provide a JSON object with two keys: '
		'"facts" (an array of at least 5 interesting facts) and '
		'"related_topics" (an array of 3-5 related topics).'
	)


def _summary_prompt(lang: str, text: str) -> str:
	# The triple quotes only mark where the user's text starts and ends; nothing is escaped.
	return (
		f"Summarize the following text in a clear, concise, and easy-to-understand way in {lang}. "
		f'Focus on the key points and main ideas. Text: """{text}"""'
	)


def _fact_of_the_day_prompt(lang: str) -> str:
	return (
		f"Provide one interesting and surprising science or technology fact of the day, in {lang}. "
		"The fact should be concise, easy to understand, and engaging."
	)


def _current_affairs_prompt(lang: str) -> str:
	return (
		"Generate a list of 5 to 7 of the most important and recent current affairs and general knowledge points for today. "
		"Present them as a list of bullet points. "
		"The topics should be relevant for competitive exams in India and general global awareness. "
		f"The response must be in {lang}."
	)


def _exam_info_prompt(lang: str, exam_name: str) -> str:
	return (
		f'Provide a detailed breakdown for the exam named "{exam_name}" in {lang}. '
		'Respond with a JSON object containing: "description", "apply_start_date", '
		'"apply_end_date", "exam_pattern", and "syllabus". '
		"For dates, mention if they are tentative or past."
	)


_BUILDERS = {
	RequestKind.FACTS: (_facts_prompt, ("topic",)),
	RequestKind.SUMMARY: (_summary_prompt, ("text",)),
	RequestKind.FACT_OF_THE_DAY: (_fact_of_the_day_prompt, ()),
	RequestKind.CURRENT_AFFAIRS: (_current_affairs_prompt, ()),
	RequestKind.EXAM_INFO: (_exam_info_prompt, ("exam_name",)),
}


def build_prompt(kind: RequestKind, language: Language, **params: Any) -> str:
	"""Build the instruction string for one request.

	User parameters are embedded verbatim. Raises ValueError when a parameter
	the kind needs is missing.
	"""
	builder, required = _BUILDERS[RequestKind(kind)]
	missing = [name for name in required if params.get(name) is None]
	if missing:
		raise ValueError(f"{RequestKind(kind).value} prompt needs: {', '.join(missing)}")
	lang = PROMPT_LANGUAGE[Language(language)]
	args: Dict[str, Any] = {name: str(params[name]) for name in required}
	return builder(lang, **args)
