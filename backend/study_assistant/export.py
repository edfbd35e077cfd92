from __future__ import annotations
import re
from typing import List, Optional

from .i18n import Language, text
from .schemas import ExamInfoResult, FactResult


def _underscored(name: str) -> str:
	return re.sub(r"\s+", "_", name)


def _bullets(items: List[str]) -> str:
	return "\n".join(f"- {item}" for item in items)


def render_facts(topic: str, result: Optional[FactResult], language: Language) -> str:
	if result is None:
		return ""
	return (
		f'{text(language, "factsAbout")} "{topic}":\n\n'
		f"{_bullets(result.facts)}\n\n"
		f'{text(language, "relatedTopics")}:\n'
		f"{_bullets(result.related_topics)}"
	)


def facts_file_name(topic: str) -> str:
	return f"{_underscored(topic)}_facts.txt"


def render_summary(summary: Optional[str]) -> str:
	return summary or ""


def summary_file_name(file_name: Optional[str]) -> str:
	return f"summary_{file_name or 'text'}.txt"


def render_current_affairs(items: Optional[List[str]], language: Language) -> str:
	if not items:
		return ""
	return f'{text(language, "currentAffairsHeader")}\n\n{_bullets(items)}'


CURRENT_AFFAIRS_FILE_NAME = "current_affairs_briefing.txt"


def render_exam_info(exam_name: str, result: Optional[ExamInfoResult], language: Language) -> str:
	if result is None:
		return ""

	def t(key: str) -> str:
		return text(language, key)

	lines = [
		f"{t('examInfoHeader')}: {exam_name}",
		"---------------------------------",
		"",
		f"**{t('examDescription')}:**",
		result.description,
		"",
		f"**{t('examDates')}:**",
		f"- {t('examApplyStart')}: {result.apply_start_date}",
		f"- {t('examApplyEnd')}: {result.apply_end_date}",
		"",
		f"**{t('examPattern')}:**",
		result.exam_pattern,
		"",
		f"**{t('examSyllabus')}:**",
		result.syllabus,
	]
	return "\n".join(lines).strip()


def exam_info_file_name(exam_name: str) -> str:
	return f"{_underscored(exam_name)}_info.txt"
