"""
Per-feature request state and the session that owns it.

The browser front end only renders what `StudySession.snapshot()` reports:
the selected language and tab, the recent topics, and for every feature an
Operation moving Idle -> Loading -> Success | Failed. There is one session
per app (see main.py); nothing else holds UI state.
"""

from __future__ import annotations
import enum
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from . import export, services
from .errors import ErrorCategory, UserError, classify
from .history import TopicHistory
from .i18n import PREDEFINED_TOPICS, Language
from .schemas import ExamInfoResult, FactResult
from .settings import settings


T = TypeVar("T")

TABS: Tuple[str, ...] = ("facts", "summarizer", "currentAffairs", "examInfo")


class Status(str, enum.Enum):
	IDLE = "idle"
	LOADING = "loading"
	SUCCESS = "success"
	FAILED = "failed"


class Operation(Generic[T]):
	"""State of one feature's most recent request.

	Runs are not serialized. Each run takes a generation number and only the
	newest run may write the state, so a slow earlier reply cannot overwrite
	a later one. Every caller still gets its own result or error.
	"""

	def __init__(self, name: str, context: Optional[str] = None) -> None:
		self.name = name
		# Names the operation in classified error messages
		self.context = context or name
		self.status = Status.IDLE
		self.result: Optional[T] = None
		self.subject: Optional[str] = None
		self.error: Optional[str] = None
		self.error_category: Optional[ErrorCategory] = None
		self._generation = 0

	async def run(self, factory: Callable[[], Awaitable[T]], *, subject: Optional[str] = None) -> T:
		self._generation += 1
		generation = self._generation
		self.status = Status.LOADING
		self.result = None
		self.error = None
		self.error_category = None
		try:
			result = await factory()
		except Exception as exc:
			err = classify(exc, self.context)
			if generation == self._generation:
				self.status = Status.FAILED
				self.error = err.message
				self.error_category = err.category
			if err is exc:
				raise
			raise err from exc
		if generation == self._generation:
			self.status = Status.SUCCESS
			self.result = result
			self.subject = subject
		return result

	def reset(self) -> None:
		self._generation += 1
		self.status = Status.IDLE
		self.result = None
		self.subject = None
		self.error = None
		self.error_category = None

	def snapshot(self) -> Dict[str, Any]:
		result: Any = self.result
		if hasattr(result, "model_dump"):
			result = result.model_dump()
		return {
			"status": self.status.value,
			"result": result,
			"subject": self.subject,
			"error": self.error,
			"error_category": self.error_category.value if self.error_category else None,
		}


class StudySession:
	def __init__(
		self,
		history: TopicHistory,
		*,
		language: Optional[Language] = None,
		client: Optional[services.Oracle] = None,
	) -> None:
		self.history = history
		self.language = Language(language or settings.default_language)
		self.active_tab = TABS[0]
		# None means each request opens (and closes) its own GeminiClient
		self.client = client
		self.facts: Operation[FactResult] = Operation("facts", "generating facts")
		self.summary: Operation[str] = Operation("summary", "summarizing text")
		self.current_affairs: Operation[List[str]] = Operation("current_affairs", "generating current affairs")
		self.exam_info: Operation[ExamInfoResult] = Operation("exam_info", "generating exam information")
		self.fact_of_the_day: Operation[str] = Operation("fact_of_the_day", "getting fact of the day")

	@property
	def operations(self) -> Dict[str, Operation[Any]]:
		return {
			op.name: op
			for op in (self.fact_of_the_day, self.facts, self.summary, self.current_affairs, self.exam_info)
		}

	def set_language(self, language: Language) -> None:
		language = Language(language)
		if language != self.language:
			self.language = language
			# Refetched in the new language on next read
			self.fact_of_the_day.reset()

	def set_tab(self, tab: str) -> None:
		if tab not in TABS:
			raise ValueError(f"tab must be one of {list(TABS)}")
		self.active_tab = tab

	def predefined_topics(self) -> List[str]:
		return list(PREDEFINED_TOPICS[self.language])

	async def generate_facts(self, topic: str) -> FactResult:
		language = self.language

		async def work() -> FactResult:
			result = await services.generate_facts(topic, language, client=self.client)
			self.history.add(topic.strip())
			return result

		return await self.facts.run(work, subject=topic.strip())

	async def summarize(self, content: str, file_name: Optional[str] = None) -> str:
		language = self.language
		return await self.summary.run(
			lambda: services.summarize_text(content, language, client=self.client),
			subject=file_name,
		)

	async def get_fact_of_the_day(self, *, refresh: bool = False) -> str:
		if not refresh and self.fact_of_the_day.status == Status.SUCCESS and self.fact_of_the_day.result is not None:
			return self.fact_of_the_day.result
		language = self.language
		return await self.fact_of_the_day.run(
			lambda: services.get_fact_of_the_day(language, client=self.client)
		)

	async def generate_current_affairs(self) -> List[str]:
		language = self.language
		return await self.current_affairs.run(
			lambda: services.generate_current_affairs(language, client=self.client)
		)

	async def generate_exam_info(self, exam_name: str) -> ExamInfoResult:
		language = self.language
		return await self.exam_info.run(
			lambda: services.generate_exam_info(exam_name, language, client=self.client),
			subject=exam_name.strip(),
		)

	def export(self, feature: str) -> Tuple[str, str]:
		"""Plain text and download file name for a feature's current result.

		The text is empty when there is nothing to share yet.
		"""
		if feature == "facts":
			topic = self.facts.subject or ""
			return export.render_facts(topic, self.facts.result, self.language), export.facts_file_name(topic)
		if feature == "summary":
			return export.render_summary(self.summary.result), export.summary_file_name(self.summary.subject)
		if feature == "current_affairs":
			return (
				export.render_current_affairs(self.current_affairs.result, self.language),
				export.CURRENT_AFFAIRS_FILE_NAME,
			)
		if feature == "exam_info":
			name = self.exam_info.subject or ""
			return export.render_exam_info(name, self.exam_info.result, self.language), export.exam_info_file_name(name)
		raise KeyError(feature)

	def snapshot(self) -> Dict[str, Any]:
		return {
			"language": self.language.value,
			"active_tab": self.active_tab,
			"history": self.history.load(),
			"operations": {name: op.snapshot() for name, op in self.operations.items()},
		}
