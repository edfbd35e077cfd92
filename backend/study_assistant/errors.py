"""
Error classification for AI requests.

Every failure raised while talking to the model (transport errors, Gemini
error bodies, blocked replies, unparseable JSON) is turned into a UserError
with one of a small set of categories and a message fit for display. Raw
error detail goes to the log only.

Classification is a heuristic: Gemini does not hand back structured error
codes for every case, so rules match substrings of the error message in a
fixed priority order. The first matching rule wins.
"""

from __future__ import annotations
import enum
import json
import logging
from dataclasses import dataclass
from typing import Callable, List

from .extraction import MalformedPayloadError


logger = logging.getLogger(__name__)


class ErrorCategory(str, enum.Enum):
	AUTH_CONFIG = "auth_config"
	SAFETY_BLOCKED = "safety_blocked"
	RECITATION_BLOCKED = "recitation_blocked"
	INVALID_REQUEST = "invalid_request"
	SERVICE_UNAVAILABLE = "service_unavailable"
	MALFORMED_RESPONSE = "malformed_response"
	VALIDATION_FAILED = "validation_failed"
	UNKNOWN = "unknown"


class UserError(Exception):
	"""A failure that is safe to show to the user."""

	def __init__(self, category: ErrorCategory, message: str) -> None:
		super().__init__(message)
		self.category = category
		self.message = message

	def __repr__(self) -> str:
		return f"UserError({self.category.value!r}, {self.message!r})"


@dataclass(frozen=True)
class _Rule:
	matches: Callable[[BaseException, str], bool]
	category: ErrorCategory
	template: str


def _is_parse_failure(error: BaseException, _text: str) -> bool:
	return isinstance(error, (json.JSONDecodeError, MalformedPayloadError))


# Evaluated top to bottom; `text` is the lowercased error message.
RULES: List[_Rule] = [
	_Rule(
		lambda e, text: "api key" in text or "api_key" in text,
		ErrorCategory.AUTH_CONFIG,
		"API Key is invalid or missing. Please check your configuration.",
	),
	_Rule(
		lambda e, text: "blocked" in text and "safety" in text,
		ErrorCategory.SAFETY_BLOCKED,
		"Your request for {context} was blocked due to safety settings. Please try a different topic or wording.",
	),
	_Rule(
		lambda e, text: "recitation" in text,
		ErrorCategory.RECITATION_BLOCKED,
		"Your request for {context} was blocked to prevent recitation of copyrighted material. Please try a different topic.",
	),
	_Rule(
		lambda e, text: "400" in text,
		ErrorCategory.INVALID_REQUEST,
		"The request for {context} was invalid. Please check your input.",
	),
	_Rule(
		lambda e, text: "500" in text or "503" in text,
		ErrorCategory.SERVICE_UNAVAILABLE,
		"The AI service is temporarily unavailable. Please try again later.",
	),
	_Rule(
		_is_parse_failure,
		ErrorCategory.MALFORMED_RESPONSE,
		"The AI returned an invalid response format for {context}. Please try again.",
	),
]

_FALLBACK = "Failed to complete {context}. Please check your connection and try again."


def classify(error: BaseException, context: str) -> UserError:
	"""Map an exception raised during `context` to a UserError.

	Args:
		error: Whatever the client, transport or parser raised
		context: The failing operation, e.g. "generating facts"

	Returns:
		UserError; an already classified UserError is returned as is
	"""
	if isinstance(error, UserError):
		return error
	logger.error("Error %s: %r", context, error, exc_info=error)
	text = str(error).lower()
	for rule in RULES:
		if rule.matches(error, text):
			return UserError(rule.category, rule.template.format(context=context))
	return UserError(ErrorCategory.UNKNOWN, _FALLBACK.format(context=context))
