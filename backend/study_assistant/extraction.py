from __future__ import annotations
import json
import re
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError


_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]+?)\s*```")
_BULLET_RE = re.compile(r"^[*-]\s+")

M = TypeVar("M", bound=BaseModel)


class MalformedPayloadError(ValueError):
	"""The model's reply could not be turned into the expected result shape."""


def extract_json(raw: Optional[str]) -> str:
	"""Return the body of the first ``` fenced block in raw, or raw itself, trimmed."""
	text = raw or ""
	match = _FENCE_RE.search(text)
	if match and match.group(1):
		return match.group(1).strip()
	return text.strip()


def split_bullet_lines(text: Optional[str]) -> List[str]:
	items: List[str] = []
	for line in (text or "").splitlines():
		item = _BULLET_RE.sub("", line.strip(), count=1)
		if item.strip():
			items.append(item.strip())
	return items


def parse_json_payload(raw: Optional[str], model: Type[M]) -> M:
	"""Parse a (possibly fenced) JSON reply into model.

	Error messages carry only the model name and field locations, never the
	reply text, so they cannot trip the substring rules of the classifier.
	"""
	candidate = extract_json(raw)
	try:
		data: Any = json.loads(candidate)
	except json.JSONDecodeError as err:
		raise MalformedPayloadError(f"{model.__name__} reply is not valid JSON") from err
	if not isinstance(data, dict):
		raise MalformedPayloadError(f"{model.__name__} reply is not a JSON object")
	try:
		return model.model_validate(data)
	except ValidationError as err:
		# List indices are left out so digits like 400 never reach the classifier
		fields = sorted({".".join(p for p in e["loc"] if isinstance(p, str)) or "(root)" for e in err.errors()})
		raise MalformedPayloadError(
			f"{model.__name__} reply has invalid fields: {', '.join(fields)}"
		) from err


def loads_object(text: Optional[str]) -> Optional[Dict[str, Any]]:
	try:
		data = json.loads(text or "")
	except (TypeError, ValueError):
		return None
	return data if isinstance(data, dict) else None
