from __future__ import annotations
from typing import Any, Dict
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from ..errors import ErrorCategory, UserError
from ..i18n import Language
from ..session import StudySession

router = APIRouter(prefix="/session", tags=["session"])


_STATUS_BY_CATEGORY: Dict[ErrorCategory, int] = {
	ErrorCategory.VALIDATION_FAILED: 400,
	ErrorCategory.INVALID_REQUEST: 400,
	ErrorCategory.AUTH_CONFIG: 500,
	ErrorCategory.SAFETY_BLOCKED: 422,
	ErrorCategory.RECITATION_BLOCKED: 422,
	ErrorCategory.SERVICE_UNAVAILABLE: 503,
	ErrorCategory.MALFORMED_RESPONSE: 502,
	ErrorCategory.UNKNOWN: 502,
}


class LanguageRequest(BaseModel):
	language: Language


class TabRequest(BaseModel):
	tab: str


def get_session(request: Request) -> StudySession:
	return request.app.state.study_session


def http_error(err: UserError) -> HTTPException:
	return HTTPException(
		status_code=_STATUS_BY_CATEGORY.get(err.category, 502),
		detail=err.message,
		headers={"X-Error-Category": err.category.value},
	)


def export_response(session: StudySession, feature: str) -> PlainTextResponse:
	content, file_name = session.export(feature)
	if not content:
		raise HTTPException(status_code=404, detail="nothing to export yet")
	return PlainTextResponse(
		content,
		# RFC 5987 form so topics in Hindi survive the latin-1 header encoding
		headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(file_name)}"},
	)


@router.get("")
def get_state(session: StudySession = Depends(get_session)) -> Dict[str, Any]:
	return session.snapshot()


@router.put("/language")
def set_language(req: LanguageRequest, session: StudySession = Depends(get_session)):
	session.set_language(req.language)
	return {"language": session.language.value}


@router.put("/tab")
def set_tab(req: TabRequest, session: StudySession = Depends(get_session)):
	try:
		session.set_tab(req.tab)
	except ValueError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return {"active_tab": session.active_tab}
