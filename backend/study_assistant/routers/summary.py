from __future__ import annotations
from pathlib import PurePath

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ..errors import UserError
from ..i18n import text
from ..schemas import SummaryResponse, TextRequest
from ..session import StudySession
from .session import export_response, get_session, http_error

router = APIRouter(prefix="/summary", tags=["summary"])


ALLOWED_SUFFIXES = {".txt", ".md", ".csv"}


def _is_text_upload(file: UploadFile) -> bool:
	suffix = PurePath(file.filename or "").suffix.lower()
	content_type = (file.content_type or "").split(";")[0].strip()
	return suffix in ALLOWED_SUFFIXES or content_type == "text/plain"


async def _summarize(session: StudySession, content: str, file_name: str | None) -> SummaryResponse:
	try:
		summary = await session.summarize(content, file_name)
	except UserError as e:
		raise http_error(e)
	return SummaryResponse(summary=summary)


@router.post("", response_model=SummaryResponse)
async def summarize_file(file: UploadFile = File(...), session: StudySession = Depends(get_session)):
	if not _is_text_upload(file):
		raise HTTPException(status_code=415, detail="Only .txt, .md and .csv files are supported.")
	raw = await file.read()
	try:
		content = raw.decode("utf-8-sig")
	except UnicodeDecodeError:
		raise HTTPException(status_code=400, detail=text(session.language, "errorReadFile"))
	if raw and not content.strip():
		raise HTTPException(status_code=400, detail=text(session.language, "errorEmptyFile"))
	return await _summarize(session, content, file.filename)


@router.post("/text", response_model=SummaryResponse)
async def summarize_text(req: TextRequest, session: StudySession = Depends(get_session)):
	return await _summarize(session, req.text, req.file_name)


@router.get("/export")
def export_summary(session: StudySession = Depends(get_session)):
	return export_response(session, "summary")
