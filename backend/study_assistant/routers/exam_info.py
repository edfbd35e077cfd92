from __future__ import annotations
from fastapi import APIRouter, Depends

from ..errors import UserError
from ..schemas import ExamInfoResult, ExamRequest
from ..session import StudySession
from .session import export_response, get_session, http_error

router = APIRouter(prefix="/exam-info", tags=["exam_info"])


@router.post("", response_model=ExamInfoResult)
async def generate(req: ExamRequest, session: StudySession = Depends(get_session)):
	try:
		return await session.generate_exam_info(req.exam_name)
	except UserError as e:
		raise http_error(e)


@router.get("/export")
def export_exam_info(session: StudySession = Depends(get_session)):
	return export_response(session, "exam_info")
