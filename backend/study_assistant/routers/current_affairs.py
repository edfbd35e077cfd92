from __future__ import annotations
from fastapi import APIRouter, Depends

from ..errors import UserError
from ..schemas import CurrentAffairsResponse
from ..session import StudySession
from .session import export_response, get_session, http_error

router = APIRouter(prefix="/current-affairs", tags=["current_affairs"])


@router.post("", response_model=CurrentAffairsResponse)
async def generate(session: StudySession = Depends(get_session)):
	try:
		items = await session.generate_current_affairs()
	except UserError as e:
		raise http_error(e)
	return CurrentAffairsResponse(items=items)


@router.get("/export")
def export_current_affairs(session: StudySession = Depends(get_session)):
	return export_response(session, "current_affairs")
