from __future__ import annotations
from typing import List

from fastapi import APIRouter, Depends

from ..errors import UserError
from ..schemas import FactResult, TopicRequest
from ..session import StudySession
from .session import export_response, get_session, http_error

router = APIRouter(prefix="/facts", tags=["facts"])


@router.post("", response_model=FactResult)
async def generate_facts(req: TopicRequest, session: StudySession = Depends(get_session)):
	try:
		return await session.generate_facts(req.topic)
	except UserError as e:
		raise http_error(e)


@router.get("/topics")
def predefined_topics(session: StudySession = Depends(get_session)) -> List[str]:
	return session.predefined_topics()


@router.get("/history")
def get_history(session: StudySession = Depends(get_session)) -> List[str]:
	return session.history.load()


@router.delete("/history", status_code=204)
def clear_history(session: StudySession = Depends(get_session)):
	session.history.clear()


@router.get("/export")
def export_facts(session: StudySession = Depends(get_session)):
	return export_response(session, "facts")
