from __future__ import annotations
from fastapi import APIRouter, Depends

from ..errors import UserError
from ..schemas import FactOfTheDayResponse
from ..session import StudySession
from .session import get_session, http_error

router = APIRouter(prefix="/fact-of-the-day", tags=["fact_of_the_day"])


@router.get("", response_model=FactOfTheDayResponse)
async def get_fact(session: StudySession = Depends(get_session)):
	# Cached until the language changes or a refresh is asked for
	try:
		fact = await session.get_fact_of_the_day()
	except UserError as e:
		raise http_error(e)
	return FactOfTheDayResponse(fact=fact)


@router.post("/refresh", response_model=FactOfTheDayResponse)
async def refresh(session: StudySession = Depends(get_session)):
	try:
		fact = await session.get_fact_of_the_day(refresh=True)
	except UserError as e:
		raise http_error(e)
	return FactOfTheDayResponse(fact=fact)
