import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .db import Base, SessionLocal, engine
from .history import TopicHistory
from .session import StudySession
from .settings import settings
from .storage import KeyValueStore
from .routers import session as session_router
from .routers import facts
from .routers import summary
from .routers import current_affairs
from .routers import exam_info
from .routers import fact_of_the_day

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# httpx logs request URLs at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)

app = FastAPI(title="Study Assistant API")
app.include_router(session_router.router)
app.include_router(fact_of_the_day.router)
app.include_router(facts.router)
app.include_router(summary.router)
app.include_router(current_affairs.router)
app.include_router(exam_info.router)


def create_session() -> StudySession:
	return StudySession(TopicHistory(KeyValueStore(SessionLocal)))


@app.get("/", include_in_schema=False)
async def redirect_root_to_docs():
	return RedirectResponse(url="/docs")

@app.get("/info")
def root():
	return {"status": "ok", "gemini_configured": bool(settings.gemini_api_key)}

@app.on_event("startup")
async def startup_event():
	# Initialize DB schema
	Base.metadata.create_all(bind=engine)
	app.state.study_session = create_session()
