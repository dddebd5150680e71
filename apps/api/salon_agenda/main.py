import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from salon_agenda.core.config import settings
from salon_agenda.routers.agenda import router as agenda_router
from salon_agenda.routers.calendar import router as calendar_router
from salon_agenda.routers.professionals import router as professionals_router
from salon_agenda.routers.sessions import router as sessions_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Salon Agenda API")

allow_origins = settings.cors_origin_list()

# Safe fallback for local dev if env var not set
if not allow_origins:
    allow_origins = [
        "http://localhost:8081",
        "http://127.0.0.1:8081",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(professionals_router, prefix="/professionals", tags=["professionals"])
app.include_router(sessions_router, tags=["sessions"])
app.include_router(calendar_router, tags=["calendar"])
app.include_router(agenda_router, tags=["agenda"])

logger.info("Salon agenda API ready (origins: %s)", ", ".join(allow_origins))


@app.get("/health")
def health():
    return {"status": "ok"}
