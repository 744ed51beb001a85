import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quora.database import init_db
from quora.exceptions import QuoraError, quora_error_handler
from quora.routes import questions

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

APP_NAME = "Quora Question Service API"

app = FastAPI(title=APP_NAME)

_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    _cors_origins.extend(o.strip() for o in _extra.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(QuoraError, quora_error_handler)

# Include routers
app.include_router(questions.router, prefix="/api", tags=["questions"])


@app.on_event("startup")
def on_startup():
    init_db()  # Imports models and creates tables
    logger.info("%s started, %d routes registered", APP_NAME, len(app.routes))


@app.get("/api/health")
def health_check():
    return {"app_name": APP_NAME, "status": "healthy"}
