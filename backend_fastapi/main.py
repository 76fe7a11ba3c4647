import logging
import os

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from .env file
load_dotenv()

from backend_fastapi.api.errors import BadRequestAlertError, bad_request_alert_handler  # noqa: E402
from backend_fastapi.api.header_util import exposed_headers  # noqa: E402
from backend_fastapi.api.routes.tareas import router as tareas_router  # noqa: E402
from backend_fastapi.logging_config import resolve_log_level  # noqa: E402

logging.basicConfig(
    level=resolve_log_level(os.getenv("LOG_LEVEL", "info")),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="Tareas API")

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "*")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
    expose_headers=exposed_headers(),
)

app.add_exception_handler(BadRequestAlertError, bad_request_alert_handler)

api_router = APIRouter(prefix="/api")
api_router.include_router(tareas_router)
app.include_router(api_router)
