import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

import httpx
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from airgate.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / settings.log_dir
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "airgate.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from airgate.dependencies import get_gateway
from airgate.routers import reservations, search
from airgate.services.gateway import AirlinesGateway, build_gateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pooled client shared by every backend call
    http_client = httpx.AsyncClient(timeout=settings.backend_timeout_seconds)
    app.state.gateway = build_gateway(settings, http_client)
    logger.info("Starting Flight Reservation Server")

    yield

    await http_client.aclose()
    logger.info("Flight Reservation Server stopped")


app = FastAPI(
    title="Airgate",
    description="Flight search and reservation gateway",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(search.router, tags=["search"])
app.include_router(reservations.router, tags=["reservations"])


@app.get("/status")
async def status_check(gateway: AirlinesGateway = Depends(get_gateway)):
    return {"status": "ok", "service": "airgate", "airlines": sorted(gateway.airlines)}
