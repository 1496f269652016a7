import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .database import SessionLocal, engine
from .models.generated import Base
from .redis_client import redis_client
from .routers import slots
from .services.opening_times_seed import seed_default_opening_times
from .services.slots import SlotsError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_default_opening_times(db, settings.business_timezone, redis_client)
    except Exception:
        logger.exception("Failed to initialize opening times")
    finally:
        db.close()

    yield


app = FastAPI(title="Appointments API", lifespan=lifespan)
app.include_router(slots.router)


@app.exception_handler(SlotsError)
async def slots_error_handler(request: Request, exc: SlotsError):
    if exc.status_code >= 500:
        # configuration faults: log the detail, answer generically
        logger.error(f"{request.url.path}: {exc.code}: {exc.message}")
        detail = "Internal server error"
    else:
        logger.warning(f"{request.url.path} rejected: {exc.code}: {exc.message}")
        detail = exc.message
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail, "code": exc.code},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
def health():
    return {"redis": redis_client.ping() if redis_client is not None else None}


if __name__ == "__main__":
    uvicorn.run("appointments.main:app", host="0.0.0.0", port=8000, log_level="info")
