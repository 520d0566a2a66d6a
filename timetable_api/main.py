# timetable_api/main.py
import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from timetable_api.config import settings
from timetable_api.logging_config import setup_logging
from timetable_api.routers import timetable
from timetable_api.utils.errors import SERVER_ERROR_MSG


setup_logging()
logger = logging.getLogger("app")


app = FastAPI(title="Timetable API", version="1.0.0")


@app.middleware("http")
async def access_log(request: Request, call_next):
    started = time.perf_counter()

    def elapsed_ms() -> int:
        return int((time.perf_counter() - started) * 1000)

    try:
        response = await call_next(request)
    except Exception:
        logger.exception("%s %s crashed after %dms", request.method, request.url.path, elapsed_ms())
        raise
    logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, elapsed_ms())
    return response


@app.exception_handler(Exception)
async def server_error(request: Request, exc: Exception):
    return JSONResponse(status_code=500, content={"msg": SERVER_ERROR_MSG})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(timetable.router)


@app.get("/health", response_class=PlainTextResponse)
def health():
    return "Up"


@app.get("/info", response_class=PlainTextResponse)
def info():
    return settings.APP_INFO


def run():
    uvicorn.run("timetable_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
