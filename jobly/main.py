from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import database
from .config import CORS_ALLOW_ORIGINS
from .errors import AppError
from .routes import auth_router, companies_router, jobs_router

log = logging.getLogger("jobly")

app = FastAPI(title="Jobly", version="1.0.0")

app.include_router(auth_router)
app.include_router(companies_router)
app.include_router(jobs_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


def _error(status: int, message) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": {"message": message, "status": status}},
    )


@app.exception_handler(AppError)
async def _app_error(request: Request, exc: AppError):
    return _error(exc.status, exc.message)


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, exc.detail)


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    messages = [
        f"{'.'.join(str(p) for p in e.get('loc', []))}: {e.get('msg', 'invalid value')}"
        for e in exc.errors()
    ]
    return _error(400, messages)


@app.exception_handler(Exception)
async def _unhandled(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal Server Error")


@app.on_event("startup")
async def _startup():
    await database.connect()


@app.on_event("shutdown")
async def _shutdown():
    await database.close()


@app.get("/healthz")
def health():
    return {"ok": True}
