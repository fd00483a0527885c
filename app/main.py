from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.routers.billing import router as billing_router
from .api.routers.profiles import router as profiles_router
from .shared.config import get_settings


settings = get_settings()
logging.getLogger("app").setLevel(settings.log_level)

app = FastAPI(title="Credits API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if exc.status_code == 405:
        detail = f"Method {request.method} Not Allowed"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    _ = request
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request body.", "detail": jsonable_encoder(exc.errors())},
    )


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(billing_router)
app.include_router(profiles_router)
