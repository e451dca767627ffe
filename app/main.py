# /app/main.py

import sys

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from .core.config import CORS_ORIGINS, LOG_LEVEL
from .core.errors import OjtError

# --- Application-specific Router Imports ---
from .routers import (
    classrooms_router,
    professor_router,
    reports_router,
    student_router,
    users_router,
)

# --- Logging ---
logger.remove()
logger.add(sys.stderr, level=LOG_LEVEL)

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="OJT Tracker API",
    description="Classrooms, hour logging, report review and progress tracking for On-the-Job-Training programs.",
    version="1.0.0",
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Handling ---
# Every failure leaves the API as {"message": ...}; no stack trace reaches the client.

@app.exception_handler(OjtError)
async def ojt_error_handler(request: Request, exc: OjtError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid request data"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Error in {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": "Internal Server Error"})


# --- API Router Inclusion ---
app.include_router(classrooms_router.router, prefix="/api/admin/companies/classrooms", tags=["Classrooms"])
app.include_router(professor_router.router, prefix="/api/prof", tags=["Professor"])
app.include_router(reports_router.router, prefix="/api/prof/reports", tags=["Reports"])
app.include_router(student_router.router, prefix="/api/student", tags=["Student"])
app.include_router(users_router.router, prefix="/api/users", tags=["Users"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "OJT Tracker is running!", "version": app.version}
