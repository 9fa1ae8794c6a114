"""
Resume Parser - Main FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from resume_parser.core.config import settings
from resume_parser.core.logging_config import configure_logging
from resume_parser.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
    error_envelope,
)
from resume_parser.core.exceptions import ResumeParserException
from resume_parser.resumes.router import router as resumes_router

# Configure logging
configure_logging()
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Heuristic resume parsing service",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Add middleware
app.add_middleware(ExceptionHandlerMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(ResumeParserException)
async def resume_parser_exception_handler(request: Request, exc: ResumeParserException):
    """Render service exceptions as the error envelope"""
    logger.warning(
        "request_rejected",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.error,
        reason=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.error, exc.message),
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "OK", "message": "Server is running"}


# Include routers
app.include_router(resumes_router)


@app.on_event("startup")
async def startup_event():
    logger.info(
        "application_starting",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        cors_origins=settings.cors_origins_list,
    )


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("application_shutting_down")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "resume_parser.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
