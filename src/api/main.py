"""
Serving Layer API
FastAPI application exposing contest sentiment analysis
"""

import os
import time
from datetime import datetime
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from config.settings import get_config
from src.utils.logging_config import setup_logging, get_logger
from src.models.data_models import AnalysisRequest, AnalysisStatus, ErrorResponse
from src.pipeline.orchestrator import ContestAnalyzer, create_contest_analyzer


ANALYZE_ENDPOINT = "/api/analyze"
NOT_FOUND_MESSAGE = "No comments found for the inferred subreddit."

# Prometheus metrics
REQUEST_COUNT = Counter(
    "api_requests_total", "Total API requests", ["method", "endpoint", "status"]
)

REQUEST_LATENCY = Histogram(
    "api_request_latency_seconds", "Request latency in seconds", ["method", "endpoint"]
)


# Global analyzer instance, built once in lifespan
analyzer: Optional[ContestAnalyzer] = None

logger = get_logger("ServingAPI")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    global analyzer

    config = get_config()
    setup_logging(
        log_level=config.log_level,
        json_format=config.json_logs,
        service_name="contest-pulse-api",
    )

    get_logger("main").info("Starting Contest Pulse API...")

    if analyzer is None:
        analyzer = create_contest_analyzer(config)

    yield

    get_logger("main").info("Contest Pulse API shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Contest Pulse API",
    description="Reddit sentiment and topics for a contest",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = "; ".join(error["msg"] for error in exc.errors())
    REQUEST_COUNT.labels(
        method=request.method, endpoint=request.url.path, status="invalid"
    ).inc()
    return error_response(422, messages or "Invalid request")


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": datetime.utcnow().isoformat()}


# Metrics endpoint
@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


# Analysis endpoint
@app.post(ANALYZE_ENDPOINT)
def analyze_contest(request: AnalysisRequest):
    """Infer a subreddit for the contest and summarize its comments"""
    start = time.time()

    try:
        outcome = analyzer.analyze(request.contest)
    except Exception as e:
        logger.error(f"Error processing request: {e}")
        REQUEST_COUNT.labels(method="POST", endpoint=ANALYZE_ENDPOINT, status="error").inc()
        return error_response(500, str(e))
    finally:
        REQUEST_LATENCY.labels(method="POST", endpoint=ANALYZE_ENDPOINT).observe(
            time.time() - start
        )

    if outcome.status == AnalysisStatus.NOT_FOUND:
        REQUEST_COUNT.labels(method="POST", endpoint=ANALYZE_ENDPOINT, status="not_found").inc()
        return error_response(404, NOT_FOUND_MESSAGE)

    REQUEST_COUNT.labels(method="POST", endpoint=ANALYZE_ENDPOINT, status="success").inc()
    return outcome.result.model_dump(mode="json")


def mount_static(app: FastAPI, directory: str) -> bool:
    """Serve the front end from directory after the API routes, if it exists"""
    if not os.path.isdir(directory):
        return False
    app.mount("/", StaticFiles(directory=directory, html=True), name="static")
    return True


mount_static(app, get_config().server.static_dir)


def main():
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
