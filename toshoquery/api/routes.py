import json
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from toshoquery.config.settings import settings
from toshoquery.core.errors import ToshoQueryError, UpstreamError
from toshoquery.core.query import generate_sphinx_query
from toshoquery.services.search import search_service
from toshoquery.utils.http_client import http_client
from toshoquery.utils.logger import api_logger


# ===========================
# Router Instance
# ===========================
router = APIRouter()


# ===========================
# Error Responses
# ===========================
def error_response(error: Exception) -> JSONResponse:
    status_code = 400
    if settings.DISTINCT_ERROR_STATUS and isinstance(error, UpstreamError):
        status_code = 502

    message = error.message if isinstance(error, ToshoQueryError) else str(error)
    return JSONResponse(status_code=status_code, content={"error": message})


# ===========================
# Acknowledgement Endpoint
# ===========================
@router.get("/", summary="Home", description="Plain text acknowledgement")
async def root():
    return PlainTextResponse("hello")


# ===========================
# Query Endpoints
# ===========================
@router.post("/query",
             summary="Generate query",
             description="Builds the search query for a title, season and episode")
async def build_query(request: Request):
    try:
        raw_body = await request.body()
        body = json.loads(raw_body) if raw_body else {}
        if not isinstance(body, dict):
            body = {}

        query = generate_sphinx_query(
            body.get("title"),
            body.get("season"),
            body.get("episode"),
            body.get("options")
        )
        return JSONResponse(content={"query": query})

    except ToshoQueryError as e:
        api_logger.debug(f"Query rejected: {e.message}")
        return error_response(e)
    except json.JSONDecodeError as e:
        api_logger.debug("Query rejected: invalid JSON body")
        return error_response(e)
    except Exception as e:
        api_logger.error(f"Query failed: {type(e).__name__}")
        return error_response(e)


@router.get("/search",
            summary="Search releases",
            description="Searches Anime Tosho for an episode and returns the scraped releases")
async def search(request: Request):
    try:
        status_code, payload = await search_service.search_params(request.query_params)
        return JSONResponse(status_code=status_code, content=payload)

    except ToshoQueryError as e:
        api_logger.debug(f"Search failed: {e.message}")
        return error_response(e)
    except Exception as e:
        api_logger.error(f"Search failed: {type(e).__name__}")
        return error_response(e)


# ===========================
# Health Check Endpoint
# ===========================
@router.get("/health",
            summary="Health check",
            description="Returns the current health status of the service")
async def health_check():
    start_time = time.time()
    health_status = {
        "status": "healthy",
        "version": settings.VERSION,
        "timestamp": int(time.time()),
        "checks": {}
    }

    health_status["checks"]["server"] = {
        "status": "ok",
        "message": "Server running"
    }

    upstream_start = time.time()
    try:
        response = await http_client.get(settings.SEARCH_BASE_URL, timeout=settings.HEALTH_CHECK_TIMEOUT)
        upstream_time = round((time.time() - upstream_start) * 1000)

        if response.status_code == 200:
            health_status["checks"]["upstream"] = {
                "status": "ok",
                "message": "Anime Tosho accessible",
                "response_time_ms": upstream_time
            }
        else:
            health_status["checks"]["upstream"] = {
                "status": "error",
                "message": f"Anime Tosho HTTP {response.status_code}",
                "response_time_ms": upstream_time
            }
            health_status["status"] = "degraded"

    except Exception as e:
        upstream_time = round((time.time() - upstream_start) * 1000)
        health_status["checks"]["upstream"] = {
            "status": "error",
            "message": f"Anime Tosho unreachable: {str(e)}",
            "response_time_ms": upstream_time
        }
        health_status["status"] = "unhealthy"

    total_time = round((time.time() - start_time) * 1000)
    health_status["total_response_time_ms"] = total_time

    return health_status
