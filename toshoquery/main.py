import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from toshoquery.api.routes import router
from toshoquery.config.settings import settings
from toshoquery.utils.http_client import http_client
from toshoquery.utils.logger import setup_logger, app_logger, api_logger


# ===========================
# Logger Setup
# ===========================
setup_logger(settings.LOG_LEVEL)


# ===========================
# Custom Middleware
# ===========================
class LoguruMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        response = None
        try:
            response = await call_next(request)
        except Exception as e:
            api_logger.error(f"Exception: {type(e).__name__}")
            raise
        finally:
            process_time = time.time() - start_time
            if request.url.path != "/health":
                status_code = response.status_code if response is not None else 500
                api_logger.debug(f"{request.method} {request.url.path} - {status_code} - {process_time:.2f}s")
        return response


# ===========================
# Application Lifecycle
# ===========================
@asynccontextmanager
async def lifespan(app: FastAPI):
    app_logger.info(f"{settings.APP_NAME} ready")

    yield

    app_logger.info("Closing server")
    await http_client.close()


# ===========================
# FastAPI Application Setup
# ===========================
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    lifespan=lifespan
)

app.add_middleware(LoguruMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


# ===========================
# Application Entry Point
# ===========================
def run():
    app_logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION}")
    app_logger.info(f"Server: http://localhost:{settings.PORT}/")
    app_logger.info(f"Upstream: {settings.SEARCH_BASE_URL}")
    app_logger.info(f"Proxy: {'enabled' if settings.PROXY_URL else 'disabled'}")
    app_logger.info(f"Log level: {settings.LOG_LEVEL}")

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.PORT,
        log_config=None
    )


if __name__ == "__main__":
    run()
