"""Cache control API - FastAPI application"""
import os
from datetime import datetime

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.exceptions import CacheControlException, get_status_code
from ..core.logging_config import get_logger, setup_logging
from .routers import admin_cache

# Load environment variables from .env file
load_dotenv()

# Re-apply logging now that .env is loaded
setup_logging()
logger = get_logger(__name__)

app = FastAPI(title="wp-cache-control", version=__version__)


@app.exception_handler(CacheControlException)
async def cache_control_exception_handler(request: Request, exc: CacheControlException):
    """Handle application exceptions"""
    logger.warning(exc.message, extra={"error": exc.__class__.__name__, "route": request.url.path})
    return JSONResponse(status_code=get_status_code(exc), content=exc.to_dict())


app.include_router(admin_cache.router, prefix="/admin/cache", tags=["Admin Cache"])


@app.get("/stats/health")
def health_check():
    """Health check endpoint"""
    return JSONResponse(
        {"status": "healthy", "timestamp": datetime.now().isoformat(), "version": __version__}
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wp_cache_control.api.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
    )
