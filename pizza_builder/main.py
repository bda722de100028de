# Load environment variables FIRST, before any module imports that need them
from dotenv import load_dotenv
load_dotenv()

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from . import db
from .config import CORS_ORIGINS
from .logging_config import setup_logging
from .routes import (
    pizza_router,
    limiter,
    admin_customizations_router,
    admin_configurations_router,
)

# Configure logging at module load time
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tables are created on startup; there are no migrations to run
    db.init_db()
    logger.info("Pizza Builder API started")
    yield


app = FastAPI(
    title="Pizza Builder API",
    description="API for configuring, validating and pricing customizable pizzas",
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Health", "description": "Health check endpoints"},
        {"name": "Pizza", "description": "Pick lists, quotes and submission checks"},
        {"name": "Admin - Pizza Customizations", "description": "Flavor and ingredient catalog"},
        {"name": "Admin - Pizza Configurations", "description": "Per-product topping pricing"},
    ],
)


# ---------- Request ID Middleware ----------
# Adds a unique request ID to each request for debugging and log correlation


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each request.
    The ID is available in request.state.request_id and returned in X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID (or use one from header if provided)
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        return response


app.add_middleware(RequestIDMiddleware)

# Add rate limit exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# In production, set CORS_ORIGINS to restrict allowed origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Health ----------


@app.get("/health", tags=["Health"])
def health() -> Dict[str, str]:
    """Health check endpoint. Returns ok if the service is running."""
    return {"status": "ok"}


# ---------- Routers ----------

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(pizza_router)
api_v1_router.include_router(admin_customizations_router)
api_v1_router.include_router(admin_configurations_router)

app.include_router(api_v1_router)

# Root paths
app.include_router(pizza_router)
app.include_router(admin_customizations_router)
app.include_router(admin_configurations_router)
