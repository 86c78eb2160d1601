import os
import time
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from routes import health, auth, profile_routes, scholarship_routes, match_routes, guidance_routes, dashboard_routes
from services.storage_svc import StorageError, STORAGE_BACKEND, init_storage
from services.ai_client import init_ai_provider
from services import scholarship_svc

# --- Logging ---
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("scholarship_match")

# --- Storage & AI provider (selected once, startup-fatal when misconfigured) ---
storage = init_storage(STORAGE_BACKEND)
# Persistent deployments must have a real provider key; memory mode may run on fallback scores
init_ai_provider(require_key=STORAGE_BACKEND == "firestore")

# CORS origins from environment
cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
seed_on_startup = os.getenv("SEED_ON_STARTUP", "true").lower() in ("1", "true", "yes")

# --- FastAPI app ---
app = FastAPI(
    title="Scholarship Match API",
    description="Student profiles, AI scholarship matching, application guidance and deadline tracking",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    path = request.url.path
    if path.startswith("/api"):
        duration_ms = int((time.perf_counter() - start) * 1000)
        line = f"{request.method} {path} {response.status_code} in {duration_ms}ms"
        if len(line) > 120:
            line = line[:119] + "…"
        logger.info(line)
    return response


# ==================== Error Handlers ====================

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"detail": message})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"[SERVER ERROR] {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# ==================== Startup Event ====================

@app.on_event("startup")
async def startup_event():
    """Load the demo catalog so the first request finds scholarships."""
    logger.info("🚀 Starting Scholarship Match API...")
    if not seed_on_startup:
        return
    try:
        scholarship_svc.ensure_catalog(storage)
        logger.info("✅ Scholarship catalog ready")
    except StorageError as e:
        logger.warning(f"⚠️  Catalog seeding failed: {e}")
        logger.warning("   Catalog will be seeded on first request")


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(profile_routes.router, prefix="/api/profile", tags=["profiles"])
app.include_router(scholarship_routes.router, prefix="/api/scholarships", tags=["scholarships"])
app.include_router(match_routes.router, prefix="/api/matches", tags=["matches"])
app.include_router(guidance_routes.router, prefix="/api/guidance", tags=["guidance"])
app.include_router(dashboard_routes.router, prefix="/api/dashboard", tags=["dashboard"])


@app.get("/", tags=["root"])
def root():
    return {
        "message": "Scholarship Match API",
        "docs": "/docs",
        "health": "/health/live",
    }
