"""
Installer FastAPI Application

Main entry point for the setup wizard: language selection pages,
the scripted install API and theme fragments.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from common.utils import success_response
from installer.config import settings
from installer.dependencies import init_all_services, get_i18n_middleware
from installer.routers import (
    installer_router,
    install_api_router,
    theme_router,
)


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Initializes services before the first request.
    """
    # Startup
    print("Starting installer...")

    init_all_services(settings)
    print(f"Translations directory: {settings.TRANSLATIONS_PATH}")

    print("Installer started successfully!")

    yield

    # Shutdown
    print("Installer shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Installer",
    description="Setup wizard language selection and theme helpers",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# i18n Middleware
# =============================================================================
@app.middleware("http")
async def i18n_middleware(request: Request, call_next):
    """Attach request.state.language and request.state.t."""
    return await get_i18n_middleware()(request, call_next)


# =============================================================================
# Include Routers
# =============================================================================
API_PREFIX = "/api"

app.include_router(installer_router)
app.include_router(install_api_router, prefix=API_PREFIX)
app.include_router(theme_router)


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API.
    """
    return success_response({
        "status": "ok",
        "version": "1.0.0",
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
