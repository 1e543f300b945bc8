"""
Text Diff Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff, view
from services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    # Startup: Initialize singleton services
    print("[Backend] Starting Text Diff Backend...")
    config_manager = ConfigManager.get_instance()
    engine = config_manager.get_config().get("engine", {})
    print(f"[Backend] ConfigManager initialized ({config_manager.config_file})")
    print(f"[Backend] Default LCS algorithm: {engine.get('algorithm', 'hirschberg')}")

    yield
    # Shutdown: Cleanup
    print("[Backend] Shutting down Text Diff Backend...")


app = FastAPI(
    title="Text Diff Backend",
    description="Token-level text comparison using longest common subsequences",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for pages served from other local origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(view.router, tags=["view"])
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "textdiff-backend"}


def run():
    """Serve the app with the configured host and port"""
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=int(server.get("port", 8000)))


if __name__ == "__main__":
    run()
