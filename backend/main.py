"""
Text Diff Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff
from services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Text Diff Backend...")
    config_manager = ConfigManager.get_instance()
    options = config_manager.get_diff_options()
    print(
        f"[Backend] ConfigManager initialized from {config_manager.config_file} "
        f"(similarity threshold {options.similarity_threshold}, "
        f"inline granularity {options.inline_granularity.value})"
    )

    yield
    print("[Backend] Shutting down Text Diff Backend...")


app = FastAPI(
    title="Text Diff Backend",
    description="Line and sentence diffs with inline highlighting for the text comparison UI",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the browser frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "text-diff-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))
