"""
SkillPath - Main API Server
Generates structured learning paths from a list of skills using Google Gemini,
with a canned demo path when no model is available.
"""

import logging
import asyncio
import sys
import os
from contextlib import asynccontextmanager
from typing import Callable, Optional
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from concurrent.futures import ThreadPoolExecutor
from starlette.exceptions import HTTPException as StarletteHTTPException

# Add current directory to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import config
from models.schemas import GeneratePathRequest, HealthResponse
from services.errors import PathValidationError
from services.gemini_client import ProviderClient, build_provider_client
from services.model_resolver import ModelResolver
from services.path_service import LearningPathService

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

# Thread pool for blocking SDK calls
executor = ThreadPoolExecutor()

ClientFactory = Callable[[Optional[str], str], Optional[ProviderClient]]


def create_app(
    api_key: Optional[str] = config.GEMINI_API_KEY,
    sdk: str = config.GEMINI_SDK,
    client_factory: ClientFactory = build_provider_client,
    static_dir: str = config.STATIC_DIR,
) -> FastAPI:
    """Build the API. The model is resolved once, before any request is served."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not api_key:
            logging.warning("⚠️ No GEMINI_API_KEY found, running in demo mode.")
        provider_client = client_factory(api_key, sdk)
        resolved_model = ModelResolver(provider_client).resolve()

        app.state.provider_client = provider_client
        app.state.resolved_model = resolved_model
        app.state.path_service = LearningPathService(resolved_model)
        yield

    app = FastAPI(
        title="SkillPath API",
        description="AI-generated learning paths for any set of skills.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"success": False, "error": "Invalid request body"})

    # ===== API ENDPOINTS =====

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        resolved_model = app.state.resolved_model
        return HealthResponse(
            hasApiKey=bool(api_key),
            model=resolved_model.identifier if resolved_model else None,
        )

    @app.get("/api/models")
    async def list_models():
        """List the models the configured account can use."""
        if not api_key:
            raise HTTPException(status_code=400, detail="No API key set")

        provider_client = app.state.provider_client
        if provider_client is None:
            raise HTTPException(status_code=500, detail="Gemini client is not available")

        strategy = provider_client.discovery_strategy()
        if strategy is None:
            raise HTTPException(status_code=400, detail="listModels not supported in this SDK version")

        loop = asyncio.get_event_loop()
        result = await loop.run_in_executor(executor, strategy.list_models)
        if not result.ok:
            raise HTTPException(status_code=500, detail=result.error)

        return {"success": True, "models": [m.raw_metadata for m in result.models]}

    @app.post("/api/generate-path")
    async def generate_path(request: GeneratePathRequest):
        """Generate a learning path for the requested skills."""
        try:
            result = await app.state.path_service.generate_path(request.skills)
        except PathValidationError as e:
            raise HTTPException(status_code=400, detail=str(e))

        status_code = 200 if result.success else 500
        return JSONResponse(status_code=status_code, content=result.to_response())

    # ===== WEB INTERFACE =====

    static_root = os.path.realpath(static_dir)

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_front_end(full_path: str):
        """Serve files from the static directory at the site root, index.html otherwise."""
        asset_path = os.path.realpath(os.path.join(static_root, full_path))
        if asset_path.startswith(static_root + os.sep) and os.path.isfile(asset_path):
            return FileResponse(asset_path)

        index_path = os.path.join(static_root, "index.html")
        if not os.path.exists(index_path):
            raise HTTPException(status_code=404, detail="Front-end not found")
        return FileResponse(index_path)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
