"""
FastAPI Main Application
"""
import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storyweaver.dependencies import close_completion_provider
from storyweaver.exceptions import ConfigurationError, InvalidStoryRequest
from storyweaver.routes.health import router as health_router
from storyweaver.routes.stories import router as stories_router
from storyweaver.validation import flatten_errors

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log which settings are present (never their values); close the provider on shutdown"""
    logger.info("Starting StoryWeaver...")
    for key in ("GAIA_API_ENDPOINT", "GAIA_API_MODEL", "GAIA_API_TIMEOUT"):
        logger.info(f"{key}: {os.getenv(key) or '(default)'}")
    logger.info(f"GAIA_API_KEY: {'✓ SET' if os.getenv('GAIA_API_KEY') else '✗ NOT SET'}")
    yield
    await close_completion_provider()
    logger.info("StoryWeaver stopped")


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": flatten_errors(exc.errors())},
    )


async def invalid_story_request_handler(request: Request, exc: InvalidStoryRequest):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": exc.details},
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="StoryWeaver API",
        description="Turns story ideas into finished stories with an OpenAI-compatible LLM",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(InvalidStoryRequest, invalid_story_request_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    app.include_router(health_router, tags=["health"])
    app.include_router(stories_router, prefix="/api", tags=["stories"])
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
