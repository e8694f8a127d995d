import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from spaice.core.config import get_settings
from spaice.core.logging_config import setup_logging
from spaice.integrations.llm import ModelDispatcher
from spaice.integrations.prompts import build_prompt_store
from spaice.modules.generation.router import router as generation_router
from spaice.modules.prompt.router import router as prompt_router

# Configure logging on application start
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: settings, prompt store (static prompts + saved edits), model dispatcher."""
    settings = get_settings()
    app.state.prompt_store = build_prompt_store(settings)
    app.state.model_dispatcher = ModelDispatcher(settings)
    yield


app = FastAPI(
    title="Sales SPAICE API",
    description="Prompt library and LLM-backed sales document generation",
    version="1.0.0",
    lifespan=lifespan,
)

# Allowed CORS origins from the environment
cors_origins_str = os.getenv(
    "CORS_ALLOW_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173"  # local development default
)

allowed_origins = [origin.strip() for origin in cors_origins_str.split(",") if origin.strip()]

# CORS middleware goes in before the routers
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(prompt_router)
app.include_router(generation_router)


@app.get("/api", response_class=PlainTextResponse)
def spaice() -> str:
    return "Sales SPAICE"
