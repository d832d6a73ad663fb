"""
Morse Translator API Server.

Run with: uvicorn morse.server.main:app --port 8000
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from morse.config import APP_NAME, APP_VERSION, CORS_ORIGINS, LOG_LEVEL
from morse.core.translator import Translator
from morse.server.routes import translate, mappings, history


logger = logging.getLogger(__name__)


def route_table(app: FastAPI) -> list[str]:
    """Endpoint listing grouped by router tag, with each handler's summary."""
    groups: dict[str, list[tuple[str, str, str]]] = {}
    for route in app.routes:
        if not isinstance(route, APIRoute):
            continue
        tag = route.tags[0] if route.tags else "app"
        method = "/".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
        summary = (route.description or route.name).strip().splitlines()[0]
        groups.setdefault(tag, []).append((route.path, method, summary))
    
    translator = app.state.translator
    lines = [f"{APP_NAME} {APP_VERSION}: {translator.mapping_count()} mappings loaded"]
    for tag in sorted(groups):
        lines.append(f"[{tag}]")
        for path, method, summary in sorted(groups[tag]):
            lines.append(f"  {method:6} {path:24} {summary}")
    return lines


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=LOG_LEVEL)
    print("\n".join(route_table(app)))
    yield
    logger.info("Shutting down with %d history records", len(app.state.translator.list_history()))


def create_app(translator: Translator | None = None) -> FastAPI:
    """Build the API around one translator session."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION, lifespan=lifespan)
    app.state.translator = translator if translator is not None else Translator()
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    app.include_router(translate.router)
    app.include_router(mappings.router)
    app.include_router(history.router)
    
    @app.get("/")
    async def root():
        return {"name": APP_NAME, "version": APP_VERSION}
    
    return app


app = create_app()
