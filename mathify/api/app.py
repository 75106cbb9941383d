"""
mathify/api/app.py
FastAPI application factory. Mounts middleware and all routers.
This is the only place that wires layers together.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mathify.api.routes import analysis, questions
from mathify.config import VERSION, configure_logging


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Mathify API",
        version=VERSION,
        description="Adaptive curriculum engine: progress analysis and curriculum-aware practice questions.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(analysis.router, tags=["Analysis"])
    app.include_router(questions.router, tags=["Questions"])

    @app.get("/health")
    def health():
        return {"status": "ok", "version": VERSION}

    return app
