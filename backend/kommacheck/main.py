from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kommacheck.api.router import api_router
from kommacheck.core.config import Settings, load_settings
from kommacheck.core.logging import configure_logging
from kommacheck.nlp.adapter import NLPAdapter
from kommacheck.services.use_cases import build_rules

logger = logging.getLogger(__name__)


def _default_nlp_adapter_factory(settings: Settings) -> NLPAdapter:
    # Import lazily so missing NLP dependencies degrade health instead of crashing import.
    from kommacheck.nlp.german import load_german_nlp_adapter

    return load_german_nlp_adapter(settings)


def create_app(
    settings: Settings | None = None,
    nlp_adapter_factory: Callable[[Settings], NLPAdapter] = _default_nlp_adapter_factory,
) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        adapter: NLPAdapter | None = None
        try:
            adapter = nlp_adapter_factory(app_settings)
            app.state.nlp_ready = True
            app.state.nlp_error = None
        except Exception as exc:
            app.state.nlp_ready = False
            app.state.nlp_error = str(exc)
            logger.exception(
                "backend_nlp_startup_failed",
                extra={"nlp_model": app_settings.nlp_model},
            )
        app.state.nlp_adapter = adapter

        logger.info(
            "backend_startup",
            extra={
                "status": "ok" if app.state.nlp_ready else "degraded",
                "environment": app_settings.environment,
                "host": app_settings.host,
                "port": app_settings.port,
                "nlp_error": app.state.nlp_error,
                "nlp": adapter.metadata() if adapter else None,
                "rules": [rule.rule_id for rule in app.state.rules],
            },
        )
        yield

    app = FastAPI(title="Kommacheck Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.nlp_ready = False
    app.state.nlp_error = None
    app.state.nlp_adapter = None
    app.state.rules = build_rules(app_settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
