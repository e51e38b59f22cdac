"""
Gauge HTTP Service
===================

FastAPI application exposing the password analysis over HTTP.

Endpoints::

    POST    /analyze   password=<value> (query string or form body)
    OPTIONS /analyze   CORS preflight
    GET     /health    liveness probe

Response body::

    { "strength": "Weak" | "Moderate" | "Strong" | "N/A",
      "suggestion": "<text>" }

Run with::

    passgauge serve --host 0.0.0.0 --port 5000
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from shared.config import GaugeConfig
from shared.logger import GaugeLogger

from gauge import __version__
from gauge.core.engine import GaugeEngine
from gauge.core.models import AnalyzeResponse

EMPTY_PASSWORD_RESPONSE = AnalyzeResponse(
    strength="N/A",
    suggestion="Enter a password.",
)


async def _extract_password(request: Request) -> str:
    """Read ``password`` from the query string, falling back to the form body."""
    if "password" in request.query_params:
        return request.query_params["password"]
    form = await request.form()
    value = form.get("password")
    return value if isinstance(value, str) else ""


def create_app(
    config: Optional[GaugeConfig] = None,
    engine: Optional[GaugeEngine] = None,
) -> FastAPI:
    """Create the FastAPI application.

    The engine, and with it the weak-token index, is built once here and
    shared by every request.
    """
    config = config or GaugeConfig()
    logger = GaugeLogger.from_config("server", config.global_settings)

    app = FastAPI(
        title="PassGauge",
        description="Password strength analysis with improvement suggestions",
        version=__version__,
    )
    app.state.engine = engine or GaugeEngine(config)
    app.state.logger = logger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    @app.options("/analyze")
    async def analyze_options() -> Response:
        """Answer non-CORS OPTIONS requests with an empty 200."""
        return Response(status_code=200)

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze(request: Request) -> AnalyzeResponse:
        """Analyse the submitted password.

        - **password**: candidate password, as a form field or query
          parameter. An empty or missing value yields strength ``N/A``.
        """
        password = await _extract_password(request)
        if not password:
            logger.info("Rejected request without password")
            return EMPTY_PASSWORD_RESPONSE

        try:
            result = request.app.state.engine.analyze(password)
        except Exception as exc:
            logger.exception("Password analysis failed")
            raise HTTPException(status_code=500, detail="Password analysis failed") from exc

        logger.info("Analysis served", strength=result.strength.value)
        return AnalyzeResponse(
            strength=result.strength.value,
            suggestion=result.suggestion,
        )

    return app
