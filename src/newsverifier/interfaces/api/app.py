"""FastAPI application exposing the analysis endpoint."""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response

from ... import __version__
from ...application.verifier import NewsVerifierService, create_verifier_service
from ...config.logging import configure_logging
from ...domain.errors import MethodNotAllowedError, error_response
from ...domain.models import AnalysisRequest

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
}

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_service_factory() -> Callable[[], NewsVerifierService]:
    """Service builder, invoked per request so configuration is read at call time."""
    return create_verifier_service


async def _read_body(request: Request) -> Dict[str, Any]:
    """Decode the JSON body; anything other than an object counts as empty."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


def _json(status_code: int, content: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    yield


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(title="News Verifier", version=__version__, lifespan=_lifespan)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.api_route("/api/analyze", methods=ROUTED_METHODS)
    async def analyze(
        request: Request,
        build_service: Callable[[], NewsVerifierService] = Depends(get_service_factory),
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        try:
            if request.method != "POST":
                raise MethodNotAllowedError()
            payload = AnalysisRequest.model_validate(await _read_body(request))
            result = await build_service().analyze(payload)
        except Exception as e:
            status, body = error_response(e)
            if status >= 500:
                logger.exception("Analysis failed")
            else:
                logger.info("Rejected request with %d: %s", status, body.get("error"))
            return _json(status, body)

        return _json(200, result.to_payload())

    return app


app = create_app()
