"""FastAPI entrypoint."""

from __future__ import annotations

from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from unified_ai_platform.assistant.chat import ChatAssistant, ChatLimits
from unified_ai_platform.assistant.explain import ExplanationRequest, Explainer
from unified_ai_platform.config.settings import AppConfig, load_config
from unified_ai_platform.core.errors import InputValidationError, PlatformError
from unified_ai_platform.core.logging import configure_logging
from unified_ai_platform.history.analytics import summarize
from unified_ai_platform.history.store import PredictionLog
from unified_ai_platform.providers.gateway import GatewayClient, GatewayConfig
from unified_ai_platform.scoring.registry import list_modules
from unified_ai_platform.service import PredictionService

logger = logging.getLogger(__name__)

ALLOWED_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _error_response(exc: PlatformError) -> JSONResponse:
    body: dict[str, object] = {"error": exc.message}
    if isinstance(exc, InputValidationError) and exc.errors:
        body["details"] = exc.errors
    return JSONResponse(body, status_code=exc.status_code)


def _as_input_error(exc: RequestValidationError) -> InputValidationError:
    """Map FastAPI's body/query validation failures onto the platform's 400 error."""

    raw = list(exc.errors())
    errors = [
        {
            "field": ".".join(str(part) for part in item.get("loc", ())) or "request",
            "message": str(item.get("msg", "invalid value")),
        }
        for item in raw
    ]
    if any(item.get("type") == "json_invalid" for item in raw):
        return InputValidationError("Invalid JSON body", errors=errors)
    fields = ", ".join(item["field"] for item in errors)
    return InputValidationError(f"Invalid request: {fields}", errors=errors)


def create_app(
    cfg: AppConfig | None = None,
    *,
    gateway: GatewayClient | None = None,
    log: PredictionLog | None = None,
) -> FastAPI:
    if cfg is None:
        cfg, _ = load_config()
    configure_logging(cfg.log_level)
    client = gateway or GatewayClient(GatewayConfig.from_app_config(cfg))
    prediction_log = log if log is not None else PredictionLog(capacity=cfg.history_limit)
    explainer = Explainer(client)
    service = PredictionService(prediction_log, explainer)
    assistant = ChatAssistant(client, ChatLimits.from_app_config(cfg))

    app = FastAPI(title="unified-ai-platform")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=ALLOWED_HEADERS,
    )
    app.state.config = cfg
    app.state.prediction_log = prediction_log

    @app.exception_handler(PlatformError)
    async def _platform_error(request: Request, exc: PlatformError) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def _request_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(_as_input_error(exc))

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/modules")
    def modules() -> list[dict[str, object]]:
        return [
            {"moduleType": item.module_type.value, "title": item.title, "fields": item.input_fields()}
            for item in list_modules()
        ]

    @app.post("/predict/{module_type}")
    def predict(module_type: str, payload: dict[str, object], explain: bool = False) -> dict[str, object]:
        return service.run(module_type, payload, explain=explain).to_payload()

    @app.post("/explain")
    def explain(payload: dict[str, object]) -> dict[str, str]:
        try:
            request = ExplanationRequest.model_validate(payload)
        except ValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err.get("loc", ())) for err in exc.errors())
            raise InputValidationError(f"Invalid explanation request: {fields}") from exc
        return {"explanation": explainer.explain(request)}

    @app.post("/chat")
    async def chat(request: Request) -> StreamingResponse:
        try:
            body = await request.json()
        except ValueError as exc:
            raise InputValidationError("Invalid JSON body") from exc
        chunks = await run_in_threadpool(assistant.stream_reply, body)
        return StreamingResponse(chunks, media_type="text/event-stream")

    @app.get("/predictions")
    def predictions(limit: int | None = None) -> list[dict[str, object]]:
        size = cfg.history_limit if limit is None else max(0, min(limit, cfg.history_limit))
        return [item.to_payload() for item in prediction_log.recent(size)]

    @app.get("/analytics")
    def analytics() -> dict[str, object]:
        today = datetime.now(tz=timezone.utc).date()
        return summarize(prediction_log.recent(cfg.history_limit), today).to_payload()

    return app


app = create_app()
