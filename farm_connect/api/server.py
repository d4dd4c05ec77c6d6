import time
import traceback
import uuid
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import List, Literal, Optional

from fastapi import Depends, FastAPI, File, Header, Query, Request, Response, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..application.assistants import list_assistant_contexts
from ..application.dashboard import (
    Dashboard,
    UnknownAssistantError,
    UnknownPanelError,
    UnknownSessionError,
)
from ..application.images import encode_image
from ..application.panels import CROP_DOCTOR, describe_panel, list_panel_specs
from ..data import (
    FINANCIAL_NEEDS,
    SOIL_TYPES,
    market_crops,
    mock_weather,
    search_market_prices,
    search_schemes,
)
from ..domain.errors import (
    CredentialMissingError,
    InvalidFieldError,
    MediatorBusyError,
    SessionUnavailableError,
)
from ..infra.config import get_config
from ..infra.llm import ensure_credentials
from ..infra.session_store import MemoryDashboardStore, build_dashboard_store
from ..observability.logging_utils import init_logging, log_event, log_failure, trace_scope
from ..observability.otel import init_otel, instrument_fastapi
from ..schemas.models import ChatMessageRequest, PanelInfo, PanelSubmission


CLIENT_ID_HEADER = "X-Session-Id"


@lru_cache(maxsize=1)
def get_dashboard_store() -> MemoryDashboardStore[Dashboard]:
    return build_dashboard_store(Dashboard)


def get_dashboard(
    response: Response,
    x_session_id: Optional[str] = Header(default=None, alias=CLIENT_ID_HEADER),
) -> Dashboard:
    """Resolve the caller's dashboard; header-less callers get a fresh client id."""
    client_id = (x_session_id or "").strip() or uuid.uuid4().hex
    response.headers[CLIENT_ID_HEADER] = client_id
    return get_dashboard_store().get_or_create(client_id)


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


@asynccontextmanager
async def lifespan(_: FastAPI):
    cfg = get_config()
    init_logging(log_path=cfg.log_path)
    log_event("api_started", llm=cfg.llm_provider, port=cfg.fastapi_port)
    try:
        ensure_credentials()
    except (CredentialMissingError, ValueError) as exc:
        log_failure("llm_unavailable", llm=cfg.llm_provider, error=str(exc))
    yield


app = FastAPI(title="Farm Connect", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[CLIENT_ID_HEADER, "X-Trace-Id"],
)
if init_otel():
    instrument_fastapi(app)


@app.middleware("http")
async def _trace_requests(request: Request, call_next):
    with trace_scope(request.headers.get("X-Trace-Id")) as trace_id:
        started = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        log_event(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return response


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": {"error": message}})


@app.exception_handler(UnknownPanelError)
async def _unknown_panel(_: Request, exc: UnknownPanelError):
    return _error(404, f"Unknown panel: {exc.args[0]}")


@app.exception_handler(UnknownAssistantError)
async def _unknown_assistant(_: Request, exc: UnknownAssistantError):
    return _error(404, f"Unknown assistant: {exc.args[0]}")


@app.exception_handler(UnknownSessionError)
async def _unknown_session(_: Request, exc: UnknownSessionError):
    return _error(404, f"Unknown session: {exc.args[0]}")


@app.exception_handler(MediatorBusyError)
async def _busy(_: Request, exc: MediatorBusyError):
    return _error(409, str(exc))


@app.exception_handler(SessionUnavailableError)
async def _session_unavailable(_: Request, exc: SessionUnavailableError):
    return _error(503, str(exc))


@app.exception_handler(InvalidFieldError)
async def _invalid_field(_: Request, exc: InvalidFieldError):
    return JSONResponse(
        status_code=422,
        content={"detail": {"error": str(exc), "field": exc.field}},
    )


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    log_failure("unhandled_error", path=request.url.path, error=str(exc), traceback=tb)
    return _error(500, str(exc))


@app.get("/health")
async def health():
    cfg = get_config()
    return {"status": "ok", "llm": cfg.llm_provider}


# ---- panels ----


@app.get("/api/v1/panels", response_model=List[PanelInfo])
async def list_panels():
    return [describe_panel(spec) for spec in list_panel_specs()]


@app.get("/api/v1/panels/{panel}")
async def panel_snapshot(panel: str, dashboard: Dashboard = Depends(get_dashboard)):
    return _dump(dashboard.snapshot(panel))


@app.post("/api/v1/panels/{panel}")
async def submit_panel(
    panel: str,
    submission: PanelSubmission,
    dashboard: Dashboard = Depends(get_dashboard),
):
    return _dump(await dashboard.submit(panel, submission.fields))


@app.post(f"/api/v1/panels/{CROP_DOCTOR}/image")
async def submit_crop_image(
    image: UploadFile = File(...),
    dashboard: Dashboard = Depends(get_dashboard),
):
    content = await image.read()
    payload = encode_image(content, image.content_type) if content else None
    return _dump(await dashboard.submit(CROP_DOCTOR, {"image": payload}))


# ---- reference data ----


@app.get("/api/v1/schemes")
async def list_schemes(
    q: str = "",
    scope: Literal["central", "state", "all"] = Query(default="all"),
):
    return [_dump(scheme) for scheme in search_schemes(q, scope)]


@app.get("/api/v1/market/prices")
async def list_market_prices(q: str = ""):
    return [_dump(price) for price in search_market_prices(q)]


@app.get("/api/v1/market/crops")
async def list_market_crops():
    return list(market_crops())


@app.get("/api/v1/weather")
async def weather(location: str = ""):
    return _dump(mock_weather(location))


@app.get("/api/v1/reference/soil-types")
async def soil_types():
    return list(SOIL_TYPES)


@app.get("/api/v1/reference/financial-needs")
async def financial_needs():
    return [_dump(need) for need in FINANCIAL_NEEDS]


# ---- assistants ----


@app.get("/api/v1/assistants")
async def list_assistants():
    return [{"name": ctx.name, "title": ctx.title} for ctx in list_assistant_contexts()]


@app.post("/api/v1/assistants/{assistant}/sessions", status_code=201)
async def open_session(assistant: str, dashboard: Dashboard = Depends(get_dashboard)):
    session_id, _ = dashboard.open_session(assistant)
    return _dump(dashboard.session_view(session_id))


@app.post("/api/v1/sessions/{session_id}/messages")
async def send_message(
    session_id: str,
    request: ChatMessageRequest,
    dashboard: Dashboard = Depends(get_dashboard),
):
    return _dump(await dashboard.send(session_id, request.message))


@app.get("/api/v1/sessions/{session_id}")
async def session_view(session_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    return _dump(dashboard.session_view(session_id))


@app.delete("/api/v1/sessions/{session_id}", status_code=204)
async def close_session(session_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.close_session(session_id)
