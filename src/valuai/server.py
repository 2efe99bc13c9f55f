"""FastAPI server -- JSON API around the engine + SQLite persistence.

Routes
------
GET    /health                    -> liveness probe
GET    /api/valuations/methods    -> methods applicable to ?stage=
POST   /value                     -> run valuation, return JSON (not persisted)
POST   /api/valuations            -> run valuation, persist, return JSON
GET    /api/valuations            -> the caller's valuations, most recent first
GET    /api/valuations/{id}       -> a single stored valuation
DELETE /api/valuations/{id}       -> remove a stored valuation
GET    /api/dashboard             -> portfolio summary

Owner-scoped routes identify the caller by the ``X-User-Id`` header, which
an upstream authentication layer is expected to set.
"""

from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from valuai import __version__
from valuai.dashboard import summarize_portfolio
from valuai.engine import ValuationEngine
from valuai.exceptions import NoApplicableMethodsError, ValidationError
from valuai.models import ValuationInput
from valuai.store import ValuationStore

logger = logging.getLogger("valuai.server")

OWNER_HEADER = "x-user-id"

engine = ValuationEngine()
store = ValuationStore()

app = FastAPI(
    title="ValuAI",
    description="Multi-method valuation engine for early-stage companies.",
    version=__version__,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _read_json(request: Request) -> Any:
    """Read and parse the JSON body, raising JSONDecodeError on failure."""
    body = await request.body()
    return json.loads(body)


def _owner_id(request: Request) -> str | None:
    owner = request.headers.get(OWNER_HEADER, "").strip()
    return owner or None


def _unauthorized() -> JSONResponse:
    return JSONResponse({"error": "Authentication required"}, status_code=401)


def _run_valuation(payload: Any, owner_id: str | None, *, persist: bool = False) -> JSONResponse:
    """Validate, run the engine and optionally persist to the store."""
    start = time.monotonic()
    try:
        data = ValuationInput.from_dict(payload)
        recommended = engine.get_applicable_methods(data.stage)
        result = engine.calculate(data, owner_id)
        if persist:
            store.save(result, data)
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(
            "valuation_ok company=%s primary_method=%s id=%s elapsed_ms=%.1f",
            result.company_name,
            result.primary_method,
            result.id,
            elapsed_ms,
        )
        return JSONResponse(
            {
                "result": result.to_dict(),
                "recommended_methods": [m.to_dict() for m in recommended],
            },
            status_code=201 if persist else 200,
        )
    except (ValidationError, NoApplicableMethodsError) as exc:
        logger.warning("validation_error error=%s", exc)
        return JSONResponse({"error": str(exc)}, status_code=400)
    except Exception as exc:  # pragma: no cover
        logger.exception("unhandled_error error=%s", exc)
        return JSONResponse({"error": str(exc)}, status_code=500)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/api/valuations/methods")
def api_methods(request: Request) -> JSONResponse:
    """Preview the methods a calculation at ``stage`` would use."""
    stage = request.query_params.get("stage")
    if not stage:
        return JSONResponse({"error": "Business stage is required"}, status_code=400)
    try:
        methods = engine.get_applicable_methods(stage)
    except ValidationError as exc:
        return JSONResponse({"error": str(exc)}, status_code=400)
    return JSONResponse({"recommended_methods": [m.to_dict() for m in methods]})


@app.post("/value")
async def post_value(request: Request) -> JSONResponse:
    """Run a valuation without storing it."""
    try:
        payload = await _read_json(request)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("bad_json error=%s", exc)
        return JSONResponse({"error": f"Invalid JSON: {exc}"}, status_code=400)
    return _run_valuation(payload, _owner_id(request), persist=False)


@app.post("/api/valuations")
async def api_create_valuation(request: Request) -> JSONResponse:
    """Run a valuation, persist it for the caller, return it."""
    owner_id = _owner_id(request)
    if owner_id is None:
        return _unauthorized()
    try:
        payload = await _read_json(request)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("bad_json error=%s", exc)
        return JSONResponse({"error": f"Invalid JSON: {exc}"}, status_code=400)
    return _run_valuation(payload, owner_id, persist=True)


@app.get("/api/valuations")
def api_list_valuations(request: Request) -> JSONResponse:
    owner_id = _owner_id(request)
    if owner_id is None:
        return _unauthorized()
    results = store.list_by_owner(owner_id)
    return JSONResponse([r.to_dict() for r in results])


@app.get("/api/valuations/{valuation_id}")
def api_get_valuation(valuation_id: str, request: Request) -> JSONResponse:
    owner_id = _owner_id(request)
    if owner_id is None:
        return _unauthorized()
    result = store.get_by_id(valuation_id, owner_id)
    if result is None:
        return JSONResponse({"error": "Valuation not found"}, status_code=404)
    return JSONResponse(result.to_dict())


@app.delete("/api/valuations/{valuation_id}")
def api_delete_valuation(valuation_id: str, request: Request) -> JSONResponse:
    owner_id = _owner_id(request)
    if owner_id is None:
        return _unauthorized()
    if not store.delete(valuation_id, owner_id):
        return JSONResponse({"error": "Valuation not found"}, status_code=404)
    logger.info("valuation_deleted id=%s", valuation_id)
    return JSONResponse({"deleted": True})


@app.get("/api/dashboard")
def api_dashboard(request: Request) -> JSONResponse:
    owner_id = _owner_id(request)
    if owner_id is None:
        return _unauthorized()
    summary = summarize_portfolio(owner_id, store.list_by_owner(owner_id, limit=None))
    return JSONResponse(summary.to_dict())


# ---------------------------------------------------------------------------
# CLI entry-point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the ValuAI FastAPI service.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", default=8080, type=int)
    parser.add_argument("--db", default="valuai.db", help="SQLite database path.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging verbosity (default: INFO).",
    )
    return parser


def main() -> int:
    import uvicorn

    args = build_parser().parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Re-initialise the module-level store with the user-chosen DB path.
    global store  # noqa: PLW0603
    store.close()
    store = ValuationStore(Path(args.db))

    logger.info("starting FastAPI server on http://%s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    store.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
