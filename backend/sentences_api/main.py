"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the sentence practice backend.
Controllers are intentionally thin: they accept requests, delegate to
services, and map `ValueError` to 400 and missing rows to 404.

Endpoints implemented (base path /api/sentences):
- GET /api/sentences
- GET /api/sentences/stats
- GET /api/sentences/dates
- GET /api/sentences/date-range
- GET /api/sentences/date/{date}
- GET /api/sentences/difficulty/{difficulty}
- GET /api/sentences/{sentence_id}
- POST /api/sentences
- PUT /api/sentences/{sentence_id}
- DELETE /api/sentences/{sentence_id}
"""

from fastapi import FastAPI, Depends, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
import json
import logging
import time
import uuid
from datetime import date
from typing import List
from .database import create_db_and_tables, get_session
from . import services
from .schemas import SentencePracticeIn, SentencePracticeOut, SentenceStats, UnifiedSentence
from .config import settings

app = FastAPI(title="Sentence Practice API")
logger = logging.getLogger("sentences_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# The two local frontends (Vite and CRA dev servers) call the API cross-origin.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()


def _log_request(event: str, request: Request, req_id: str, started: float, status_code=None):
    """Emit one JSON request log line for API paths."""
    if not request.url.path.startswith("/api"):
        return
    payload = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
    }
    if status_code is None:
        logger.exception("%s %s", event, json.dumps(payload, ensure_ascii=True))
    else:
        payload["status_code"] = status_code
        logger.info("%s %s", event, json.dumps(payload, ensure_ascii=True))


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _log_request("request_failed", request, req_id, started)
        raise
    response.headers["X-Request-ID"] = req_id
    _log_request("request_done", request, req_id, started, response.status_code)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies, enum values and path ids are caller errors like bad filters.
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def _to_out(sentences) -> List[SentencePracticeOut]:
    return [SentencePracticeOut.model_validate(s) for s in sentences]


@app.get('/api/sentences', response_model=List[UnifiedSentence])
def list_all_sentences(db: Session = Depends(get_session)):
    """List practice sentences followed by word sentences.

    Each row carries a `source` of `practice` or `word` and an id
    prefixed with the same name.
    """
    return services.SentenceAggregationService(db).list_all()


@app.get('/api/sentences/stats', response_model=SentenceStats)
def sentence_stats(db: Session = Depends(get_session)):
    """Return combined counts; word sentences are all counted as easy."""
    return services.SentenceAggregationService(db).statistics()


@app.get('/api/sentences/dates', response_model=List[date])
def list_distinct_dates(db: Session = Depends(get_session)):
    """Return the distinct creation dates of practice sentences, newest first."""
    return services.SentencePracticeService(db).list_distinct_dates()


@app.get('/api/sentences/date-range', response_model=List[SentencePracticeOut])
def list_by_date_range(
    start_date: str = Query(..., alias="startDate"),
    end_date: str = Query(..., alias="endDate"),
    db: Session = Depends(get_session),
):
    """Return practice sentences created within `startDate`..`endDate` inclusive."""
    svc = services.SentencePracticeService(db)
    try:
        sentences = svc.list_by_date_range(start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_out(sentences)


@app.get('/api/sentences/date/{created}', response_model=List[SentencePracticeOut])
def list_by_date(created: str, db: Session = Depends(get_session)):
    """Return practice sentences created on one `YYYY-MM-DD` date."""
    svc = services.SentencePracticeService(db)
    try:
        sentences = svc.list_by_date(created)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_out(sentences)


@app.get('/api/sentences/difficulty/{difficulty}', response_model=List[SentencePracticeOut])
def list_by_difficulty(difficulty: str, db: Session = Depends(get_session)):
    """Return practice sentences of one difficulty; the name is case-insensitive."""
    svc = services.SentencePracticeService(db)
    try:
        sentences = svc.list_by_difficulty(difficulty)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_out(sentences)


@app.get('/api/sentences/{sentence_id}', response_model=SentencePracticeOut)
def get_sentence(sentence_id: int, db: Session = Depends(get_session)):
    s = services.SentencePracticeService(db).get_by_id(sentence_id)
    if not s:
        raise HTTPException(status_code=404, detail='sentence not found')
    return SentencePracticeOut.model_validate(s)


@app.post('/api/sentences', response_model=SentencePracticeOut)
def create_sentence(payload: SentencePracticeIn, db: Session = Depends(get_session)):
    """Create a practice sentence.

    `createdDate` defaults to today. A blank `englishSentence` is rejected
    with 400.
    """
    svc = services.SentencePracticeService(db)
    try:
        s = svc.create(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SentencePracticeOut.model_validate(s)


@app.put('/api/sentences/{sentence_id}', response_model=SentencePracticeOut)
def update_sentence(sentence_id: int, payload: SentencePracticeIn, db: Session = Depends(get_session)):
    """Replace an existing practice sentence; unknown ids give 404."""
    svc = services.SentencePracticeService(db)
    try:
        s = svc.update(sentence_id, payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not s:
        raise HTTPException(status_code=404, detail='sentence not found')
    return SentencePracticeOut.model_validate(s)


@app.delete('/api/sentences/{sentence_id}')
def delete_sentence(sentence_id: int, db: Session = Depends(get_session)):
    if not services.SentencePracticeService(db).delete(sentence_id):
        raise HTTPException(status_code=404, detail='sentence not found')
    return Response(status_code=200)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
