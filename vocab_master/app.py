"""FastAPI application with all routes."""
from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse

from vocab_master.audio import AUDIO_ERROR_NOTICE, get_or_create_audio, sentence_hash
from vocab_master.config import Settings, load_settings, save_settings
from vocab_master.models import LEVELS, TOPICS, VocabularyEntry
from vocab_master.providers.base import ProviderError
from vocab_master.providers.factory import LLM_PROVIDERS, TTS_PROVIDERS, get_llm, get_tts
from vocab_master.quiz import QuizSession, QuizStateError
from vocab_master.word_source import MAX_WORDS, generate_word_list

app = FastAPI(title="Vocab Master")

log = logging.getLogger("vocab_master.app")

# Global state (initialized in startup)
_settings: Settings | None = None
_words: list[VocabularyEntry] = []
_active_sessions: dict[str, QuizSession] = {}  # session_id -> session
_generating = False


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def _get_llm():
    return get_llm(get_settings())


def _get_tts():
    return get_tts(get_settings())


async def _read_body(request: Request) -> dict:
    body = await request.json() if await request.body() else {}
    if not isinstance(body, dict):
        raise HTTPException(400, "Expected a JSON object")
    return body


def _get_session(session_id: str) -> QuizSession:
    session = _active_sessions.get(session_id)
    if session is None:
        raise HTTPException(404, "Quiz session not found")
    return session


def _session_response(session_id: str, session: QuizSession) -> dict:
    data = session.to_dict()
    data["session_id"] = session_id
    return data


@app.on_event("startup")
async def startup():
    global _settings
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    logging.getLogger("vocab_master").setLevel(_settings.log_level.upper())
    log.info("LLM: %s, TTS: %s", _settings.llm_provider, _settings.tts_provider)


# ── Static files ──────────────────────────────────────────────────────────

static_dir = Path(__file__).parent / "static"


@app.get("/")
async def index():
    return FileResponse(static_dir / "index.html")


@app.get("/style.css")
async def style():
    return FileResponse(static_dir / "style.css", media_type="text/css")


@app.get("/app.js")
async def script():
    return FileResponse(static_dir / "app.js", media_type="application/javascript")


# ── API: Options ──────────────────────────────────────────────────────────

@app.get("/api/options")
async def api_options():
    s = get_settings()
    return {
        "topics": list(TOPICS),
        "levels": list(LEVELS),
        "default_topic": s.default_topic,
        "default_level": s.default_level,
    }


# ── API: Word list ────────────────────────────────────────────────────────

@app.get("/api/words")
async def api_words():
    return {"words": [w.to_dict() for w in _words], "generating": _generating}


@app.post("/api/words")
async def api_generate_words(request: Request):
    global _words, _generating
    body = await _read_body(request)
    s = get_settings()
    topic = body.get("topic", s.default_topic)
    level = body.get("level", s.default_level)
    if topic not in TOPICS:
        raise HTTPException(422, f"Unknown topic: {topic}")
    if level not in LEVELS:
        raise HTTPException(422, f"Unknown level: {level}")
    if _generating:
        raise HTTPException(409, "Word generation already in progress")

    # A new list always sends the user back to the list view
    _active_sessions.clear()
    _generating = True
    try:
        llm = _get_llm()
        words = await generate_word_list(llm, topic, level, count=s.word_count)
    except (ProviderError, ValueError) as e:
        log.warning("Word source unavailable: %s", e)
        _words = []
        raise HTTPException(503, str(e))
    finally:
        _generating = False

    _words = words
    return {
        "topic": topic,
        "level": level,
        "words": [w.to_dict() for w in words],
    }


# ── API: Quiz ─────────────────────────────────────────────────────────────

@app.post("/api/quiz/start")
async def api_quiz_start():
    if not _words:
        raise HTTPException(400, "No words available. Generate a word list first.")
    session_id = uuid.uuid4().hex
    session = QuizSession.from_words(_words)
    _active_sessions[session_id] = session
    log.info("Quiz %s started with %d questions", session_id, session.total)
    return _session_response(session_id, session)


@app.get("/api/quiz/{session_id}")
async def api_quiz_state(session_id: str):
    return _session_response(session_id, _get_session(session_id))


@app.post("/api/quiz/{session_id}/answer")
async def api_quiz_answer(session_id: str, request: Request):
    session = _get_session(session_id)
    body = await _read_body(request)
    choice = body.get("choice")
    if not isinstance(choice, str):
        raise HTTPException(400, "No choice provided")
    try:
        session.submit_answer(choice)
    except QuizStateError as e:
        raise HTTPException(409, str(e))
    return _session_response(session_id, session)


@app.post("/api/quiz/{session_id}/next")
async def api_quiz_next(session_id: str):
    session = _get_session(session_id)
    try:
        session.advance()
    except QuizStateError as e:
        raise HTTPException(409, str(e))
    return _session_response(session_id, session)


@app.delete("/api/quiz/{session_id}")
async def api_quiz_exit(session_id: str):
    _get_session(session_id)
    del _active_sessions[session_id]
    return {"ok": True}


# ── API: Audio ────────────────────────────────────────────────────────────

@app.post("/api/pronounce")
async def api_pronounce(request: Request):
    body = await _read_body(request)
    text = body.get("text", "")
    text = text.strip() if isinstance(text, str) else ""
    if not text:
        raise HTTPException(400, "No text provided")

    try:
        tts = _get_tts()
    except (ProviderError, ValueError) as e:
        log.warning("TTS unavailable: %s", e)
        raise HTTPException(502, AUDIO_ERROR_NOTICE)

    audio_path = await get_or_create_audio(text, tts, get_settings().audio_cache_full_path)
    if audio_path is None:
        raise HTTPException(502, AUDIO_ERROR_NOTICE)
    return {"audio_hash": sentence_hash(text)}


@app.get("/api/audio/{audio_hash}.mp3")
async def api_audio(audio_hash: str):
    if not re.fullmatch(r"[0-9a-f]{16}", audio_hash):
        raise HTTPException(404, "Audio not found")
    audio_path = get_settings().audio_cache_full_path / f"{audio_hash}.mp3"
    if not audio_path.exists():
        raise HTTPException(404, "Audio not found")
    return FileResponse(audio_path, media_type="audio/mpeg")


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


_SETTING_CHOICES = {
    "llm_provider": LLM_PROVIDERS,
    "tts_provider": TTS_PROVIDERS,
    "default_topic": TOPICS,
    "default_level": LEVELS,
}


def _setting_error(key: str, value) -> str | None:
    if key == "word_count":
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= MAX_WORDS:
            return f"word_count must be an integer from 1 to {MAX_WORDS}"
        return None
    if not isinstance(value, str) or not value.strip():
        return f"{key} must be a non-empty string"
    choices = _SETTING_CHOICES.get(key)
    if choices is not None and value not in choices:
        return f"Unknown {key}: {value}"
    return None


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await _read_body(request)
    s = get_settings()
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    updates = {k: v for k, v in body.items() if k in known}
    # Validate everything first so a bad field leaves settings untouched
    for k, v in updates.items():
        error = _setting_error(k, v)
        if error:
            raise HTTPException(422, error)
    for k, v in updates.items():
        setattr(s, k, v)
    save_settings(s)
    return s.to_dict()
