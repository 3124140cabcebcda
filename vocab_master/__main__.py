"""CLI entry point for vocab-master.

Usage:
  python -m vocab_master serve [--port PORT] [--host HOST]
  python -m vocab_master stop
  python -m vocab_master restart [--port PORT]
  python -m vocab_master status
  python -m vocab_master words [--topic TOPIC] [--level N]
  python -m vocab_master quiz [--topic TOPIC] [--level N]
"""
from __future__ import annotations

import asyncio
import os
import signal
import sys
from pathlib import Path

PID_FILE = Path(__file__).resolve().parent.parent / ".server.pid"


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "stop":
        _stop()
    elif command == "restart":
        _restart(args[1:])
    elif command == "status":
        _status()
    elif command == "words":
        _words(args[1:])
    elif command == "quiz":
        _quiz(args[1:])
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, stop, restart, status, words, quiz")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _read_pid() -> int | None:
    """Read PID from file, return None if stale or missing."""
    if not PID_FILE.exists():
        return None
    try:
        pid = int(PID_FILE.read_text().strip())
        # Check if process is actually running
        os.kill(pid, 0)
        return pid
    except (ValueError, ProcessLookupError, PermissionError):
        PID_FILE.unlink(missing_ok=True)
        return None


def _stop() -> bool:
    """Stop a running server. Returns True if a server was stopped."""
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
        return False
    try:
        os.kill(pid, signal.SIGTERM)
        print(f"Stopped server (PID {pid}).")
        return True
    except ProcessLookupError:
        print("Server was not running (stale PID file removed).")
        return False
    finally:
        PID_FILE.unlink(missing_ok=True)


def _status():
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
    else:
        print(f"Server is running (PID {pid}).")


def _restart(args: list[str]):
    import time
    _stop()
    time.sleep(1)
    _serve(args)


def _serve(args: list[str]):
    import uvicorn

    existing = _read_pid()
    if existing is not None:
        print(f"Server already running (PID {existing}). Use 'restart' or 'stop' first.")
        sys.exit(1)

    port = int(_parse_flag(args, "--port", "8765"))
    host = _parse_flag(args, "--host", "127.0.0.1")
    PID_FILE.write_text(str(os.getpid()))

    print(f"Starting Vocab Master on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    try:
        uvicorn.run(
            "vocab_master.app:app",
            host=host,
            port=port,
            reload=False,
            timeout_graceful_shutdown=5,
        )
    finally:
        PID_FILE.unlink(missing_ok=True)


def _resolve_choice(value: str, options: tuple[str, ...], default: str) -> str:
    """Accept an exact option, a 1-based index, or a case-insensitive prefix."""
    if not value:
        return default
    if value in options:
        return value
    if value.isdigit() and 1 <= int(value) <= len(options):
        return options[int(value) - 1]
    matches = [o for o in options if o.lower().startswith(value.lower())]
    if len(matches) == 1:
        return matches[0]
    print(f"Unknown choice: {value!r}. Options: {', '.join(options)}")
    sys.exit(1)


def _load_words(args: list[str]):
    from vocab_master.config import load_settings
    from vocab_master.models import LEVELS, TOPICS
    from vocab_master.providers.base import ProviderError
    from vocab_master.providers.factory import get_llm
    from vocab_master.word_source import generate_word_list

    settings = load_settings()
    topic = _resolve_choice(_parse_flag(args, "--topic", ""), TOPICS, settings.default_topic)
    level = _resolve_choice(_parse_flag(args, "--level", ""), LEVELS, settings.default_level)

    print(f"Generating words for {topic} / {level} using {settings.llm_provider}...")
    try:
        llm = get_llm(settings)
        words = asyncio.run(generate_word_list(llm, topic, level, count=settings.word_count))
    except ProviderError as e:
        print(f"Word source unavailable: {e}")
        sys.exit(1)

    if not words:
        print("No words generated. Try again or pick another topic.")
        sys.exit(1)
    return words


def _words(args: list[str]):
    words = _load_words(args)
    print()
    for i, w in enumerate(words, 1):
        phonetic = f" {w.pronunciation}" if w.pronunciation else ""
        print(f"{i:2d}. {w.term}{phonetic} ({w.part_of_speech})")
        print(f"    {w.definition}")
        print(f"    \"{w.example}\"")


def _ask(valid: list[str]) -> str:
    answer = ""
    while answer not in valid:
        answer = input("  > ").strip().upper()[:1]
    return answer


def _quiz(args: list[str]):
    from vocab_master.quiz import QuizSession

    session = QuizSession.from_words(_load_words(args))
    labels = "ABCD"

    while not session.finished:
        q = session.current_question
        print(f"\nQuestion {session.current_index + 1} / {session.total}   Score: {session.score}")
        print(f"  {q.word.term} ({q.word.part_of_speech})")
        for label, option in zip(labels, q.options):
            print(f"    {label}) {option}")

        valid = list(labels[:len(q.options)])
        try:
            answer = _ask(valid)
        except (EOFError, KeyboardInterrupt):
            answered = session.current_index + (1 if session.answered else 0)
            print(f"\n\nStopped: {session.score} / {answered} answered ({session.total} questions)")
            return
        choice = q.options[valid.index(answer)]

        if session.submit_answer(choice):
            print("  Correct!")
        else:
            print(f"  Wrong. Answer: {q.correct_answer}")
        session.advance()

    print(f"\nFinished: {session.score} / {session.total} ({session.percentage}%)")
    print("Great job!" if session.passed else "Keep practicing!")


if __name__ == "__main__":
    main()
