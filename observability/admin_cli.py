"""Lightweight CLI helpers for inspecting and maintaining interview records."""
from __future__ import annotations

import argparse

from config.settings import settings
from interviews.service import InterviewService
from storage.sqlite import InterviewDatabase


def tail_candidates(service: InterviewService, limit: int = 20) -> None:
    for row in service.list_candidates()[:limit]:
        print(
            f"[{row.created_at.isoformat(timespec='seconds')}] {row.id} {row.name} <{row.email}> "
            f"{row.job_role} status={row.status} answered={row.questions_answered}/{row.total_questions} "
            f"score={row.final_score}"
        )


def tail_sessions(service: InterviewService, limit: int = 20) -> None:
    for session in service.sessions.list_active()[:limit]:
        print(
            f"[{session.last_activity_at.isoformat(timespec='seconds')}] {session.candidate_id} "
            f"index={session.current_question_index} remaining={session.time_remaining}s"
        )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--db", default=settings.DB_PATH, help="SQLite database path")
    parser.add_argument("--tail-candidates", type=int, help="Show the latest candidates")
    parser.add_argument("--tail-sessions", type=int, help="Show the latest active sessions")
    parser.add_argument(
        "--purge-stale",
        type=int,
        nargs="?",
        const=settings.STALE_SESSION_HOURS,
        metavar="HOURS",
        help="Delete inactive sessions idle for longer than HOURS",
    )
    args = parser.parse_args(argv)

    with InterviewDatabase(args.db) as db:
        service = InterviewService(db)
        if args.tail_candidates:
            tail_candidates(service, args.tail_candidates)
        if args.tail_sessions:
            tail_sessions(service, args.tail_sessions)
        if args.purge_stale is not None:
            removed = service.purge_stale_sessions(args.purge_stale)
            print(f"purged {removed} stale session(s)")


if __name__ == "__main__":
    main()
