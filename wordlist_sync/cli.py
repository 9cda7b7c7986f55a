"""Command line interface for the word-list sync engine"""

import argparse
import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .config.settings import settings
from .core.factory import create_word_list_session
from .core.session import WordListSession
from .exceptions import WordSyncError
from .logging_config import get_logger, setup_logging
from .models.word_lists import SyncSnapshot

logger = get_logger(__name__)


@dataclass
class SyncRunResult:
    """Outcome of one CLI run"""

    loaded: bool
    snapshot: SyncSnapshot
    confirmed: list[str] = field(default_factory=list)
    reverted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return not self.loaded or bool(self.reverted)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description=(
            "Load and update your starred, graveyard and wrong-answer word lists"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wordsync                              # Load and show all lists
  wordsync --star w1 --star w2          # Toggle the star on two words
  wordsync --graveyard w3               # Move a word to the graveyard
  wordsync --delete w3                  # Delete a buried word permanently
  wordsync --wrong w4 --refresh-vocabularies
        """,
    )

    conn_group = parser.add_argument_group("connection options")
    conn_group.add_argument(
        "--token",
        default=None,
        help="Bearer token (default: WORDSYNC_TOKEN)",
    )
    conn_group.add_argument(
        "--base-url",
        default=None,
        help=f"Word-list service URL (default: {settings.service.base_url})",
    )

    action_group = parser.add_argument_group("list actions")
    action_group.add_argument(
        "--star",
        action="append",
        default=[],
        metavar="WORD_ID",
        help="Toggle the starred flag of a word (repeatable)",
    )
    action_group.add_argument(
        "--wrong",
        action="append",
        default=[],
        metavar="WORD_ID",
        help="Record a wrong answer for a word (repeatable)",
    )
    action_group.add_argument(
        "--graveyard",
        action="append",
        default=[],
        metavar="WORD_ID",
        help="Move a word to the graveyard (repeatable)",
    )
    action_group.add_argument(
        "--delete",
        action="append",
        default=[],
        metavar="WORD_ID",
        help="Permanently delete a word from the graveyard (repeatable)",
    )
    action_group.add_argument(
        "--refresh-vocabularies",
        action="store_true",
        help="Re-fetch your vocabularies after applying the actions",
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    return parser


async def run_sync(
    session: WordListSession, args: argparse.Namespace
) -> SyncRunResult:
    """Load the lists, then apply the requested actions one by one"""
    loaded = await session.load()
    result = SyncRunResult(loaded=loaded, snapshot=session.snapshot())
    if not loaded:
        return result

    actions = [
        ("star", args.star, session.toggle_starred),
        ("wrong", args.wrong, session.add_wrong_answer),
        ("graveyard", args.graveyard, session.move_to_graveyard),
        ("delete", args.delete, session.delete_permanently),
    ]
    for label, word_ids, operation in actions:
        for word_id in word_ids:
            entry = f"{label} {word_id}"
            if label == "wrong" and word_id in session.wrong_answers:
                result.skipped.append(entry)
                continue
            if await operation(word_id):
                result.confirmed.append(entry)
            else:
                result.reverted.append(entry)

    if args.refresh_vocabularies and not await session.refresh_vocabularies():
        logger.warning("Vocabularies could not be refreshed; showing cached list")

    result.snapshot = session.snapshot()
    return result


def print_sync_results(result: SyncRunResult) -> None:
    """Print formatted list summary"""
    snapshot = result.snapshot
    print("\n" + "=" * 60)
    print("📚 WORD LISTS")
    print("=" * 60)

    if not result.loaded:
        print("❌ Word lists could not be loaded")
        print("=" * 60)
        return

    print(f"⭐ Starred ({len(snapshot.starred)}): {', '.join(snapshot.starred)}")
    print(
        f"🪦 Graveyard ({len(snapshot.graveyard)}): "
        f"{', '.join(snapshot.graveyard)}"
    )
    print(
        f"❌ Wrong answers ({len(snapshot.wrong_answers)}): "
        f"{', '.join(snapshot.wrong_answers)}"
    )
    titles = [
        str(v.get("title") or v.get("id") or "?") for v in snapshot.vocabularies
    ]
    print(f"📖 Vocabularies ({len(titles)}): {', '.join(titles)}")

    if result.confirmed:
        print("\n✅ Confirmed: " + ", ".join(result.confirmed))
    if result.reverted:
        print("↩️ Reverted: " + ", ".join(result.reverted))
    if result.skipped:
        print("⏭️ Skipped: " + ", ".join(result.skipped))

    print("=" * 60)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    debug = args.debug or settings.debug
    if debug or args.verbose or settings.verbose:
        log_level = "DEBUG"
    else:
        log_level = settings.logging.level
    if args.log_file:
        log_file = str(args.log_file)
    else:
        log_file = str(settings.logging.file) if settings.logging.file else None
    setup_logging(log_level, log_file)

    token = args.token or settings.auth.token
    if not token:
        logger.error("No auth token. Pass --token or set WORDSYNC_TOKEN.")
        sys.exit(1)

    try:
        session = create_word_list_session(lambda: token, base_url=args.base_url)
        try:
            result = asyncio.run(run_sync(session, args))
        finally:
            session.store.gateway.close()

        print_sync_results(result)
        if result.failed:
            sys.exit(1)

    except WordSyncError as e:
        logger.error(f"Application error: {e}")
        if debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
