from __future__ import annotations

import argparse
import logging
from pathlib import Path

import config
from .services.match_service import start_discovery
from .services.profile_store import ProfileStore
from .services.trade_advisor import TradeAdvisor


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inspect SkillSwap discovery rankings and AI trade plans from the command line."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=config.DATA_DIR,
        help=f"Directory holding profiles.json (default: {config.DATA_DIR})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="Print the discovery order for a user")
    rank.add_argument("--user-id", required=True, help="Active user's id")
    rank.add_argument("--limit", type=int, default=None, help="Only print the top N candidates")

    trade = sub.add_parser("trade-plan", help="Ask the AI advisor for a fair trade between two users")
    trade.add_argument("--user-id", required=True, help="Active user's id")
    trade.add_argument("--other-id", required=True, help="The neighbour to trade with")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL)

    store = ProfileStore(args.data_dir / "profiles.json")
    me = store.get(args.user_id)
    if me is None:
        raise SystemExit(f"No profile for user {args.user_id}")

    if args.command == "rank":
        swipe = start_discovery(me, store.get_all_profiles())
        candidates = swipe.candidates[: args.limit] if args.limit else swipe.candidates
        if not candidates:
            print("You've reached the world's end! No neighbours to discover yet.")
            return
        for pos, candidate in enumerate(candidates, 1):
            profile = candidate.profile
            print(f"{pos:>3}. [{candidate.match_score:>2}] {profile.display_name} ({profile.place})")
            print(f"       teaches: {', '.join(profile.teach_skills) or 'N/A'}")
            print(f"       wants:   {', '.join(profile.want_skills) or 'N/A'}")
        return

    other = store.get(args.other_id)
    if other is None:
        raise SystemExit(f"No profile for user {args.other_id}")
    print(TradeAdvisor().suggest(me, other))


if __name__ == "__main__":
    main()
