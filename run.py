#!/usr/bin/env python3
"""
Poker Agent - Startup Script

Usage:
    VERSE="0x..." python run.py
    VERSE="0x..." NAME=my-bot python run.py --adaptive-learning
    python run.py --verse 0x... --raise-threshold 0.65 --port 8001
"""

import argparse
import sys

import uvicorn
from pydantic import ValidationError

from pokeragent.agents.poker_agent import PokerAgent
from pokeragent.config import AgentSettings
from pokeragent.core.strategy import StrategyConfig
from pokeragent.server.app import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Autonomous Poker Agent")
    parser.add_argument("--verse", help="Target game instance (default: $VERSE)")
    parser.add_argument("--name", help="Agent name (default: $NAME or random)")
    parser.add_argument("--account", help="Account id (default: agent name)")
    parser.add_argument("--auth-token", help="Signed auth token (default: $AUTH_TOKEN)")
    parser.add_argument("--server-url", help="Game service URL (default: $SERVER_URL)")
    parser.add_argument("--poll-interval", type=float, help="Seconds between polls")
    parser.add_argument("--adaptive-learning", action="store_true",
                        help="Adjust strategy after each hand")

    strategy = parser.add_argument_group("strategy")
    strategy.add_argument("--raise-threshold", type=float, default=0.6)
    strategy.add_argument("--call-threshold", type=float, default=0.4)
    strategy.add_argument("--fold-threshold", type=float, default=0.3)
    strategy.add_argument("--bluff-probability", type=float, default=0.15)
    strategy.add_argument("--aggressiveness", type=float, default=0.5)

    parser.add_argument("--host", default="127.0.0.1", help="Status API host")
    parser.add_argument("--port", type=int, default=8000, help="Status API port")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = AgentSettings.from_env(
            verse=args.verse,
            name=args.name,
            account=args.account,
            auth_token=args.auth_token,
            server_url=args.server_url,
            poll_interval=args.poll_interval,
            adaptive_learning=args.adaptive_learning or None,
            strategy=StrategyConfig(
                raise_threshold=args.raise_threshold,
                call_threshold=args.call_threshold,
                fold_threshold=args.fold_threshold,
                bluff_probability=args.bluff_probability,
                aggressiveness=args.aggressiveness,
            ),
        )
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        print("\nUsage:", file=sys.stderr)
        print('  VERSE="0x..." python run.py', file=sys.stderr)
        print('  VERSE="0x..." NAME=my-bot python run.py', file=sys.stderr)
        sys.exit(1)

    app = create_app(PokerAgent.from_settings(settings))
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
