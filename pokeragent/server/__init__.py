"""
Poker Agent Server - FastAPI status API hosting the polling loop
"""

from pokeragent.server.app import create_app, create_app_from_env

__all__ = ["create_app", "create_app_from_env"]
