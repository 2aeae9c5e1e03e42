from functools import lru_cache

from trace_puzzle.core.config import settings
from trace_puzzle.services import PuzzleServices


@lru_cache
def get_puzzle_services() -> PuzzleServices:
    """Shared service, holds no per-request state"""
    return PuzzleServices(settings)
