"""
Engine binary discovery.
"""

import logging
import os
import shutil
from typing import Iterable, Optional

from chess_bot.config import DEFAULT_ENGINE_CANDIDATES, ENGINE_ENV_VAR
from chess_bot.engine.errors import EngineNotFoundError

logger = logging.getLogger(__name__)


def find_engine(candidates: Optional[Iterable[str]] = None, use_env: bool = True) -> str:
    """
    Return the first executable engine among the candidates.

    Candidates are probed in order for existence and execute permission.
    Bare names (no directory part) are resolved through PATH. When
    use_env is set, the CHESS_BOT_ENGINE variable is tried first.

    Args:
        candidates: Ordered candidate paths (default: DEFAULT_ENGINE_CANDIDATES)
        use_env: Try the CHESS_BOT_ENGINE environment variable first

    Returns:
        Absolute path to the engine binary

    Raises:
        EngineNotFoundError: If no candidate is an executable file
    """
    if candidates is None:
        candidates = DEFAULT_ENGINE_CANDIDATES
    candidates = [c for c in candidates if c]

    if use_env and os.environ.get(ENGINE_ENV_VAR):
        candidates.insert(0, os.environ[ENGINE_ENV_VAR])

    for candidate in candidates:
        path = shutil.which(candidate)
        if path:
            path = os.path.abspath(path)
            logger.info(f"Found engine: {path}")
            return path
        logger.debug(f"Engine candidate not usable: {candidate}")

    raise EngineNotFoundError(candidates)
