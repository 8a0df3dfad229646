"""Environment variable loading utilities."""

import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_env(env_file: str | Path | None = None) -> bool:
    """Load environment variables from a .env file.

    Variables already present in the environment are left untouched.

    Args:
        env_file: Explicit .env path. If None, dotenv searches upwards from
            the current working directory.

    Returns:
        True if a .env file was found and loaded
    """
    if env_file is not None:
        env_path = Path(env_file)
        if not env_path.exists():
            logger.debug(f"No .env file at {env_path}")
            return False
        return load_dotenv(env_path)

    return load_dotenv()
