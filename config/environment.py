"""
Loads a local .env file into the process environment.

Variables already set in the environment win over the file, so
deployments can override anything a checked-out .env provides.
"""
from pathlib import Path

from dotenv import load_dotenv


def load_env_file(base_dir: Path, filename: str = '.env') -> bool:
    """Returns True when the file set at least one variable."""
    return load_dotenv(base_dir / filename, override=False)
