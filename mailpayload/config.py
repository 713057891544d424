import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from ENV_FILE if specified, or .env.local, or .env
env_file = os.getenv('ENV_FILE')
if env_file:
    load_dotenv(Path(env_file))
else:
    # Try .env.local first, then fall back to .env
    env_local = Path.cwd() / '.env.local'
    if env_local.exists():
        load_dotenv(env_local)
    else:
        load_dotenv()


def _number_from_env(key: str, fallback: int) -> int:
    """Extract integer from environment variable with fallback."""
    raw = os.getenv(key)
    if raw is None:
        return fallback

    try:
        return int(raw)
    except ValueError:
        return fallback


SERVICE_NAME = os.getenv('SERVICE_NAME', 'mailpayload')

# Logging configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_DIR = os.getenv('LOG_DIR')  # unset disables the file handler
LOG_MAX_BYTES = _number_from_env('LOG_MAX_BYTES', 10 * 1024 * 1024)  # 10MB
LOG_BACKUP_COUNT = _number_from_env('LOG_BACKUP_COUNT', 5)
