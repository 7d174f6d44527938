import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return str(value).strip().lower() in ("1", "true", "yes", "on")


database_config = {
    "DATABASE_URL": os.getenv("DATABASE_URL", "sqlite:///buildsphere.db"),
    "DATABASE_ECHO": _as_bool(os.getenv("DATABASE_ECHO", "false")),
}

server_config = {
    "HOST": os.getenv("HOST", ""),
    "PORT": int(os.getenv("PORT", "8000")),
}

log_config = {
    "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
    "LOG_TO_FILE": _as_bool(os.getenv("LOG_TO_FILE", "false")),
    "LOG_DIR": os.getenv("LOG_DIR", "logs"),
}
