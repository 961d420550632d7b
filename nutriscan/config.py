from __future__ import annotations

import os
from pathlib import Path
from typing import List


def _env_flag(name: str, default: str = "") -> bool:
    return (os.environ.get(name) or default).strip() in {"1", "true", "True", "yes"}


class Settings:
    """Centralized configuration for the NutriScan API."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("NUTRISCAN_DATA_ROOT") or data_root_default
        ).expanduser()
        self.db_path: Path = Path(
            os.environ.get("NUTRISCAN_DB_PATH") or (self.data_root / "nutriscan.db")
        ).expanduser()
        self.upload_dir: Path = Path(
            os.environ.get("NUTRISCAN_UPLOAD_DIR") or (self.data_root / "uploads")
        ).expanduser()

        # In production you MUST set NUTRISCAN_JWT_SECRET. The fallback only keeps local demos easy.
        self.jwt_secret: str = os.environ.get("NUTRISCAN_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("NUTRISCAN_TOKEN_TTL_DAYS") or "7")
        self.max_upload_mb: int = int(os.environ.get("NUTRISCAN_MAX_UPLOAD_MB") or "5")

        self.dev_routes: bool = _env_flag("NUTRISCAN_DEV_ROUTES", "1")
        self.debug: bool = _env_flag("NUTRISCAN_DEBUG")
        self.log_level: str = (os.environ.get("NUTRISCAN_LOG_LEVEL") or "INFO").upper()

        self.host: str = os.environ.get("NUTRISCAN_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("NUTRISCAN_PORT") or "3000")

        cors = os.environ.get("NUTRISCAN_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
