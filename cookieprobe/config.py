"""Runtime settings read from the environment (and ``.env`` via python-dotenv)."""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "public"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    environment: str = "development"
    public_url: str | None = None
    static_dir: Path = DEFAULT_STATIC_DIR
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.environ.get("CORS_ORIGINS", "")
        static_dir = os.environ.get("STATIC_DIR")
        return cls(
            port=_int_env("PORT", DEFAULT_PORT),
            host=os.environ.get("HOST") or "0.0.0.0",
            environment=(
                os.environ.get("NODE_ENV") or os.environ.get("APP_ENV") or "development"
            ).strip().lower(),
            public_url=os.environ.get("PUBLIC_URL") or None,
            static_dir=Path(static_dir) if static_dir else DEFAULT_STATIC_DIR,
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip())
            or DEFAULT_CORS_ORIGINS,
        )
