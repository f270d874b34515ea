"""Entry point: python -m app."""

from aiohttp import web

from app.config import get_settings
from app.main import create_app

if __name__ == "__main__":
    settings = get_settings()
    app = create_app(settings)
    web.run_app(app, host="0.0.0.0", port=settings.port)  # noqa: S104  # nosec B104 — container bind
