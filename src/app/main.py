"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn app.main:app --reload

    # Production
    uvicorn app.main:app --host 0.0.0.0 --workers 4

Every request reads the caller's lists from Redis, so each worker sees
the writes of the others.
"""

from app.factory import create_app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    from app.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )
