import uvicorn

from lesson_plan_ai.config import get_settings


def run() -> None:
    """Serve the API on HOST/PORT, reloading on change in development."""
    settings = get_settings()
    uvicorn.run(
        "lesson_plan_ai.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
