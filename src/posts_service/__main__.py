import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "posts_service.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
