import uvicorn

from tasktracker.core.config import settings


def main() -> None:
    uvicorn.run(
        "tasktracker.main:app",
        host=settings.http_host,
        port=settings.http_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
