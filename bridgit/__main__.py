import uvicorn

from bridgit.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bridgit.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
