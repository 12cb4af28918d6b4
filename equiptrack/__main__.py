import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run("equiptrack.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
