import uvicorn

from .core.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run("mflix.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
