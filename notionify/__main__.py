"""Run the service with ``python -m notionify``."""

import uvicorn

from notionify.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "notionify.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
