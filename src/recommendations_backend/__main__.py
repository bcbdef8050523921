"""Run the API with uvicorn: ``python -m recommendations_backend``."""

from __future__ import annotations

import uvicorn

from recommendations_backend.config import get_settings


def main() -> None:
    api = get_settings().api
    uvicorn.run(
        "recommendations_backend.main:app",
        host=api.host,
        port=api.port,
        reload=api.reload,
        log_level=get_settings().logging.level.lower(),
    )


if __name__ == "__main__":
    main()
