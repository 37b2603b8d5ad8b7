"""
App assembly entry point.

Re-exports the FastAPI `app` from `camp.api.main`; `python app.py` serves it
with uvicorn on SERVER_HOST:SERVER_PORT.
"""

from camp.api.main import app  # noqa: F401
from camp.utils.config import get_settings


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "camp.api.main:app",
        host=settings["server_host"],
        port=settings["server_port"],
        log_level=settings["log_level"].lower(),
    )


if __name__ == "__main__":
    main()
