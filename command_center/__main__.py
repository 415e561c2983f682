"""Run the MDO Command Center API with uvicorn."""

import uvicorn

from command_center.core.config import get_settings


def main() -> None:
    """Serve ``command_center.main:app`` on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "command_center.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_config=None,
    )


if __name__ == "__main__":
    main()
