"""Run the service with uvicorn: ``python -m wallet_registry``."""

import uvicorn

from wallet_registry.core.config import get_settings
from wallet_registry.core.logging import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "wallet_registry.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
