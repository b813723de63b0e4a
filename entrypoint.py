"""Backend entrypoint: starts uvicorn with host/port from settings."""
import uvicorn

from wholesale.config.settings import get_settings
from wholesale.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
