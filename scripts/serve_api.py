from __future__ import annotations

import uvicorn

from tierwise.apps.api.main import create_app
from tierwise.core.config import get_settings


def main() -> None:
    # Serve the analysis API with env-driven host/port settings.
    settings = get_settings()
    uvicorn.run(create_app(), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
