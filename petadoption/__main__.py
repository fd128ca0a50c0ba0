"""Run the site with uvicorn: python -m petadoption"""

import uvicorn

from petadoption.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("petadoption.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
