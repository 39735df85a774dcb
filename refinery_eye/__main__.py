from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .core.config import get_settings


def main() -> None:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    settings = get_settings()
    uvicorn.run(
        "refinery_eye.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
