"""Run the Pulse Ledger API with uvicorn on HOST:PORT."""

import uvicorn

from pulse_ledger.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "pulse_ledger.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
