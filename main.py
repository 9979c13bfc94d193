"""Main entry point for the testnet faucet assistant."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from faucet_core.api import create_fastapi_app
from faucet_core.logging_config import setup_logging
from faucet_sim import Sim


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent
    load_dotenv(project_root / ".env")
    setup_logging()

    # Get configuration from environment
    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8000"))
    api_url = f"http://{api_host}:{api_port}"

    # SIM talks to this same server over HTTP
    from faucet_core.api.routes import control
    control.set_sim_instance(Sim(api_url=api_url))

    app = create_fastapi_app()

    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
