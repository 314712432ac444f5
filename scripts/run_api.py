import logging
import os
import subprocess
import sys
from pathlib import Path

from fleet_builder.config.settings import get_settings


def main():
    project_root = Path(__file__).parent.parent
    os.chdir(project_root)
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Starting Fleet Builder API (FastAPI)...")
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "fleet_builder.api.main:app",
            "--host", settings.api_host,
            "--port", str(settings.api_port),
            "--log-level", settings.log_level.lower(),
            "--reload"
        ])
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
