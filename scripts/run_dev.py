"""
Development server launcher.

Loads the .env file, checks that the record files in ``DATA_DIR`` load
cleanly, then runs FastAPI with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--port 8000] [--data-dir data]
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file before settings are imported
from dotenv import load_dotenv

load_dotenv()


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the training analytics API in reload mode.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--data-dir", help="Directory holding the JSON record files (overrides DATA_DIR)")
    args = parser.parse_args()

    if args.data_dir:
        os.environ["DATA_DIR"] = args.data_dir

    import uvicorn

    from app.core.config import settings
    from app.core.logging_config import configure_logging
    from app.db.loader import DataLoadError, load_store

    configure_logging()
    try:
        counts = load_store(settings.DATA_DIR).counts()
    except DataLoadError as e:
        print(f"Cannot start: {e}", file=sys.stderr)
        return 1

    print(f"Records: {counts['profiles']} profiles, {counts['sessions']} sessions, "
          f"{counts['appointments']} appointments ({settings.DATA_DIR})")
    print(f"API:  http://localhost:{args.port}/api/v1")
    print(f"Docs: http://localhost:{args.port}/docs")

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=True, log_level=settings.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
