# run_stats.py
"""
Runs the stats handler locally against the real secrets and APIs.

Needs AWS credentials that can read (and, on refresh, update) both secrets,
plus GOODREADS_USER_ID in the environment.
"""
import json
import logging
import sys
import os

# Add the project root to the Python path to allow for correct module imports
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from taste import RequestHandler, SecretStore, Settings


def run_stats(handler: RequestHandler) -> str:
    """
    Invoke the handler once and return the payload as indented JSON.
    """
    result = handler.handle()
    return json.dumps(result, indent=4, ensure_ascii=False)


def main() -> None:
    settings = Settings.from_env()

    # Configure basic logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    handler = RequestHandler(SecretStore(region_name=settings.aws_region), settings)

    print(run_stats(handler))


if __name__ == "__main__":
    main()
