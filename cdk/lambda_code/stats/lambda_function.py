import json
import logging
import sys
from typing import Any, Dict

# Add the shared layer to Python path
sys.path.append('/opt/python')

from taste.config import Settings
from taste.handler import RequestHandler
from taste.secret_store import SecretStore

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def build_handler() -> RequestHandler:
    """Wire the handler against the real Secrets Manager"""
    settings = Settings.from_env()
    logger.setLevel(settings.log_level)
    secret_store = SecretStore(region_name=settings.aws_region)
    return RequestHandler(secret_store, settings)


def lambda_handler(event, context) -> Dict[str, Any]:
    """
    Return Spotify genres and the Goodreads currently-reading shelf.

    The event carries no parameters. Expected response:
    {
        "statusCode": 200,
        "body": {
            "books": [{"title": ..., "author": ..., "image": ..., "url": ...}],
            "music": [{"value": "icelandic rock", "count": 100}]
        }
    }

    Failures are logged and re-raised so Lambda reports the invocation as failed.
    """
    try:
        handler = build_handler()
        logger.info(f"Stats invoked: {json.dumps(event, default=str)}")
        result = handler.handle()
    except Exception as e:
        logger.error(f"Stats failed: {e}", exc_info=True)
        raise

    logger.info("Stats completed")
    return result
