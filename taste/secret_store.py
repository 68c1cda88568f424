# taste/secret_store.py
"""
AWS Secrets Manager access for the two stats secrets.
"""

import json
import logging
from typing import Any, Dict, Optional

import boto3


class SecretStore:
    """
    Reads and overwrites JSON-encoded secrets by name.

    Botocore ClientErrors are not caught here; they fail the invocation.
    """

    def __init__(self, client=None, region_name: Optional[str] = None):
        self.client = client or boto3.client("secretsmanager", region_name=region_name)
        self.logger = logging.getLogger(self.__class__.__name__)

    def read(self, name: str) -> Dict[str, Any]:
        """Fetch a secret and decode its SecretString"""
        self.logger.debug(f"Reading secret {name}")
        response = self.client.get_secret_value(SecretId=name)
        return json.loads(response["SecretString"])

    def write(self, name: str, value: Dict[str, Any]) -> None:
        """Overwrite a secret with the JSON encoding of value"""
        self.logger.info(f"Updating secret {name}")
        self.client.update_secret(SecretId=name, SecretString=json.dumps(value))
