from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from railfinder.adapters.aws import s3_client
from railfinder.domain.exceptions import CatalogUnavailable

from .json_document_repository import JsonDocumentRepository


@dataclass(slots=True)
class S3JsonRepository(JsonDocumentRepository):
    """Loads the JSON data documents from an S3 bucket.

    Env vars:
      - RAILFINDER_DATA_BUCKET: bucket name (required)
      - RAILFINDER_DATA_PREFIX: key prefix (default: data)
      - ENDPOINT_URL (preferred for LocalStack)
      - AWS_REGION
    """

    bucket: str | None = None
    prefix: str | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("RAILFINDER_DATA_BUCKET")
        if not value:
            raise CatalogUnavailable("Missing RAILFINDER_DATA_BUCKET")
        return value

    def _prefix(self) -> str:
        return (
            self.prefix
            if self.prefix is not None
            else os.getenv("RAILFINDER_DATA_PREFIX", "data")
        ).strip("/")

    def _key(self, name: str) -> str:
        prefix = self._prefix()
        return f"{prefix}/{name}" if prefix else name

    def read_document(self, name: str) -> Any:
        bucket = self._bucket()
        key = self._key(name)
        try:
            obj = s3_client().get_object(Bucket=bucket, Key=key)
            body = obj["Body"].read()
            return json.loads(body)
        except (ClientError, BotoCoreError, json.JSONDecodeError) as exc:
            raise CatalogUnavailable(f"s3://{bucket}/{key}: {exc}") from exc
