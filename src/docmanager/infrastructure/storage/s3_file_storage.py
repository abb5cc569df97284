"""
S3 implementation of the file-storage port.

Presigning is computed locally from the client's credentials; no request is
sent to S3 until the client uses the URL.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from docmanager.application.ports import UPLOAD_URL_TTL_SECONDS
from docmanager.core.errors import StoreError

logger = logging.getLogger(__name__)

LOCAL_ENDPOINT_URL = "http://host.docker.internal:4566"
LOCAL_REGION = "us-east-1"


def create_s3_client(
    *,
    region: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    local: bool = False,
) -> Any:
    """
    Build an S3 client.

    ``local=True`` targets a LocalStack-style endpoint with static test
    credentials, unless an explicit endpoint/credentials are given.
    """
    if local:
        endpoint_url = endpoint_url or LOCAL_ENDPOINT_URL
        region = region or LOCAL_REGION
        access_key_id = access_key_id or "test"
        secret_access_key = secret_access_key or "test"

    return boto3.client(
        "s3",
        region_name=region,
        endpoint_url=endpoint_url or None,
        aws_access_key_id=access_key_id or None,
        aws_secret_access_key=secret_access_key or None,
        config=Config(
            signature_version="s3v4",
            s3={"addressing_style": "path"} if endpoint_url else {},
        ),
    )


class S3FileStorage:
    """Issues presigned PUT URLs for objects in one bucket."""

    def __init__(
        self,
        bucket_name: str,
        *,
        client: Any = None,
        expires_in: int = UPLOAD_URL_TTL_SECONDS,
    ):
        self.bucket_name = bucket_name
        self.expires_in = expires_in
        self._client = client or create_s3_client()

    def generate_presigned_upload_url(self, key: str) -> Tuple[str, str]:
        if not self.bucket_name:
            raise StoreError(message="upload bucket is not configured", context={"key": key})
        try:
            url = self._client.generate_presigned_url(
                "put_object",
                Params={"Bucket": self.bucket_name, "Key": key},
                ExpiresIn=self.expires_in,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StoreError(
                message=f"failed to presign put object: {exc}",
                context={"bucket": self.bucket_name, "key": key},
            ) from exc
        logger.debug("Presigned PUT for s3://%s/%s (%ss)", self.bucket_name, key, self.expires_in)
        return url, key
