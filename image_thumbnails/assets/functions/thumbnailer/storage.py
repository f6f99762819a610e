from typing import Optional

import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from thumbnailer.config import SERVICE_NAME, Settings, Tier
from thumbnailer.transform import Thumbnail

logger = Logger(service=SERVICE_NAME, child=True)

_MISSING_OBJECT_CODES = {"NoSuchKey", "404", "NotFound"}


def create_s3_client(settings: Settings):
    return boto3.client(
        "s3",
        region_name=settings.AWS_REGION,
        endpoint_url=settings.AWS_ENDPOINT_URL,
    )


class SourceReader:
    """Reads the content of newly created source blobs."""

    def __init__(self, s3_client):
        self.s3_client = s3_client

    def read(self, bucket: str, key: str) -> Optional[bytes]:
        """Return the object's bytes, or None when it no longer exists."""
        try:
            response = self.s3_client.get_object(Bucket=bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_OBJECT_CODES:
                logger.info(f"Source object s3://{bucket}/{key} no longer exists")
                return None
            raise
        return response["Body"].read()


class ThumbnailSink:
    """Uploads rendered thumbnails under ``<tier>/<name>`` in the thumbnail bucket."""

    def __init__(self, s3_client, bucket_name: str):
        self.s3_client = s3_client
        self.bucket_name = bucket_name

    @staticmethod
    def key_for(tier: Tier, name: str) -> str:
        return f"{tier.value}/{name}"

    def write(self, thumbnail: Thumbnail, name: str) -> str:
        key = self.key_for(thumbnail.tier, name)
        self.s3_client.put_object(
            Bucket=self.bucket_name,
            Key=key,
            Body=thumbnail.buffer,
            ContentType=thumbnail.encoder.content_type,
        )
        logger.info(f"Uploaded thumbnail to s3://{self.bucket_name}/{key}")
        return key
