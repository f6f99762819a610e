import io
import os
import uuid
from unittest.mock import patch

import boto3
import pytest
from moto import mock_aws
from PIL import Image

SOURCE_BUCKET = "upload-images"
THUMBNAIL_BUCKET = "thumbnails"
REGION = "eu-west-1"


@pytest.fixture
def mock_environment_variables():
    env_vars = {
        "THUMBNAIL_WIDTH_SMALL": "100",
        "THUMBNAIL_WIDTH_MEDIUM": "250",
        "THUMBNAIL_WIDTH_LARGE": "500",
        "THUMBNAIL_BUCKET_NAME": THUMBNAIL_BUCKET,
        "AWS_REGION": REGION,
    }

    with patch.dict(os.environ, env_vars):
        from thumbnailer.config import get_settings
        import create_thumbnails

        get_settings.cache_clear()
        create_thumbnails.get_service.cache_clear()
        yield env_vars
        get_settings.cache_clear()
        create_thumbnails.get_service.cache_clear()


@pytest.fixture
def s3_client():
    with mock_aws():
        client = boto3.client("s3", region_name=REGION)
        for bucket in (SOURCE_BUCKET, THUMBNAIL_BUCKET):
            client.create_bucket(
                Bucket=bucket,
                CreateBucketConfiguration={"LocationConstraint": REGION},
            )
        yield client


@pytest.fixture
def make_image():
    def _make_image(size=(1000, 600), fmt="PNG", mode="RGB"):
        image = Image.linear_gradient("L").resize(size).convert(mode)
        buffer = io.BytesIO()
        image.save(buffer, format=fmt)
        return buffer.getvalue()
    return _make_image


@pytest.fixture
def s3_event():
    def _s3_event(key, bucket=SOURCE_BUCKET, event_name="ObjectCreated:Put"):
        return {
            "Records": [
                {
                    "eventVersion": "2.1",
                    "eventSource": "aws:s3",
                    "awsRegion": REGION,
                    "eventName": event_name,
                    "s3": {
                        "s3SchemaVersion": "1.0",
                        "bucket": {"name": bucket, "arn": f"arn:aws:s3:::{bucket}"},
                        "object": {"key": key, "size": 1024},
                    },
                }
            ]
        }
    return _s3_event


@pytest.fixture
def lambda_context():
    class MockContext:
        def __init__(self):
            self.function_name = "create_thumbnails"
            self.function_version = "$LATEST"
            self.invoked_function_arn = "arn:aws:lambda:eu-west-1:123456789012:function:create_thumbnails"
            self.memory_limit_in_mb = 512
            self.remaining_time_in_millis = lambda: 30000
            self.log_group_name = "/aws/lambda/create_thumbnails"
            self.log_stream_name = "2023/01/01/[$LATEST]test"
            self.aws_request_id = str(uuid.uuid4())

    return MockContext()
