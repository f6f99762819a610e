from typing import Optional

from constructs import Construct
from aws_cdk import (
    Duration,
    RemovalPolicy,
    aws_s3 as s3,
)
from cdk_nag import NagSuppressions


class S3BucketConstruct(Construct):
    """
    Creates a private image bucket with public access fully blocked.

    - Public access block enabled
    - S3-managed encryption
    - SSL enforced
    - Optional expiry of stored objects
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        bucket_name: Optional[str] = None,
        expire_after_days: Optional[int] = None,
    ) -> None:
        super().__init__(scope, id)

        lifecycle_rules = []
        if expire_after_days:
            lifecycle_rules.append(
                s3.LifecycleRule(expiration=Duration.days(expire_after_days))
            )

        self.bucket = s3.Bucket(
            self,
            "Bucket",
            bucket_name=bucket_name,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            encryption=s3.BucketEncryption.S3_MANAGED,
            enforce_ssl=True,
            lifecycle_rules=lifecycle_rules,
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
        )

        NagSuppressions.add_resource_suppressions(
            self.bucket,
            suppressions=[
                {
                    "id": "AwsSolutions-S1",
                    "reason": "Image buckets are written only by the upload client and the thumbnail Lambda; "
                    "CloudTrail data events cover access auditing.",
                }
            ],
        )
