from aws_cdk import (
    Stack,
    CfnOutput,
    aws_lambda as lmbda,
    aws_s3 as s3,
    aws_s3_notifications as s3n,
)
from constructs import Construct

from cdk_constructs.bucket import S3BucketConstruct
from cdk_constructs.lmbda_construct import LambdaConstruct


DEFAULT_WIDTHS = {
    "small": 100,
    "medium": 320,
    "large": 640,
}


class ImageThumbnailsStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        widths = {
            tier: str(self.node.try_get_context(f"thumbnail_width_{tier}") or default)
            for tier, default in DEFAULT_WIDTHS.items()
        }

        upload_bucket = S3BucketConstruct(self, "UploadImagesBucket").bucket
        thumbnail_bucket = S3BucketConstruct(self, "ThumbnailsBucket").bucket

        #PowerTools Layer
        powertools_layer = lmbda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            self.node.try_get_context("powertools_layer_arn")
            or "arn:aws:lambda:eu-west-1:017000801446:layer:AWSLambdaPowertoolsPythonV2:79"
        )

        thumbnail_construct = LambdaConstruct(
            self, "CreateThumbnailsLambda",
            function_name="create_thumbnails",
            handler="create_thumbnails.lambda_handler",
            code_path="image_thumbnails/assets/functions",
            layers=[powertools_layer],
            env={
                "THUMBNAIL_WIDTH_SMALL": widths["small"],
                "THUMBNAIL_WIDTH_MEDIUM": widths["medium"],
                "THUMBNAIL_WIDTH_LARGE": widths["large"],
                "THUMBNAIL_BUCKET_NAME": thumbnail_bucket.bucket_name,
                "POWERTOOLS_SERVICE_NAME": "image-thumbnails",
                "POWERTOOLS_METRICS_NAMESPACE": "ImageThumbnails",
            },
        )
        thumbnail_lambda = thumbnail_construct.lambda_fn

        upload_bucket.grant_read(thumbnail_lambda)
        thumbnail_bucket.grant_put(thumbnail_lambda)

        upload_bucket.add_event_notification(
            s3.EventType.OBJECT_CREATED,
            s3n.LambdaDestination(thumbnail_lambda)
        )

        CfnOutput(self, "UploadBucketName", value=upload_bucket.bucket_name)
        CfnOutput(self, "ThumbnailBucketName", value=thumbnail_bucket.bucket_name)
        CfnOutput(self, "ThumbnailDLQUrl", value=thumbnail_construct.dlq.queue_url)
