from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_lambda as lmbda,
    aws_sqs as sqs,
)
from constructs import Construct
from cdk_nag import NagSuppressions


class LambdaConstruct(Construct):
    """
    Python Lambda for asynchronous event sources (S3, EventBridge).

    Defaults:
    - Python 3.13 runtime
    - requirements.txt in the code path bundled into the asset
    - DLQ for events that still fail after the async retries
    - 2 async retry attempts
    - 30s timeout
    - 512 MB memory
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        function_name: str,
        handler: str,
        code_path: str,
        env: dict = None,
        layers: list = None,
        runtime: lmbda.Runtime = lmbda.Runtime.PYTHON_3_13,
        timeout: int = 30,
        memory: int = 512,
        retry_attempts: int = 2,
    ):
        super().__init__(scope, id)

        self.dlq = sqs.Queue(
            self,
            "DLQ",
            queue_name=f"{function_name}-dlq",
            retention_period=Duration.days(14),
            enforce_ssl=True
        )

        NagSuppressions.add_resource_suppressions(
            self.dlq,
            suppressions=[
                {
                    "id": "AwsSolutions-SQS3",
                    "reason": "This queue IS the dead letter queue of the function."
                },
                {
                    "id": "Serverless-SQSRedrivePolicy",
                    "reason": "Failed events are inspected and replayed by hand from this DLQ."
                }
            ]
        )

        code = lmbda.Code.from_asset(
            code_path,
            bundling=BundlingOptions(
                image=runtime.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install --no-cache-dir -r requirements.txt -t /asset-output && cp -au . /asset-output",
                ],
            ),
        )

        self.lambda_fn = lmbda.Function(
            self,
            "Lambda",
            function_name=function_name,
            handler=handler,
            runtime=runtime,
            code=code,
            timeout=Duration.seconds(timeout),
            memory_size=memory,
            environment=env or {},
            layers=layers or [],
            dead_letter_queue=self.dlq,
            retry_attempts=retry_attempts,
            tracing=lmbda.Tracing.ACTIVE,
        )

        if self.lambda_fn.role:
            NagSuppressions.add_resource_suppressions(
                self.lambda_fn.role,
                suppressions=[
                    {
                        "id": "AwsSolutions-IAM4",
                        "reason": (
                            "AWSLambdaBasicExecutionRole is the minimal AWS managed policy providing "
                            "only CloudWatch Logs access, equivalent to a least-privilege custom role."
                        )
                    },
                    {
                        "id": "AwsSolutions-IAM5",
                        "reason": (
                            "Bucket grants use object-level wildcards (bucket/*) since object keys "
                            "are only known at runtime."
                        )
                    }
                ],
                apply_to_children=True,
            )
