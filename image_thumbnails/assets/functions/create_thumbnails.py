import os
from functools import lru_cache

from aws_lambda_powertools import Logger, Tracer, Metrics
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from thumbnailer.config import SERVICE_NAME, get_settings
from thumbnailer.events import parse_event
from thumbnailer.service import ThumbnailService

logger = Logger(service=SERVICE_NAME)
tracer = Tracer(service=SERVICE_NAME)
metrics = Metrics(
    namespace=os.getenv("POWERTOOLS_METRICS_NAMESPACE", "ImageThumbnails"),
    service=SERVICE_NAME,
)


@lru_cache()
def get_service() -> ThumbnailService:
    return ThumbnailService.from_settings(get_settings())


#lambda triggered by S3 object creation
@logger.inject_lambda_context
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    processed = []
    skipped = []

    try:
        blobs = parse_event(event)
        logger.info(f"Received event with {len(blobs)} created objects")

        service = get_service()
        for blob in blobs:
            logger.append_keys(source=blob.url)
            keys = service.process(blob)
            if keys:
                processed.extend(keys)
                metrics.add_metric(name="ThumbnailsCreated", unit=MetricUnit.Count, value=len(keys))
            else:
                skipped.append(blob.url)
                metrics.add_metric(name="SkippedImages", unit=MetricUnit.Count, value=1)
    except Exception as e:
        logger.exception(f"Error creating thumbnails: {str(e)}")
        raise
    finally:
        logger.remove_keys(["source"])

    return {"processed": processed, "skipped": skipped}
