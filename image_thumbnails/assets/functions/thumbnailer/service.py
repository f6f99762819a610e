from typing import List

from aws_lambda_powertools import Logger, Tracer

from thumbnailer.config import SERVICE_NAME, Settings
from thumbnailer.events import BlobCreated
from thumbnailer.formats import resolve_encoder
from thumbnailer.storage import SourceReader, ThumbnailSink, create_s3_client
from thumbnailer.transform import render_thumbnails

logger = Logger(service=SERVICE_NAME, child=True)
tracer = Tracer(service=SERVICE_NAME)


class ThumbnailService:
    """Creates the small, medium and large thumbnails of one source blob."""

    def __init__(self, settings: Settings, reader: SourceReader, sink: ThumbnailSink):
        self.settings = settings
        self.reader = reader
        self.sink = sink

    @classmethod
    def from_settings(cls, settings: Settings) -> "ThumbnailService":
        s3_client = create_s3_client(settings)
        return cls(
            settings,
            SourceReader(s3_client),
            ThumbnailSink(s3_client, settings.THUMBNAIL_BUCKET_NAME),
        )

    @tracer.capture_method
    def process(self, blob: BlobCreated) -> List[str]:
        """Render and upload every tier of ``blob``; return the uploaded keys.

        Unsupported formats and sources that disappeared before processing
        are skipped and return an empty list.
        """
        encoder = resolve_encoder(blob.extension)
        if encoder is None:
            logger.info(f"No encoder support for: {blob.url}")
            return []

        data = self.reader.read(blob.bucket, blob.key)
        if data is None:
            return []

        widths = self.settings.tier_widths()
        for tier, width in widths.items():
            logger.info(f"Thumbnail width {tier.value}: {width}")

        thumbnails = render_thumbnails(
            data, widths, encoder, jpeg_quality=self.settings.JPEG_QUALITY
        )
        name = blob.name
        return [self.sink.write(thumbnail, name) for thumbnail in thumbnails]
