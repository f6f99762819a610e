"""Decode, resize and re-encode source images.

Each tier is rendered from its own decode of the source bytes, so no decoded
image is shared between tiers. All tiers are rendered before anything is
uploaded: a corrupt source or a degenerate target width fails the whole blob.
"""
import io
from dataclasses import dataclass
from typing import List, Mapping

from aws_lambda_powertools import Logger
from PIL import Image, UnidentifiedImageError

from thumbnailer.config import SERVICE_NAME, Tier
from thumbnailer.exceptions import ImageDecodeError, ImageEncodeError
from thumbnailer.formats import Encoder
from thumbnailer.sizing import divisor_for, plan_dimensions

logger = Logger(service=SERVICE_NAME, child=True)

# Modes each encoder cannot store directly; these are converted to RGB first
_CONVERT_TO_RGB = {
    Encoder.JPEG: {"RGBA", "LA", "P", "PA", "I", "I;16", "F"},
    Encoder.PNG: {"CMYK", "YCbCr"},
    Encoder.GIF: {"CMYK", "YCbCr"},
}


@dataclass(frozen=True)
class Thumbnail:
    tier: Tier
    width: int
    height: int
    encoder: Encoder
    buffer: io.BytesIO


def decode_image(data: bytes) -> Image.Image:
    """Fully decode ``data`` into a Pillow image."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
        raise ImageDecodeError(f"Cannot decode source image: {e}") from e
    return image


def render_thumbnail(
    data: bytes,
    tier: Tier,
    width: int,
    encoder: Encoder,
    *,
    jpeg_quality: int = 75,
) -> Thumbnail:
    with decode_image(data) as image:
        target_width, target_height = plan_dimensions(image.width, image.height, width)
        logger.info(
            f"Input image (w x h): {image.width} x {image.height}, "
            f"divisor: {divisor_for(image.width, width)}, "
            f"new size (w x h): {target_width} x {target_height}",
            extra={"tier": tier.value},
        )

        resized = image.resize((target_width, target_height), Image.Resampling.LANCZOS)
        output = io.BytesIO()
        options = {"quality": jpeg_quality} if encoder is Encoder.JPEG else {}
        try:
            if resized.mode in _CONVERT_TO_RGB[encoder]:
                resized = resized.convert("RGB")
            resized.save(output, format=encoder.value, **options)
        except (OSError, ValueError) as e:
            raise ImageEncodeError(
                f"Cannot encode {resized.mode} image as {encoder.value}: {e}"
            ) from e
        output.seek(0)

    return Thumbnail(
        tier=tier,
        width=target_width,
        height=target_height,
        encoder=encoder,
        buffer=output,
    )


def render_thumbnails(
    data: bytes,
    widths: Mapping[Tier, int],
    encoder: Encoder,
    *,
    jpeg_quality: int = 75,
) -> List[Thumbnail]:
    return [
        render_thumbnail(data, tier, width, encoder, jpeg_quality=jpeg_quality)
        for tier, width in widths.items()
    ]
