from typing import Tuple

from thumbnailer.exceptions import SizingError


def divisor_for(source_width: int, target_width: int) -> int:
    """Integer scale factor between the source and the target width."""
    if target_width <= 0:
        raise SizingError(f"Target width must be positive, got {target_width}")
    if target_width >= source_width:
        raise SizingError(
            f"Target width {target_width} is not smaller than source width {source_width}"
        )
    return source_width // target_width


def plan_dimensions(source_width: int, source_height: int, target_width: int) -> Tuple[int, int]:
    """Return the (width, height) of a thumbnail ``target_width`` pixels wide.

    The height is the source height divided by :func:`divisor_for`, rounded
    half away from zero. Inputs are positive so this is
    ``floor(height / divisor + 0.5)``, done in integers to stay exact.
    """
    if source_width <= 0 or source_height <= 0:
        raise SizingError(f"Invalid source size {source_width}x{source_height}")

    divisor = divisor_for(source_width, target_width)
    height = (2 * source_height + divisor) // (2 * divisor)
    if height < 1:
        raise SizingError(
            f"Source {source_width}x{source_height} is too short for a {target_width}px wide thumbnail"
        )
    return target_width, height
