from enum import Enum
from typing import Optional


class Encoder(Enum):
    PNG = "PNG"
    JPEG = "JPEG"
    GIF = "GIF"

    @property
    def content_type(self) -> str:
        return f"image/{self.value.lower()}"


_ENCODERS = {
    "gif": Encoder.GIF,
    "png": Encoder.PNG,
    "jpg": Encoder.JPEG,
    "jpeg": Encoder.JPEG,
}


def resolve_encoder(extension: Optional[str]) -> Optional[Encoder]:
    """Return the encoder for a file extension, or None when unsupported.

    Leading dots are ignored and matching is case-insensitive, so ``.PNG``,
    ``png`` and ``Png`` all resolve to :attr:`Encoder.PNG`.
    """
    if not extension:
        return None
    return _ENCODERS.get(extension.lstrip(".").lower())


def extension_of(name: str) -> str:
    """Return the final ``.suffix`` of the last path segment of ``name``, or "".

    A leading dot counts, so ``cats/.png`` has the extension ``.png``.
    """
    _, dot, extension = name.rpartition("/")[2].rpartition(".")
    return dot + extension
