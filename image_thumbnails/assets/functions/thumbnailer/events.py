"""Turn S3 notifications into descriptions of newly created blobs.

Two payload shapes are understood:

* S3 event notifications, delivered straight to the function
  (``{"Records": [{"eventName": "ObjectCreated:Put", "s3": {...}}]}``)
* EventBridge events from S3 (``{"detail-type": "Object Created", "detail": {...}}``)

Object keys in both arrive URL-encoded, with ``+`` standing for a space.
"""
from dataclasses import dataclass
from typing import List
from urllib.parse import quote, unquote_plus, urlsplit

from thumbnailer.exceptions import EventError
from thumbnailer.formats import extension_of

EVENTBRIDGE_OBJECT_CREATED = "Object Created"


@dataclass(frozen=True)
class BlobCreated:
    bucket: str
    key: str
    url: str

    @property
    def name(self) -> str:
        return blob_name_from_url(self.url)

    @property
    def extension(self) -> str:
        return extension_of(self.name)

    @classmethod
    def from_encoded_key(cls, bucket: str, encoded_key: str) -> "BlobCreated":
        if not bucket or not encoded_key:
            raise EventError("Event is missing the bucket name or object key")
        key = unquote_plus(encoded_key)
        return cls(bucket=bucket, key=key, url=f"s3://{bucket}/{quote(key)}")


def _is_virtual_hosted(host: str) -> bool:
    # bucket.s3.eu-west-1.amazonaws.com / bucket.s3-eu-west-1.amazonaws.com
    host = host.split(":", 1)[0].lower()
    if host.startswith("s3.") or host.startswith("s3-"):
        return False
    return ".s3." in host or ".s3-" in host


def blob_name_from_url(url: str) -> str:
    """Return the blob name of ``url`` without scheme, host, container or query.

    Virtual folders below the container are part of the name, so
    ``https://s3.eu-west-1.amazonaws.com/uploads/cats/tom.png?v=1`` yields
    ``cats/tom.png``.
    """
    parts = urlsplit(url)
    # exactly one separator; further slashes belong to the key
    path = parts.path[1:] if parts.path.startswith("/") else parts.path
    if parts.scheme == "s3" or _is_virtual_hosted(parts.netloc):
        name = path
    else:
        _, _, name = path.partition("/")

    name = unquote_plus(name)
    if not name:
        raise EventError(f"Cannot determine blob name from URL: {url}")
    return name


def _from_s3_records(records: list) -> List[BlobCreated]:
    blobs = []
    for record in records:
        if "s3" not in record:
            continue
        event_name = record.get("eventName", "ObjectCreated")
        if not event_name.startswith("ObjectCreated"):
            continue
        s3 = record["s3"]
        blobs.append(
            BlobCreated.from_encoded_key(
                s3.get("bucket", {}).get("name"),
                s3.get("object", {}).get("key"),
            )
        )
    return blobs


def parse_event(event: dict) -> List[BlobCreated]:
    if event.get("detail-type") == EVENTBRIDGE_OBJECT_CREATED:
        detail = event.get("detail", {})
        return [
            BlobCreated.from_encoded_key(
                detail.get("bucket", {}).get("name"),
                detail.get("object", {}).get("key"),
            )
        ]

    return _from_s3_records(event.get("Records", []))
