"""Thumbnail generation for images uploaded to S3."""
