"""File records whose content is uploaded to an S3 bucket."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from saaskit.filestore.record import Record, RecordModel, Records

logger = logging.getLogger(__name__)

_WAIT_DELAY_SECONDS = 5
_WAIT_MAX_ATTEMPTS = 12


def _error_code(exc: BaseException) -> str | None:
    response = getattr(exc, "response", None)
    if not isinstance(response, dict):
        return None
    error = response.get("Error")
    if not isinstance(error, dict):
        return None
    return error.get("Code")


@dataclass
class S3Bucket:
    """A named bucket reached through an S3 client."""

    s3_client: Any
    name: str

    def upload_file(self, object_key: str, path_to_file: str | Path) -> None:
        """Upload a file under ``object_key`` and wait until it exists."""
        try:
            file = Path(path_to_file).open("rb")
        except OSError as exc:
            logger.error(
                "Couldn't open file %s to upload. Here's why: %s", path_to_file, exc
            )
            raise
        with file:
            try:
                self.s3_client.put_object(Bucket=self.name, Key=object_key, Body=file)
            except Exception as exc:
                if _error_code(exc) == "EntityTooLarge":
                    logger.error(
                        "Error while uploading object to %s. The object is too large. "
                        "To upload objects larger than 5GB, use the S3 console "
                        "(160GB max) or the multipart upload API (5TB max).",
                        self.name,
                    )
                else:
                    logger.error(
                        "Couldn't upload file %s to %s:%s. Here's why: %s",
                        path_to_file,
                        self.name,
                        object_key,
                        exc,
                    )
                raise
        try:
            self.s3_client.get_waiter("object_exists").wait(
                Bucket=self.name,
                Key=object_key,
                WaiterConfig={
                    "Delay": _WAIT_DELAY_SECONDS,
                    "MaxAttempts": _WAIT_MAX_ATTEMPTS,
                },
            )
        except Exception:
            logger.error("Failed attempt to wait for object %s to exist.", object_key)
            raise


@dataclass
class AmazonS3Records(Records):
    """Uploads each record's file to a bucket before storing the record."""

    s3_bucket: S3Bucket
    records: Records

    def add(self, model: RecordModel) -> Record:
        self.s3_bucket.upload_file(model.name.slug, model.url)
        return self.records.add(model)


def amazon_s3_records_from_client(
    s3_client: Any, bucket_name: str, records: Records
) -> AmazonS3Records:
    """Records uploaded to ``bucket_name`` through ``s3_client``."""
    return AmazonS3Records(S3Bucket(s3_client, bucket_name), records)