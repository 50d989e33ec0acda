# azure_blob.py
"""
Property photo storage in Azure Blob Storage.
"""
import logging
import os
import uuid
from functools import lru_cache

from azure.storage.blob import BlobServiceClient, ContentSettings

import config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_blob_service() -> BlobServiceClient:
     """Shared client, created on first use."""
     return BlobServiceClient.from_connection_string(
          f"DefaultEndpointsProtocol=https;"
          f"AccountName={config.AZURE_STORAGE_ACCOUNT};"
          f"AccountKey={config.AZURE_STORAGE_KEY};"
          f"EndpointSuffix=core.windows.net"
     )


def upload_to_blob(file, container: str = config.AZURE_PHOTO_CONTAINER, prefix: str = "properties") -> str:
     """
     Upload an UploadFile under a fresh unique name and return its public URL.
     """
     ext = os.path.splitext(file.filename or "")[1]
     filename = f"{prefix}/{uuid.uuid4()}{ext}"
     blob_client = get_blob_service().get_blob_client(container=container, blob=filename)
     blob_client.upload_blob(
          file.file,
          overwrite=True,
          content_settings=ContentSettings(content_type=file.content_type),
     )
     logger.info("Uploaded %s to %s/%s", file.filename, container, filename)
     return f"https://{config.AZURE_STORAGE_ACCOUNT}.blob.core.windows.net/{container}/{filename}"


def delete_from_blob(blob_url: str) -> None:
     """
     Deletes a file from Azure Blob Storage using its full URL
     """
     account_prefix = f"https://{config.AZURE_STORAGE_ACCOUNT}.blob.core.windows.net/"
     container, _, blob_name = blob_url.removeprefix(account_prefix).partition("/")
     blob_client = get_blob_service().get_blob_client(container=container, blob=blob_name)
     blob_client.delete_blob()
