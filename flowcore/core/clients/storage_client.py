# ============================================
# core/clients/storage_client.py
# ============================================
import logging
import requests
from typing import Optional

from core.config import ServiceConfig
from core.errors import UpstreamError

logger = logging.getLogger(__name__)


class StorageClient:
    """Client for the object store that hosts card attachments"""

    def __init__(self, config: ServiceConfig):
        self.upload_url = config.storage_upload_url
        self.api_key = config.storage_api_key
        self.timeout = config.storage_timeout

    def _headers(self) -> dict:
        if not self.api_key:
            return {}
        return {'Authorization': f'Bearer {self.api_key}'}

    def upload(self, *, content: bytes, filename: str, content_type: str, folder: Optional[str] = None) -> str:
        """
        Upload one file.
        Returns the stable public URL reported by the store.
        """
        if not self.upload_url:
            raise UpstreamError("Attachment storage is not configured")

        data = {'folder': folder} if folder else None
        try:
            response = requests.post(
                self.upload_url,
                files={'file': (filename, content, content_type)},
                data=data,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            url = response.json().get('url')
        except (requests.RequestException, ValueError) as e:
            logger.error("Error uploading %s: %s", filename, e)
            raise UpstreamError(f"Failed to upload {filename}")

        if not url:
            logger.error("Upload of %s returned no url", filename)
            raise UpstreamError(f"Failed to upload {filename}")
        return url
