import logging
from typing import Any, Optional

import requests

from app.config.settings import Settings
from app.exceptions import FetchError, TransportError, UpstreamError, ValidationError
from app.schemas.relay import REQUIRED_BODY_FIELDS, RelayRequest, RelayResult
from app.storage.staging import StagedFile, staged_file

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


def derive_document_name(file_url: str) -> str:
    """Return everything after the last "/" of the file URL."""
    return file_url.rsplit("/", 1)[-1]


def decode_body(response: requests.Response) -> Any:
    """Downstream body as parsed JSON, or raw text when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


class RelayService:
    """Downloads a remote file and re-uploads it to the document upload API.

    Each call to relay() owns exactly one staging file, which is removed
    before the call returns whether the upload succeeded or not.
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def validate(self, request: RelayRequest) -> None:
        """Reject the request before any I/O when a required value is empty."""
        missing = [name for name in REQUIRED_BODY_FIELDS if not getattr(request, name)]
        if missing:
            raise ValidationError("All fields are required", missing)

        missing = []
        if not request.authorization:
            missing.append("authorization")
        if not request.subscription_key:
            missing.append("subscription-key")
        if missing:
            raise ValidationError(
                "Authorization and Subscription Key headers are required", missing
            )

    def resolve_target(self, request: RelayRequest) -> str:
        return request.target_url or self.settings.default_target_url

    def relay(self, request: RelayRequest) -> RelayResult:
        """Run the full download, re-upload and cleanup sequence for one request."""
        self.validate(request)
        target_url = self.resolve_target(request)
        document_name = request.documentName or derive_document_name(request.fileUrl)
        logger.info(f"Relaying {request.fileUrl} to {target_url}")

        with staged_file(self.settings.staging_dir) as staged:
            self.fetch(request.fileUrl, staged)
            data = self.forward(request, staged, target_url, document_name)

        logger.info(f"Relay of {request.fileUrl} completed")
        return RelayResult(data=data)

    def fetch(self, file_url: str, staged: StagedFile) -> int:
        """Stream the remote file into the staging file and return bytes written."""
        written = 0
        try:
            with self.session.get(
                file_url, stream=True, timeout=self.settings.fetch_timeout
            ) as response:
                response.raise_for_status()
                with staged.open_for_write() as fh:
                    for chunk in response.iter_content(chunk_size=self.settings.chunk_size):
                        if chunk:
                            fh.write(chunk)
                            written += len(chunk)
        except (requests.RequestException, OSError) as e:
            logger.error(f"Failed to download {file_url}: {str(e)}")
            raise FetchError(f"Failed to download file: {str(e)}", e) from e

        logger.info(f"Downloaded {written} bytes from {file_url} to {staged.path}")
        return written

    def forward(
        self,
        request: RelayRequest,
        staged: StagedFile,
        target_url: str,
        document_name: str,
    ) -> Any:
        """POST the staged file and metadata as multipart form-data."""
        headers = {
            "Authorization": request.authorization,
            SUBSCRIPTION_KEY_HEADER: request.subscription_key,
        }

        try:
            with staged.open_for_read() as fh:
                response = self.session.post(
                    target_url,
                    data=request.form_fields(document_name),
                    files={"file": (document_name, fh, "application/octet-stream")},
                    headers=headers,
                    timeout=self.settings.forward_timeout,
                )
        except requests.RequestException as e:
            logger.error(f"Upload to {target_url} failed: {str(e)}")
            raise TransportError(str(e)) from e

        logger.info(f"Upload API {target_url} responded with {response.status_code}")
        body = decode_body(response)
        if not response.ok:
            raise UpstreamError(response.status_code, body)
        return body
