"""Rabbit hole (document ingestion) sub-client."""

from typing import Optional

from .dispatch import FileInput, ResourceClient
from .models import AllowedMimeTypesResponse, UploadFromURLPayload, UploadMemoryResponse, UploadResponse
from .types import HTTPMethod


class RabbitHoleClient(ResourceClient):
    """
    Sub-client for the ``/rabbit_hole`` endpoints.

    Example:
        with CCatClient() as client:
            client.rabbit_hole.upload("manual.pdf", chunk_size=512, chunk_overlap=64)
            client.rabbit_hole.upload_from_url("https://cheshirecat.ai")
    """

    resource = "rabbit_hole"

    def upload(
        self,
        file: Optional[FileInput],
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
    ) -> UploadResponse:
        """
        Ingest a document into declarative memory.

        Args:
            file: Open binary file object or path of the document
            chunk_size: Maximum length of each chunk (None = server default)
            chunk_overlap: Overlap between consecutive chunks (None = server default)

        Raises:
            UploadMissingFileError: No file was given
        """
        return self._upload(
            HTTPMethod.POST,
            "upload",
            file,
            extra_fields={"chunk_size": chunk_size, "chunk_overlap": chunk_overlap},
            response_type=UploadResponse,
        )

    def upload_from_url(
        self,
        url: str,
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
    ) -> UploadResponse:
        """Ingest the content of a web page into declarative memory."""
        payload = UploadFromURLPayload(url=url, chunk_size=chunk_size, chunk_overlap=chunk_overlap)
        return self._request(HTTPMethod.POST, "upload", payload=payload, response_type=UploadResponse)

    def upload_memory(self, file: Optional[FileInput]) -> UploadMemoryResponse:
        """Import a JSON memory export."""
        return self._upload(HTTPMethod.POST, "memory", file, response_type=UploadMemoryResponse)

    def get_allowed_mime_types(self) -> AllowedMimeTypesResponse:
        """List the MIME types accepted by :meth:`upload`."""
        return self._request(HTTPMethod.GET, "allowed-mimetypes", response_type=AllowedMimeTypesResponse)
