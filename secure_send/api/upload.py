"""Upload endpoint."""

from secure_send.api.http_client import AsyncHttpClient
from secure_send.models.upload import UploadRequest

ENCRYPTED_FILE_NAME = "blob"
ENCRYPTED_FILE_CONTENT_TYPE = "application/octet-stream"


async def submit_upload(http: AsyncHttpClient, url: str, request: UploadRequest) -> None:
    """
    Send one upload request as multipart/form-data.

    Parts: ``encryptedFile`` (packed payload), ``originalName``,
    ``receiverEmail`` and ``password`` (hex digest, never the passphrase).
    """
    await http.post_multipart(
        url,
        data={
            "originalName": request.original_name,
            "receiverEmail": request.receiver_email,
            "password": request.password_digest,
        },
        files={
            "encryptedFile": (
                ENCRYPTED_FILE_NAME,
                request.encrypted_payload.to_bytes(),
                ENCRYPTED_FILE_CONTENT_TYPE,
            ),
        },
    )
