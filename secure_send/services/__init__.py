"""
Business logic services for Secure Send.
"""

from secure_send.services.upload_service import UploadService

__all__ = [
    "UploadService",
]
