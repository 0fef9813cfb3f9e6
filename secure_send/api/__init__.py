"""
Upload transport layer.

Provides async multipart submission to the upload endpoint.
"""

from secure_send.api.http_client import AsyncHttpClient, sanitize_for_log
from secure_send.api.upload import submit_upload

__all__ = ["AsyncHttpClient", "sanitize_for_log", "submit_upload"]
