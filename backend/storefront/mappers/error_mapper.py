"""
Error envelope mapper

Recognizes the two error shapes the API produces:
    {"error": "unauthorized", "message": "..."}
    {"code": "rest_invalid_param", "message": "...", "data": {"status": 400}}
"""
import json
from typing import Optional

from storefront.core.exceptions import RemoteError

_REST_ERROR_KEYS = {"code", "message", "data", "additional_errors"}


class RemoteErrorMapper:
    """Returns a RemoteError for error-shaped payloads, None otherwise"""

    def map(self, response: bytes) -> Optional[RemoteError]:
        try:
            document = json.loads(response)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError):
            return None

        if not isinstance(document, dict):
            return None

        if "error" in document and "data" not in document:
            return RemoteError(
                code=str(document["error"]),
                message=str(document.get("message") or ""),
                status=document.get("status"),
            )

        if "code" in document and "message" in document and set(document) <= _REST_ERROR_KEYS:
            data = document.get("data")
            status = data.get("status") if isinstance(data, dict) else None
            return RemoteError(code=str(document["code"]), message=str(document["message"]), status=status)

        return None
