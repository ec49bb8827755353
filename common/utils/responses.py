"""
Standard API response helpers.

Provides consistent response formatting for successful requests.

Example:
    from common.utils import success_response

    @app.get("/install")
    async def install_state():
        return success_response({"parameters": {"langcode": "sv"}})
"""

from typing import Any, Optional, Dict


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        data: The response data (can be dict, list, or any serializable type)
        message: Optional success message

    Returns:
        Dictionary with success=True and optional data/message
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response
