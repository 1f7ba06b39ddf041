"""
Standardized API response envelopes for consistent data structure
"""
from typing import Any, Dict, List, Optional
from datetime import datetime


def success_response(
    data: Any = None,
    message: str = "Operation successful",
    meta: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Create a success response"""
    return {
        "success": True,
        "message": message,
        "data": data,
        "meta": meta,
        "timestamp": datetime.utcnow().isoformat()
    }


def error_response(
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Create an error response"""
    return {
        "success": False,
        "message": message,
        "error_code": error_code,
        "details": details,
        "timestamp": datetime.utcnow().isoformat()
    }


def empty_data_response(
    data_type: str,
    reason: Optional[str] = None,
    suggestions: Optional[List[str]] = None
) -> Dict[str, Any]:
    """Create an empty data response.

    An empty directory is a normal outcome, not an error, so it is still a
    success envelope with an empty list.
    """
    return {
        "success": True,
        "message": f"No {data_type} available",
        "data": [],
        "reason": reason,
        "suggestions": suggestions or [
            "Check your filters or search criteria",
        ],
        "timestamp": datetime.utcnow().isoformat()
    }


def directory_response(page, data_type: str, empty_reason: Optional[str] = None) -> Dict[str, Any]:
    """Wrap a loaded DirectoryPage in the matching envelope."""
    if not page.items:
        return empty_data_response(data_type, reason=page.message or empty_reason)
    return success_response(
        data=[item.model_dump(mode="json") for item in page.items],
        message=f"{len(page.items)} {data_type} found",
        meta={"count": len(page.items), "diagnostic": page.message}
    )
