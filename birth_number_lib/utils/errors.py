from typing import Dict, Any, Optional


def error_as_dict(error: str, error_msg: Optional[str] = None) -> Dict[str, Any]:
    """Payload of a rejected birth number: ``error`` code and optional ``message``."""
    payload = {"error": error}
    if error_msg:
        payload["message"] = error_msg
    return payload
