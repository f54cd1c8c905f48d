from typing import Any


def success(**payload: Any) -> dict[str, Any]:
    """Success envelope shared by every endpoint: ``{"success": true, ...payload}``."""
    return {"success": True, **payload}
