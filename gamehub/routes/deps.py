import hmac
from typing import Optional

from fastapi import Header, HTTPException

from ..core.config import ADMIN_API_KEY


def require_admin_access(x_admin_key: Optional[str] = Header(None)) -> None:
    if not ADMIN_API_KEY:
        return None
    if not x_admin_key or not hmac.compare_digest(x_admin_key, ADMIN_API_KEY):
        raise HTTPException(status_code=401, detail="Admin key required")
    return None
