"""
Authentication helpers for dashboard routes.
"""

import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from config import settings

security = HTTPBasic()


def require_dashboard_auth(
    credentials: HTTPBasicCredentials = Depends(security),
) -> None:
    """
    Enforce basic auth using the configured dashboard password.

    Any username is accepted, only the password is checked.
    """
    password = settings.DASHBOARD_PASSWORD
    if not password:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dashboard password is not configured.",
        )

    provided = credentials.password.encode("utf-8")
    expected = password.encode("utf-8")
    if not secrets.compare_digest(provided, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid dashboard credentials.",
            headers={"WWW-Authenticate": "Basic"},
        )
