from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi.security import HTTPBearer
from jose import jwt
from pydantic import BaseModel, Field

from app.navguard.core.config import settings
from app.navguard.navigation.models import Grant

ACCESS_TOKEN_EXPIRE_MINUTES = 60

bearer_scheme = HTTPBearer(auto_error=False)


class PermissionClaim(BaseModel):
    resource: str | None = None
    # the admin panel sends {"page": ..., "action": [...]}
    page: str | None = None
    action: str | list[str] = Field(default_factory=list)


class TokenData(BaseModel):
    sub: str
    role: str | None = None
    permissions: list[PermissionClaim] | None = None

    def grants(self) -> tuple[Grant, ...] | None:
        return claims_to_grants(self.permissions)


def claims_to_grants(claims: list[PermissionClaim] | None) -> tuple[Grant, ...] | None:
    if claims is None:
        return None
    grants: list[Grant] = []
    for claim in claims:
        resource = claim.resource or claim.page
        if not resource:
            continue
        actions = [claim.action] if isinstance(claim.action, str) else claim.action
        grants.extend(Grant(resource=resource, action=action) for action in actions)
    return tuple(grants)


def create_access_token(data: dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
