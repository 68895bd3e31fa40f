"""
Keycloak JWT Authentication.

Validates Bearer tokens from the procurement frontend against the Keycloak
JWKS endpoint. Disabled in development via AUTH_ENABLED=false.

Roles come from the `roles` claim: admins may change weights and delete
suppliers, everyone else (procurement users, supplier self-service) may read,
register, update and simulate.
"""
from __future__ import annotations

from typing import Optional

import httpx
import structlog
from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from sustain_engine.core.config import Settings, get_settings

logger = structlog.get_logger()
security = HTTPBearer(auto_error=False)

_jwks_cache: Optional[dict] = None


async def _fetch_jwks(keycloak_url: str) -> dict:
    global _jwks_cache
    if _jwks_cache:
        return _jwks_cache
    async with httpx.AsyncClient() as client:
        resp = await client.get(f"{keycloak_url}/protocol/openid-connect/certs")
        resp.raise_for_status()
        _jwks_cache = resp.json()
        return _jwks_cache


async def verify_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    settings: Settings = Depends(get_settings),
) -> dict:
    """
    FastAPI dependency: extracts and validates the JWT.
    Returns the decoded token payload (claims).
    """
    if not settings.auth_enabled:
        return {"sub": "dev-user", "roles": [settings.admin_role]}

    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing authorization header")

    token = credentials.credentials
    try:
        jwks = await _fetch_jwks(settings.keycloak_url)
        unverified_header = jwt.get_unverified_header(token)
        key = next(
            (k for k in jwks.get("keys", []) if k["kid"] == unverified_header.get("kid")),
            None,
        )
        if not key:
            raise HTTPException(status_code=401, detail="Invalid token signing key")

        payload = jwt.decode(
            token,
            key,
            algorithms=["RS256"],
            audience=settings.keycloak_audience,
            issuer=settings.keycloak_url,
        )
        return payload

    except JWTError as e:
        logger.warning("jwt_validation_failed", error=str(e))
        raise HTTPException(status_code=401, detail=f"Token validation failed: {e}")


def token_roles(token: dict, client_id: str) -> set[str]:
    """
    Roles from a decoded token: a flat `roles` claim, Keycloak realm roles,
    and this client's own roles under `resource_access`.
    """
    roles = set(token.get("roles") or [])
    roles.update(token.get("realm_access", {}).get("roles", []))
    roles.update(token.get("resource_access", {}).get(client_id, {}).get("roles", []))
    return roles


async def require_admin(
    token: dict = Depends(verify_token),
    settings: Settings = Depends(get_settings),
) -> dict:
    """FastAPI dependency: like verify_token, but the caller must hold the admin role."""
    if settings.admin_role not in token_roles(token, settings.keycloak_client_id):
        logger.warning("admin_role_required", sub=token.get("sub", "unknown"))
        raise HTTPException(status_code=403, detail="Admin role required")
    return token
