from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from projecthub.core.acl import Actor
from projecthub.core.config import Settings, get_settings


def create_access_token(
    actor: Actor,
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Create a signed JWT access token carrying the actor's id and roles."""
    settings = settings or get_settings()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = actor.to_claims()
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> Optional[Actor]:
    """Decode and validate a JWT token. Returns the actor if valid."""
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None

    user_id = payload.get("sub")
    if user_id is None or payload.get("type") != "access":
        return None

    try:
        return Actor.create(
            id=int(user_id),
            roles=payload.get("roles") or [],
            username=payload.get("username"),
        )
    except ValueError:
        # Malformed subject or a role this deployment does not know
        return None
