"""Per-request context passed from the API layer into services."""

import uuid
from dataclasses import dataclass, field
from typing import Optional

from projecthub.core.acl import Actor


@dataclass(frozen=True)
class RequestContext:
    actor: Actor
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    url: Optional[str] = None
    ip: Optional[str] = None
