from dataclasses import dataclass
from typing import Union

from app.core.errors import UnauthorizedError


@dataclass(frozen=True)
class Authenticated:
    id: int
    name: str
    email: str

    def as_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class Anonymous:
    pass


ANONYMOUS = Anonymous()

Identity = Union[Authenticated, Anonymous]


def require_admin(identity: Identity) -> Authenticated:
    """Return the authenticated identity or raise 401 for anonymous callers"""
    if isinstance(identity, Authenticated):
        return identity
    raise UnauthorizedError()
