"""
Claims-based identity model.

A ``ClaimsPrincipal`` carries one or more ``ClaimsIdentity`` objects, each a
bag of typed ``Claim`` values issued by an authentication scheme. Policies
inspect the principal's claims to make authorization decisions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field


class ClaimTypes:
    """Well-known claim type URIs."""

    COUNTRY = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/country"
    EMAIL = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/emailaddress"
    NAME = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/name"
    NAME_IDENTIFIER = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/nameidentifier"
    ROLE = "http://schemas.microsoft.com/ws/2008/06/identity/claims/role"


@dataclass(frozen=True)
class Claim:
    type: str
    value: str


ClaimPredicate = Callable[[Claim], bool]


@dataclass
class ClaimsIdentity:
    """A set of claims issued under one authentication type.

    The identity is authenticated when ``authentication_type`` is set.
    """

    authentication_type: str | None = None
    claims: list[Claim] = field(default_factory=list)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.authentication_type)

    @property
    def name(self) -> str | None:
        claim = self.find_first(ClaimTypes.NAME)
        return claim.value if claim else None

    def add_claim(self, claim: Claim) -> None:
        self.claims.append(claim)

    def find_first(self, claim_type: str) -> Claim | None:
        return next((c for c in self.claims if c.type == claim_type), None)


@dataclass
class ClaimsPrincipal:
    identities: list[ClaimsIdentity] = field(default_factory=list)

    @classmethod
    def anonymous(cls) -> ClaimsPrincipal:
        return cls([ClaimsIdentity()])

    @classmethod
    def from_identity(cls, identity: ClaimsIdentity) -> ClaimsPrincipal:
        return cls([identity])

    @property
    def identity(self) -> ClaimsIdentity | None:
        """The primary identity (first one registered)."""
        return self.identities[0] if self.identities else None

    @property
    def is_authenticated(self) -> bool:
        return any(identity.is_authenticated for identity in self.identities)

    @property
    def claims(self) -> Iterator[Claim]:
        for identity in self.identities:
            yield from identity.claims

    def has_claim(
        self,
        match: str | ClaimPredicate,
        value: str | None = None,
    ) -> bool:
        """Check for a claim.

        ``match`` is either a predicate over claims or a claim type. When a
        claim type is given, ``value`` optionally restricts the claim value.
        """
        if callable(match):
            return any(match(claim) for claim in self.claims)
        return any(
            claim.type == match and (value is None or claim.value == value)
            for claim in self.claims
        )

    def find_first(self, claim_type: str) -> Claim | None:
        return next((c for c in self.claims if c.type == claim_type), None)

    def find_all(self, claim_type: str) -> list[Claim]:
        return [c for c in self.claims if c.type == claim_type]

    def is_in_role(self, role: str) -> bool:
        return self.has_claim(ClaimTypes.ROLE, role)

    def roles(self) -> Iterable[str]:
        return [claim.value for claim in self.find_all(ClaimTypes.ROLE)]
