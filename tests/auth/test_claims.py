"""Unit tests for the claims identity model."""

from starwars.auth.claims import Claim, ClaimsIdentity, ClaimsPrincipal, ClaimTypes


def make_principal(*claims: Claim, authentication_type: str | None = "test") -> ClaimsPrincipal:
    return ClaimsPrincipal.from_identity(
        ClaimsIdentity(authentication_type=authentication_type, claims=list(claims))
    )


class TestClaimsIdentity:
    def test_authenticated_when_type_set(self):
        assert ClaimsIdentity("abc").is_authenticated is True
        assert ClaimsIdentity().is_authenticated is False
        assert ClaimsIdentity("").is_authenticated is False

    def test_add_claim_and_name(self):
        identity = ClaimsIdentity("abc")
        identity.add_claim(Claim(ClaimTypes.NAME, "Han"))
        assert identity.name == "Han"
        assert identity.find_first(ClaimTypes.COUNTRY) is None


class TestClaimsPrincipal:
    def test_anonymous_principal(self):
        principal = ClaimsPrincipal.anonymous()
        assert principal.is_authenticated is False
        assert list(principal.claims) == []
        assert principal.identity is not None

    def test_has_claim_by_predicate(self):
        principal = make_principal(Claim(ClaimTypes.COUNTRY, "us"))
        assert principal.has_claim(lambda c: c.type == ClaimTypes.COUNTRY)
        assert not principal.has_claim(lambda c: c.type == ClaimTypes.ROLE)

    def test_has_claim_by_type_and_value(self):
        principal = make_principal(Claim(ClaimTypes.COUNTRY, "us"))
        assert principal.has_claim(ClaimTypes.COUNTRY)
        assert principal.has_claim(ClaimTypes.COUNTRY, "us")
        assert not principal.has_claim(ClaimTypes.COUNTRY, "de")

    def test_claims_span_identities(self):
        principal = ClaimsPrincipal(
            [
                ClaimsIdentity("a", [Claim(ClaimTypes.NAME, "Luke")]),
                ClaimsIdentity(None, [Claim(ClaimTypes.ROLE, "jedi")]),
            ]
        )
        assert principal.is_authenticated is True
        assert principal.is_in_role("jedi")
        assert principal.find_first(ClaimTypes.NAME).value == "Luke"
        assert principal.identity.name == "Luke"

    def test_roles(self):
        principal = make_principal(Claim(ClaimTypes.ROLE, "pilot"), Claim(ClaimTypes.ROLE, "rebel"))
        assert list(principal.roles()) == ["pilot", "rebel"]
        assert not principal.is_in_role("sith")
