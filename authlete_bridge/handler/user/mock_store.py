"""In-memory user store used for development and tests."""

from __future__ import annotations

from typing import Any

from authlete_bridge.schemas import Address, User

MDL_DOCTYPE = "org.iso.18013.5.1.mDL"
MDL_NAMESPACE = "org.iso.18013.5.1"

MOCK_USERS: list[User] = [
    User(
        subject="1004",
        login_id="inga",
        password="inga",
        name="Inga Silverstone",
        email="inga@example.com",
        address=Address(
            formatted="114 Old State Hwy 127, Shoshone, CA 92384, USA",
            country="USA",
            locality="Shoshone",
            street_address="114 Old State Hwy 127",
            postal_code="CA 92384",
        ),
        phone_number_verified=False,
        email_verified=False,
        given_name="Inga",
        family_name="Silverstone",
        profile="https://example.com/inga/profile",
        picture="https://example.com/inga/me.jpg",
        website="https://example.com/inga/",
        gender="female",
        zoneinfo="America/Toronto",
        locale="en-US",
        preferred_username="inga",
        birthdate="1991-11-06",
        updated_at="2022-04-30",
    ),
]

# subject -> doctype -> namespace -> claims
MOCK_MDOCS: dict[str, dict[str, dict[str, dict[str, Any]]]] = {
    "1004": {
        MDL_DOCTYPE: {
            MDL_NAMESPACE: {
                "family_name": "Silverstone",
                "given_name": "Inga",
                "birth_date": 'cbor:1004("1991-11-06")',
                "issuing_country": "US",
                "document_number": "DL-1004",
                "driving_privileges": [
                    {
                        "vehicle_category_code": "A",
                        "issue_date": 'cbor:1004("2023-01-01")',
                        "expiry_date": 'cbor:1004("2043-01-01")',
                    },
                ],
            },
        },
    },
}


async def mock_get_by_credentials(login_id: str, password: str) -> User | None:
    """Return the mock user whose login id and password both match."""
    return next(
        (user for user in MOCK_USERS if user.login_id == login_id and user.password == password),
        None,
    )


async def mock_get_by_subject(subject: str) -> User | None:
    """Return the mock user with the given subject."""
    return next((user for user in MOCK_USERS if user.subject == subject), None)


async def mock_get_mdoc_claims_by_subject_and_doctype(
    subject: str, doctype: str
) -> dict[str, dict[str, Any]] | None:
    """Return namespace-keyed mdoc claims for the subject and doctype."""
    return MOCK_MDOCS.get(subject, {}).get(doctype)
