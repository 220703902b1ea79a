"""
Pytest configuration and fixtures for schema.org service tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from schemadotorg.main import app


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def address() -> dict[str, Any]:
    """Postal address model."""
    return {
        "streetAddress": "10 Downing Street",
        "locality": "City of Westminster",
        "region": "London",
        "postalCode": "SW1A",
    }


@pytest.fixture
def address_mapping() -> dict[str, Any]:
    """Mapping mixing positional paths and renamed keys."""
    return {
        "PostalAddress": [
            "streetAddress",
            {
                "addressLocality": "locality",
                "addressRegion": "region",
            },
            "postalCode",
        ]
    }


@pytest.fixture
def organization(address: dict[str, Any]) -> dict[str, Any]:
    """Organization model with a nested address."""
    return {
        "org": "UK Government",
        "adr": address,
        "tel": "+44-20-7925-0918",
    }


@pytest.fixture
def organization_mapping() -> dict[str, Any]:
    """Mapping nesting a typed address inside a typed organization."""
    return {
        "GovernmentOrganization": {
            "name": "org",
            "address": {
                "PostalAddress": [
                    "adr.streetAddress",
                    {
                        "addressLocality": "adr.locality",
                        "addressRegion": "adr.region",
                    },
                    "adr.postalCode",
                ]
            },
            "telephone": "tel",
        }
    }


@pytest.fixture
def expected_address() -> dict[str, Any]:
    return {
        "@type": "PostalAddress",
        "streetAddress": "10 Downing Street",
        "addressLocality": "City of Westminster",
        "addressRegion": "London",
        "postalCode": "SW1A",
    }
