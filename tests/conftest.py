import pytest

from compliance.models.dto import UserFields
from tests.factories import (
    NOW,
    TAX_CLEARANCE_MANUAL_TEXT,
    TAX_CLEARANCE_ONLINE_TEXT,
    make_content,
)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def acme_fields():
    return UserFields(organization_name="Acme LLC", fein="123456789")


@pytest.fixture
def online_certificate():
    return make_content(TAX_CLEARANCE_ONLINE_TEXT)


@pytest.fixture
def manual_certificate():
    return make_content(TAX_CLEARANCE_MANUAL_TEXT)
