"""
Shared test config
"""

# Third Party
import pytest

# Local
from uischema.test_helpers.helpers import configure_logging, load_test_data

configure_logging()


@pytest.fixture
def api_schema():
    """The decoded schema of a webservice-like component with 12 properties"""
    return load_test_data("api-schema.json")


@pytest.fixture
def custom_schema():
    """The decoded override document matching api_schema"""
    return load_test_data("ui-custom-schema.yaml")
