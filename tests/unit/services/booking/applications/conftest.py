from unittest.mock import MagicMock

import pytest


@pytest.fixture
def booking_repository():
    return MagicMock()


@pytest.fixture
def user_repository():
    return MagicMock()


@pytest.fixture
def vehicle_repository():
    return MagicMock()
