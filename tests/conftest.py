"""Test configuration for the SelectShop API."""

from tests.fixtures import *  # noqa: F401,F403
