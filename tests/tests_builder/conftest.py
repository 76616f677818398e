"""
Shared fixtures for builder/ tests.

Key fixtures:
- connection: opaque stand-in for a gateway connection
- executed: patches the gateway call made by execute() and records it
- rendered: turns an executable state into the statement text it would send
"""

from unittest.mock import patch

import pytest

from utils.database_utils import ResultSet


class FakeConnection:
    """Marker object; the builder only passes it through."""
    
    def __repr__(self):
        return "FakeConnection()"


@pytest.fixture
def connection():
    return FakeConnection()


@pytest.fixture
def executed():
    """
    Patch builder.states.execute_statement so execute() returns a ResultSet
    echoing the statement instead of touching a database.
    """
    with patch("builder.states.execute_statement") as mock_execute:
        mock_execute.side_effect = lambda conn, statement: ResultSet(statement=statement)
        yield mock_execute


@pytest.fixture
def rendered(executed):
    def render(state):
        return state.execute().statement
    return render
