"""
Pytest configuration and shared fixtures for all named_functions tests.

The Lark parser is the only expensive object; it is built once per session
and shared, since parsing keeps no state between calls.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from named_functions.frontend.parser import Parser
from named_functions.compiler.driver import MacroDriver


@pytest.fixture(scope="session")
def session_parser():
    """Session-scoped parser shared across ALL tests."""
    return Parser()


@pytest.fixture(scope="session")
def session_driver(session_parser):
    """Session-scoped driver reusing the session parser."""
    return MacroDriver(session_parser)


@pytest.fixture(scope="class")
def parser(session_parser):
    """Class-scoped parser - returns session parser (stateless, safe to share)."""
    return session_parser


@pytest.fixture(scope="class")
def driver(session_driver):
    """Class-scoped driver - returns session driver."""
    return session_driver
