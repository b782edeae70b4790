"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from backend.coursefinder.core.cache import cache_clear
from backend.coursefinder.main import app

from .fakes import FakeSupabase, make_course


@pytest.fixture
def sample_courses():
    return [
        make_course("2001", "11", "Pre-Calculus 11", hst_sub_category="Algebra"),
        make_course("2002", "11", "Foundations of Mathematics 11"),
        make_course("2003", "11", "Workplace Math 11"),
        make_course("2004", "12", "Calculus 12", credit_value="4"),
        make_course("3001", "10", "English Studies 10", category="Ministry-Developed",
                    hst_main_category="English Language Arts", credit_value="2,4"),
        make_course("3001", "11", "English Studies 11", category="Ministry-Developed",
                    hst_main_category="English Language Arts"),
        make_course("4001", "K", "Kindergarten Arts", language="French",
                    hst_main_category=None, credit_value=None),
        make_course("5001", "9", "Science 9", category="Board/Authority Authorized",
                    hst_main_category="Science", hst_sub_category="Mathematical Biology"),
    ]


@pytest.fixture
def fake_sb(sample_courses):
    return FakeSupabase(sample_courses)


@pytest.fixture(autouse=True)
def _clear_filters_cache():
    cache_clear()
    yield
    cache_clear()


@pytest.fixture
def client(fake_sb):
    """FastAPI test client wired to the in-memory store."""
    app.state.supabase = fake_sb
    yield TestClient(app, raise_server_exceptions=False)
    app.state.supabase = None
