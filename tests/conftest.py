import os

import pytest

os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("SHOPIFY_STORE", "test-shop")
os.environ.setdefault("SHOPIFY_API_KEY", "shpat_test")

from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.supabase_client import get_supabase_client  # noqa: E402
from fakes import FakeSupabase  # noqa: E402


@pytest.fixture()
def supabase():
    return FakeSupabase()


@pytest.fixture()
def client(supabase):
    app.dependency_overrides[get_supabase_client] = lambda: supabase
    yield TestClient(app)
    app.dependency_overrides.clear()
