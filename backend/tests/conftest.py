# backend/tests/conftest.py
import os

os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_FILE"] = ""

import pytest
from beanie import init_beanie
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from laundry_pos.app import app, DOCUMENT_MODELS
from laundry_pos.core.security import create_access_token


@pytest.fixture
async def db():
    mongo_client = AsyncMongoMockClient()
    database = mongo_client["laundry_test"]
    await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    yield database


@pytest.fixture
async def client(db):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


def bearer(role: str) -> dict:
    token = create_access_token(str(ObjectId()), f"{role}-user", role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return bearer("admin")


@pytest.fixture
def staff_headers():
    return bearer("staff")
