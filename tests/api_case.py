import unittest

from fastapi.testclient import TestClient
from sqlmodel import Session

from app.main import app
from app.auth.revocation import RevocationList
from app.auth.service import get_revocation_list, get_token_service
from app.auth.tokens import TokenService
from app.core.database import build_engine, create_db_and_tables, get_session


class FakeClock:
    def __init__(self, now: float = 1_700_000_000):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ApiTestCase(unittest.TestCase):
    """
    Runs the real application against a fresh in-memory database, with its
    own token service and revocation list.
    """

    def setUp(self):
        self.engine = build_engine("sqlite://")
        create_db_and_tables(self.engine)
        self.clock = FakeClock()
        self.tokens = TokenService("api-test-secret", clock=self.clock)
        self.revocations = RevocationList(self.tokens)

        def override_session():
            with Session(self.engine) as session:
                yield session

        app.dependency_overrides[get_session] = override_session
        app.dependency_overrides[get_token_service] = lambda: self.tokens
        app.dependency_overrides[get_revocation_list] = lambda: self.revocations
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.engine.dispose()

    def auth(self, token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    def register(self, email: str = "alice@example.com", password: str = "secret123", **extra) -> dict:
        resp = self.client.post("/users/register", json={"email": email, "password": password, **extra})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def create_car(self, token: str, **fields) -> dict:
        data = {"make": "Toyota", "model": "Corolla", "year": 2018, "price": 12500.0}
        data.update(fields)
        resp = self.client.post("/cars", json=data, headers=self.auth(token))
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["car"]
