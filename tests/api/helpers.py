"""Request and database helpers for API tests."""

from datetime import UTC, datetime, timedelta

from sqlalchemy import func, select, update

from src.core.container import get_database

PASSWORD = "SecurePass123!"


def signup(client, email: str = "user@example.com", password: str = PASSWORD):
    return client.post(
        "/api/auth/signup",
        json={
            "email": email,
            "password": password,
            "firstName": "Ada",
            "lastName": "Lovelace",
        },
    )


def login(client, email: str = "user@example.com", password: str = PASSWORD):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def latest_code(email_service, email: str) -> str:
    """Most recent code emailed to an address."""
    return next(code for to, code in reversed(email_service.sent) if to == email)


def verify(client, email_service, email: str = "user@example.com"):
    return client.post(
        "/api/auth/verify-otp",
        json={"email": email, "otp": latest_code(email_service, email)},
    )


def run_in_app_db(client, work):
    """Run ``await work(session)`` against the app's database on its event loop."""

    async def _run():
        async with get_database().get_session() as session:
            return await work(session)

    return client.portal.call(_run)


def lapse(model):
    """Build a ``work`` callable that moves every row of ``model`` past expiry."""

    async def _work(session):
        await session.execute(
            update(model).values(expires_at=datetime.now(UTC) - timedelta(seconds=1))
        )

    return _work


def row_count(model):
    """Build a ``work`` callable that counts the rows of ``model``."""

    async def _work(session):
        return await session.scalar(select(func.count()).select_from(model))

    return _work
