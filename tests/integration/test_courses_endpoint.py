"""
End-to-end tests for the course session endpoints.

Drives the real application, service and CRUD layers over an in-memory
SQLite database through httpx's ASGI transport.

System role: Verification of the request/validation/persistence pipeline
"""

import uuid

import httpx
import pytest
from httpx import ASGITransport
from sqlalchemy import func, select

from stats_service.api.main import create_app
from stats_service.boundary.db import get_async_db
from stats_service.boundary.db.models import SessionModel


@pytest.fixture
def app(test_session_factory):
    """Application whose database dependency points at the in-memory engine."""
    app = create_app()

    async def override_get_async_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db
    return app


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def headers(user_id) -> dict:
    return {"userId": str(user_id)}


async def _count_sessions(test_session_factory) -> int:
    async with test_session_factory() as session:
        result = await session.execute(select(func.count()).select_from(SessionModel))
        return result.scalar_one()


def _payload(session_id=None, modules=10, score=85, time=3600) -> dict:
    return {
        "sessionId": str(session_id or uuid.uuid4()),
        "totalModulesStudied": modules,
        "averageScore": score,
        "timeStudied": time,
    }


@pytest.mark.asyncio
async def test_post_then_get_returns_submitted_measures(client, headers, course_id):
    payload = _payload(modules=7, score=64, time=900)

    created = await client.post(f"/courses/{course_id}", json=payload, headers=headers)
    fetched = await client.get(
        f"/courses/{course_id}/sessions/{payload['sessionId']}", headers=headers
    )

    assert created.status_code == 200
    assert created.json() == payload
    assert fetched.status_code == 200
    assert fetched.json() == payload


@pytest.mark.asyncio
async def test_duplicate_session_id_is_rejected(client, headers, course_id, test_session_factory):
    session_id = uuid.uuid4()

    first = await client.post(f"/courses/{course_id}", json=_payload(session_id), headers=headers)
    second = await client.post(
        f"/courses/{course_id}",
        json=_payload(session_id, modules=1, score=2, time=3),
        headers=headers,
    )

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json() == {"error": "Session already exists"}
    assert await _count_sessions(test_session_factory) == 1

    fetched = await client.get(f"/courses/{course_id}/sessions/{session_id}", headers=headers)
    assert fetched.json()["totalModulesStudied"] == 10


@pytest.mark.asyncio
async def test_totals_are_zero_without_sessions(client, headers, course_id):
    response = await client.get(f"/courses/{course_id}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"totalModulesStudied": 0, "averageScore": 0, "timeStudied": 0}
    assert type(response.json()["averageScore"]) is int


@pytest.mark.asyncio
async def test_totals_aggregate_sessions(client, headers, course_id):
    await client.post(f"/courses/{course_id}", json=_payload(modules=10, score=85, time=3600), headers=headers)
    await client.post(f"/courses/{course_id}", json=_payload(modules=5, score=95, time=1800), headers=headers)

    response = await client.get(f"/courses/{course_id}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"totalModulesStudied": 15, "averageScore": 90, "timeStudied": 5400}


@pytest.mark.asyncio
async def test_totals_are_scoped_to_user_and_course(client, headers, course_id):
    other_course = uuid.uuid4()
    other_user = {"userId": str(uuid.uuid4())}
    await client.post(f"/courses/{course_id}", json=_payload(modules=4, score=80, time=60), headers=headers)
    await client.post(f"/courses/{other_course}", json=_payload(modules=9, score=10, time=10), headers=headers)
    await client.post(f"/courses/{course_id}", json=_payload(modules=9, score=10, time=10), headers=other_user)

    response = await client.get(f"/courses/{course_id}", headers=headers)

    assert response.json() == {"totalModulesStudied": 4, "averageScore": 80, "timeStudied": 60}


@pytest.mark.asyncio
async def test_get_unknown_session_returns_404(client, headers, course_id):
    response = await client.get(f"/courses/{course_id}/sessions/{uuid.uuid4()}", headers=headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Session not found"}


@pytest.mark.asyncio
async def test_get_session_is_scoped_to_course(client, headers, course_id):
    payload = _payload()
    await client.post(f"/courses/{course_id}", json=payload, headers=headers)

    response = await client.get(
        f"/courses/{uuid.uuid4()}/sessions/{payload['sessionId']}", headers=headers
    )

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p.update(totalModulesStudied="not-a-number"),
        lambda p: p.update(averageScore=-10),
        lambda p: p.pop("timeStudied"),
        lambda p: p.update(sessionId="invalid-uuid-format"),
        lambda p: p.update(sessionId=uuid.UUID(p["sessionId"]).hex),
        lambda p: p.update(totalModulesStudied=2**70),
        lambda p: p.update(timeStudied=2_147_483_648),
    ],
    ids=[
        "non-numeric",
        "negative",
        "missing-field",
        "bad-session-uuid",
        "undashed-session-uuid",
        "huge-modules",
        "time-above-int32",
    ],
)
async def test_invalid_body_performs_no_insert(client, headers, course_id, test_session_factory, mutate):
    payload = _payload()
    mutate(payload)

    response = await client.post(f"/courses/{course_id}", json=payload, headers=headers)

    assert response.status_code == 400
    assert response.json()["error"]
    assert await _count_sessions(test_session_factory) == 0


@pytest.mark.asyncio
async def test_missing_user_header_performs_no_insert(client, course_id, test_session_factory):
    response = await client.post(f"/courses/{course_id}", json=_payload())

    assert response.status_code == 400
    assert "userId" in response.json()["error"]
    assert await _count_sessions(test_session_factory) == 0


@pytest.mark.asyncio
async def test_undashed_ids_perform_no_insert(client, course_id, user_id, test_session_factory):
    response = await client.post(
        f"/courses/{course_id.hex}", json=_payload(), headers={"userId": user_id.hex}
    )

    assert response.status_code == 400
    assert "courseId" in response.json()["error"]
    assert "userId" in response.json()["error"]
    assert await _count_sessions(test_session_factory) == 0


@pytest.mark.asyncio
async def test_fractional_average_is_returned_as_float(client, headers, course_id):
    await client.post(f"/courses/{course_id}", json=_payload(score=80), headers=headers)
    await client.post(f"/courses/{course_id}", json=_payload(score=95), headers=headers)

    response = await client.get(f"/courses/{course_id}", headers=headers)

    assert response.json()["averageScore"] == 87.5
