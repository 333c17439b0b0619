import pytest
from httpx import ASGITransport, AsyncClient

from lifepath.apps.api.main import app

STRUGGLING = {
    "age": 25,
    "phoneHours": 6,
    "sleepHours": 5,
    "productiveHours": 2,
    "activityMinutes": 10,
    "stressLevel": 9,
    "mood": "worried",
}


async def _post(json=None, content=None):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        if content is not None:
            return await client.post(
                "/api/analyze", content=content, headers={"content-type": "application/json"}
            )
        return await client.post("/api/analyze", json=json)


@pytest.mark.asyncio
async def test_analyze_returns_three_paths():
    resp = await _post(STRUGGLING)
    assert resp.status_code == 200
    body = resp.json()
    assert body["currentPath"]["scores"]["overall"] == 3.7
    assert body["improvementPath"]["name"] == "Small Steps"
    assert body["optimalPath"]["scores"]["overall"] == 8.2
    assert body["momentum"]["strength"] == "weak"
    assert body["weakestArea"]["name"] == "Emotional"
    assert len(body["risks"]) == 4
    assert body["microActions"][0]["impactArea"] == "emotional"


@pytest.mark.asyncio
async def test_analyze_accepts_unknown_mood():
    resp = await _post({**STRUGGLING, "mood": "confused"})
    assert resp.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("age", [None, 0, 7, 71, 7.5, "25", True])
async def test_analyze_rejects_invalid_age(age):
    payload = {**STRUGGLING, "age": age}
    resp = await _post(payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid age"}


@pytest.mark.asyncio
async def test_analyze_rejects_missing_age():
    payload = {k: v for k, v in STRUGGLING.items() if k != "age"}
    resp = await _post(payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid age"}


@pytest.mark.asyncio
@pytest.mark.parametrize("age", [8, 70])
async def test_analyze_accepts_age_bounds(age):
    resp = await _post({**STRUGGLING, "age": age})
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_analyze_rejects_malformed_body():
    resp = await _post(content=b"{not json")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid input"}

    resp = await _post([1, 2, 3])
    assert resp.status_code == 400

    resp = await _post({**STRUGGLING, "phoneHours": "lots"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid input"}


@pytest.mark.asyncio
async def test_analyze_respects_configured_age_bounds(monkeypatch):
    monkeypatch.setenv("LIFEPATH_MAX_AGE", "80")
    resp = await _post({**STRUGGLING, "age": 75})
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_analyze_hides_unexpected_failures(monkeypatch, caplog):
    def boom(habits):
        raise RuntimeError("secret internals")

    monkeypatch.setattr("lifepath.apps.api.routes.analyze.simulate_future", boom)
    resp = await _post(STRUGGLING)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to analyze data"}
    assert "secret internals" not in resp.text
    assert any(r.levelname == "ERROR" for r in caplog.records)


@pytest.mark.asyncio
async def test_questionnaire_endpoint():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/api/questionnaire", params={"age": 10})
    assert resp.status_code == 200
    body = resp.json()
    assert body["age_group"] == "child"
    assert len(body["questions"]) == 6


@pytest.mark.asyncio
async def test_analyze_rejects_non_finite_numbers():
    resp = await _post(
        content=b'{"age": 25, "phoneHours": NaN, "sleepHours": 7, "productiveHours": 4,'
        b' "activityMinutes": 30, "stressLevel": 5, "mood": "calm"}'
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid input"}

    resp = await _post(content=b'{"age": Infinity}')
    assert resp.json() == {"error": "Invalid age"}


@pytest.mark.asyncio
async def test_analyze_rejects_age_beyond_float_range():
    resp = await _post({**STRUGGLING, "age": 10**400})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid age"}


@pytest.mark.asyncio
@pytest.mark.parametrize("mood", [None, 7, ["happy"]])
async def test_analyze_scores_non_text_mood_as_neutral(mood):
    resp = await _post({**STRUGGLING, "mood": mood})
    neutral = await _post({**STRUGGLING, "mood": "neutral"})
    assert resp.status_code == 200
    assert resp.json()["currentPath"] == neutral.json()["currentPath"]
