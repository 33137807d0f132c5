"""Analytics routes: tracking endpoints and dashboard JSON shape."""


async def test_track_page_view(client):
    res = await client.post(
        "/api/analytics/pageview",
        json={"path": "/services", "referrer": "https://search.test"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert isinstance(body["id"], int)


async def test_page_view_without_path_is_400(client):
    res = await client.post("/api/analytics/pageview", json={"referrer": "x"})
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["errors"][0]["field"] == "path"


async def test_track_event(client):
    res = await client.post(
        "/api/analytics/event",
        json={"name": "quote_requested", "properties": {"plan": "pro"}},
    )
    assert res.status_code == 200
    assert res.json()["success"] is True


async def test_event_with_non_object_properties_is_400(client):
    res = await client.post(
        "/api/analytics/event",
        json={"name": "quote_requested", "properties": ["not", "a", "dict"]},
    )
    assert res.status_code == 400


async def test_dashboard_shape(client):
    for path in ["/a", "/a", "/a", "/a", "/b", "/b"]:
        await client.post("/api/analytics/pageview", json={"path": path})
    await client.post(
        "/api/contact",
        json={"name": "Ada", "email": "ada@example.com", "message": "Hello"},
    )

    res = await client.get("/api/analytics/dashboard")

    assert res.status_code == 200
    body = res.json()
    assert body["totalVisitors"] == 6
    assert body["pageViews"] == 6
    assert body["contactForms"] == 1
    assert body["conversionRate"] == 16.67
    assert body["topPages"] == [
        {"path": "/a", "views": 4},
        {"path": "/b", "views": 2},
    ]
    assert len(body["recentSubmissions"]) == 1
    assert body["monthlyStats"] == []
