from conftest import register, login


def test_get_profile(client, auth_headers):
    resp = client.get("/api/user/profile", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["email"] == "user@example.com"
    assert body["lastUpdated"] is None


def test_update_profile_replaces_instead_of_merging(client, auth_headers):
    resp = client.post(
        "/api/user/profile",
        headers=auth_headers,
        json={"personal": {"name": "A", "age": 30}, "health": {"weight": 60}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Profile updated successfully!"
    assert body["user"]["personal"] == {"name": "A", "age": 30}
    assert body["user"]["lastUpdated"] is not None

    resp = client.post("/api/user/profile", headers=auth_headers, json={"health": {"height": 170}})
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["personal"] == {}
    assert user["health"] == {"height": 170}

    # 조회해도 동일
    profile = client.get("/api/user/profile", headers=auth_headers).json()
    assert profile["personal"] == {}
    assert profile["health"] == {"height": 170}


def test_update_profile_drops_unknown_fields(client, auth_headers):
    resp = client.put(
        "/api/user/profile",
        headers=auth_headers,
        json={"personal": {"name": "B", "nickname": "bee"}, "health": {"conditions": "asthma", "blood": "O"}},
    )
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["personal"] == {"name": "B"}
    assert user["health"] == {"conditions": "asthma"}


def test_update_profile_requires_token(client):
    resp = client.post("/api/user/profile", json={"personal": {"name": "A"}})
    assert resp.status_code == 401


def test_set_classification(client, auth_headers):
    resp = client.post("/api/user/analysis", headers=auth_headers, json={"analysisResult": "pitta"})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Analysis saved!"
    assert resp.json()["user"]["analysisResult"] == "pitta"


def test_invalid_classification_leaves_previous_value(client, auth_headers):
    client.post("/api/user/analysis", headers=auth_headers, json={"analysisResult": "kapha"})

    for bad in ("fire", "Vata", "", None, 3):
        resp = client.post("/api/user/analysis", headers=auth_headers, json={"analysisResult": bad})
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid analysis result."}

    profile = client.get("/api/user/profile", headers=auth_headers).json()
    assert profile["analysisResult"] == "kapha"


def test_classification_field_name_alias(client, auth_headers):
    resp = client.post("/api/user/analysis", headers=auth_headers, json={"classification": "vata"})
    assert resp.status_code == 200
    assert resp.json()["user"]["analysisResult"] == "vata"


def test_followups_newest_first(client, auth_headers):
    for text in ("first", "second", "third"):
        resp = client.post("/api/user/followups", headers=auth_headers, json={"text": text})
        assert resp.status_code == 201

    resp = client.get("/api/user/followups", headers=auth_headers)
    assert resp.status_code == 200
    assert [f["text"] for f in resp.json()] == ["third", "second", "first"]

    profile = client.get("/api/user/profile", headers=auth_headers).json()
    assert [f["text"] for f in profile["followups"]] == ["third", "second", "first"]


def test_add_followup_returns_only_created_entry(client, auth_headers):
    resp = client.post("/api/user/followups", headers=auth_headers, json={"text": "feeling better"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["text"] == "feeling better"
    assert body["timestamp"]
    assert set(body) == {"id", "text", "timestamp"}


def test_empty_followup_is_rejected_and_not_stored(client, auth_headers):
    for body in ({"text": ""}, {"text": "   \n\t"}, {}):
        resp = client.post("/api/user/followups", headers=auth_headers, json=body)
        assert resp.status_code == 400
        assert resp.json() == {"message": "Feedback text is required."}

    assert client.get("/api/user/followups", headers=auth_headers).json() == []


def test_accounts_do_not_see_each_other(client, auth_headers):
    client.post("/api/user/followups", headers=auth_headers, json={"text": "mine"})
    client.post("/api/user/analysis", headers=auth_headers, json={"analysisResult": "pitta"})

    register(client, email="other@example.com")
    other_token = login(client, email="other@example.com").json()["token"]
    other = {"Authorization": f"Bearer {other_token}"}

    assert client.get("/api/user/followups", headers=other).json() == []
    assert client.get("/api/user/profile", headers=other).json()["analysisResult"] is None


def test_my_recommendations(client, auth_headers):
    resp = client.get("/api/user/recommendations", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"analysisResult": None, "recommendations": None}

    client.post("/api/user/analysis", headers=auth_headers, json={"analysisResult": "kapha"})
    body = client.get("/api/user/recommendations", headers=auth_headers).json()
    assert body["analysisResult"] == "kapha"
    assert body["recommendations"]["diet"]["title"].startswith("Kapha")
    assert body["recommendations"]["routine"]["items"]


def test_blank_form_fields_are_saved_as_missing(client, auth_headers):
    resp = client.post(
        "/api/user/profile",
        headers=auth_headers,
        json={
            "personal": {"name": "A", "age": ""},
            "health": {"height": "", "weight": "", "conditions": ""},
        },
    )
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["personal"] == {"name": "A"}
    assert user["health"] == {}


def test_numeric_strings_are_accepted(client, auth_headers):
    resp = client.post(
        "/api/user/profile",
        headers=auth_headers,
        json={"personal": {"age": "30"}, "health": {"height": "170", "weight": "62.5"}},
    )
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["personal"] == {"age": 30}
    assert user["health"] == {"height": 170, "weight": 62.5}


def test_timestamps_have_same_format_after_reload(client, auth_headers):
    updated = client.post(
        "/api/user/profile", headers=auth_headers, json={"personal": {"name": "A"}}
    ).json()["user"]["lastUpdated"]
    reloaded = client.get("/api/user/profile", headers=auth_headers).json()["lastUpdated"]
    assert updated == reloaded

    created = client.post("/api/user/followups", headers=auth_headers, json={"text": "note"}).json()
    listed = client.get("/api/user/followups", headers=auth_headers).json()[0]
    assert created["timestamp"] == listed["timestamp"]
