import pytest


PROFILE = {
    "gender": 1,
    "ageGroup": 3,
    "shoppingLevel": 2,
    "isStudent": 1,
    "hourOfClick": 14,
    "dayOfClick": 5,
}


@pytest.fixture
def user_id(client):
    client.post("/api/signup", json={"name": "Jane", "email": "jane@example.com", "password": "Secret123"})
    response = client.post("/api/login", json={"email": "jane@example.com", "password": "Secret123"})
    return response.json()["userId"]


def test_new_profile_is_all_null(client, user_id):
    response = client.get(f"/api/profile/{user_id}")
    assert response.status_code == 200
    assert response.json() == {key: None for key in PROFILE}


def test_update_then_read_profile(client, user_id):
    response = client.put(f"/api/profile/{user_id}", json=PROFILE)
    assert response.status_code == 200
    assert response.json() == {"message": "Profile updated successfully"}

    assert client.get(f"/api/profile/{user_id}").json() == PROFILE


@pytest.mark.parametrize("field", list(PROFILE))
def test_zero_is_a_valid_value(client, user_id, field):
    profile = dict(PROFILE, **{field: 0})

    response = client.put(f"/api/profile/{user_id}", json=profile)
    assert response.status_code == 200
    assert client.get(f"/api/profile/{user_id}").json()[field] == 0


@pytest.mark.parametrize("field", list(PROFILE))
def test_missing_field_is_validation_error(client, user_id, field):
    profile = {k: v for k, v in PROFILE.items() if k != field}

    response = client.put(f"/api/profile/{user_id}", json=profile)
    assert response.status_code == 400
    assert response.json() == {"error": "All profile fields are required"}


def test_null_field_is_validation_error(client, user_id):
    response = client.put(f"/api/profile/{user_id}", json=dict(PROFILE, gender=None))
    assert response.status_code == 400


def test_hour_out_of_range_is_rejected(client, user_id):
    response = client.put(f"/api/profile/{user_id}", json=dict(PROFILE, hourOfClick=24))
    assert response.status_code == 400


def test_unknown_user_is_404(client):
    assert client.get("/api/profile/9999").status_code == 404

    response = client.put("/api/profile/9999", json=PROFILE)
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_profile_response_hides_account_fields(client, user_id):
    body = client.get(f"/api/profile/{user_id}").json()
    assert "email" not in body
    assert "name" not in body
    assert "passwordHash" not in body and "password_hash" not in body
