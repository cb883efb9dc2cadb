import httpx
import pytest

from app.client.api_client import ApiClient, ApiClientError
from app.client.flows import AuthFlow, DashboardFlow, NotLoggedInError
from app.client.session import FileSessionStore, MemorySessionStore, UserSession

FORM = {
    "gender": "1",
    "ageGroup": "2",
    "shoppingLevel": "3",
    "isStudent": "0",
    "hourOfClick": "9",
    "dayOfClick": "0",
}


@pytest.fixture
def api(client):
    # TestClient는 httpx.Client 이므로 그대로 주입
    return ApiClient(base_url="http://testserver/api", http_client=client)


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def auth(api, store):
    return AuthFlow(api, store)


@pytest.fixture
def dashboard(api, store):
    return DashboardFlow(api, store)


@pytest.fixture
def logged_in(auth):
    auth.signup("Jane Doe", "jane@example.com", "Secret123", "Secret123")
    auth.login("jane@example.com", "Secret123")


def test_signup_validation_order(auth):
    assert auth.signup("J", "bad", "weak", "weak").text.startswith("Name must be")
    assert auth.signup("Jane", "bad", "weak", "weak").text == "Please enter a valid email address"
    assert auth.signup("Jane", "j@x.io", "weak", "weak").text == "Password must be at least 8 characters"
    assert auth.signup("Jane", "j@x.io", "Secret123", "").text == "Please confirm your password"
    assert auth.signup("Jane", "j@x.io", "Secret123", "Secret124").text == "Passwords do not match!"


def test_signup_and_login_persist_session(auth, store):
    message = auth.signup("  Jane Doe ", " jane@example.com ", "Secret123", "Secret123")
    assert message.kind == "success"

    duplicate = auth.signup("Jane Doe", "jane@example.com", "Secret123", "Secret123")
    assert duplicate.is_error
    assert duplicate.text == "Email already exists"

    assert store.load() is None
    message = auth.login("jane@example.com", "Secret123")
    assert message.kind == "success"
    assert store.load().name == "Jane Doe"


def test_failed_login_keeps_user_logged_out(auth, store):
    message = auth.login("nobody@example.com", "whatever")
    assert message.text == "Invalid credentials"
    assert store.load() is None


def test_dashboard_requires_session(dashboard):
    with pytest.raises(NotLoggedInError):
        dashboard.welcome_text()


def test_profile_roundtrip(logged_in, dashboard):
    assert dashboard.welcome_text() == "Welcome back, Jane Doe!"
    assert dashboard.load_profile() is None

    assert dashboard.save_profile(FORM).kind == "success"
    assert dashboard.load_profile() == {key: int(value) for key, value in FORM.items()}


def test_recommendations_need_model_choice(logged_in, dashboard):
    view = dashboard.get_recommendations(FORM, model=None)
    assert view.message.text == "Please select a model type first"


def test_recommendations_view(logged_in, dashboard, fake_model, seed_lookups):
    fake_model.body = {
        "top_10_recommendations": [{"brand": 9, "cate_id": 200, "price": 5.0, "probability": 0.42}],
        "total_products_scored": 77,
    }

    view = dashboard.get_recommendations(FORM, model="gen")

    assert view.message.kind == "success"
    assert view.model_type == "DeepFM (gen)"
    assert view.total_products_scored == 77
    assert view.recommendations[0]["brandName"] == "Globex"
    assert fake_model.requests[0]["use_gen_model"] is True


def test_empty_recommendations_show_placeholder(logged_in, dashboard):
    view = dashboard.get_recommendations(FORM, model="base")
    assert view.message.kind == "info"
    assert view.message.text == "No recommendations found. Please try again."


def test_recommendation_failure_is_not_fatal(logged_in, dashboard, fake_model):
    fake_model.status_code = 500
    fake_model.body = "internal"

    view = dashboard.get_recommendations(FORM, model="base")
    assert view.message.is_error
    assert view.message.text == "Failed to get recommendations"
    assert view.recommendations == []


def test_logout_clears_session(logged_in, auth, dashboard, store):
    auth.logout()
    assert store.load() is None
    with pytest.raises(NotLoggedInError):
        dashboard.load_profile()


def test_connection_failure_becomes_client_error():
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    api = ApiClient(http_client=httpx.Client(transport=httpx.MockTransport(refuse)))
    with pytest.raises(ApiClientError) as excinfo:
        api.login("a@b.co", "x")
    assert excinfo.value.message == "Login failed"


def test_file_session_store(tmp_path):
    store = FileSessionStore(str(tmp_path / "session.json"))
    assert store.load() is None

    store.save(UserSession(user_id=3, name="Jane"))
    assert FileSessionStore(str(tmp_path / "session.json")).load() == UserSession(3, "Jane")

    store.clear()
    assert store.load() is None


def test_corrupt_session_file_is_logged_out(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")
    assert FileSessionStore(str(path)).load() is None
