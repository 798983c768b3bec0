import pytest
from pydantic import ValidationError

from gorse_client import Feedback, GorseSettings, Item, ListOptions, User, get_settings
from gorse_client.config import DEFAULT_TIMEOUT


# ── Models ─────────────────────────────────────────


def test_user_accepts_wire_and_python_names():
    assert User.model_validate({"UserId": "alice"}).user_id == "alice"
    assert User(user_id="alice").user_id == "alice"


def test_coerce_returns_same_instance():
    user = User(user_id="alice")
    assert User.coerce(user) is user


def test_coerce_validates_mapping():
    with pytest.raises(ValidationError):
        Item.coerce({"Comment": "no id"})


def test_to_wire_omits_unset_fields():
    feedback = Feedback(feedback_type="star", user_id="bob", item_id="1")
    assert feedback.to_wire() == {"FeedbackType": "star", "UserId": "bob", "ItemId": "1"}


def test_to_wire_keeps_explicit_nulls():
    payload = {"UserId": "a", "Labels": None, "Extra": None}
    assert User.model_validate(payload).to_wire() == payload
    assert User(user_id="a", comment=None).to_wire() == {"UserId": "a", "Comment": None}


def test_labels_are_opaque():
    labels = {"topics": ["a", "b"], "embedding": [0.1, 0.2]}
    item = Item.model_validate({"ItemId": "1", "Labels": labels})
    assert item.to_wire()["Labels"] == labels


# ── List options ───────────────────────────────────


@pytest.mark.parametrize(
    "options, expected",
    [
        (ListOptions(), {}),
        (ListOptions(n=5), {"n": 5}),
        (ListOptions(write_back_delay="10m", n=5), {"write-back-delay": "10m", "n": 5}),
        (ListOptions(offset=0), {"offset": 0}),
        (
            ListOptions(offset=2, n=1, write_back_delay="1m", write_back_type="read"),
            {"write-back-type": "read", "write-back-delay": "1m", "n": 1, "offset": 2},
        ),
    ],
)
def test_list_options_to_query(options, expected):
    query = options.to_query()
    assert query == expected
    assert list(query) == list(expected)


# ── Settings ───────────────────────────────────────


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GORSE_ENDPOINT", "http://127.0.0.1:8088")
    monkeypatch.setenv("GORSE_API_KEY", "secret")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.endpoint == "http://127.0.0.1:8088"
    assert settings.api_key == "secret"
    assert settings.timeout == DEFAULT_TIMEOUT
    get_settings.cache_clear()


def test_settings_require_http_endpoint():
    with pytest.raises(ValidationError):
        GorseSettings(endpoint="127.0.0.1:8088", api_key="secret")


def test_settings_require_api_key():
    with pytest.raises(ValidationError):
        GorseSettings(endpoint="http://127.0.0.1:8088", _env_file=None)
