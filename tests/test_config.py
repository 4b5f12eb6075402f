import pytest
from pydantic import ValidationError

from places_api.core.config import Settings


def test_missing_mongodb_uri_is_fatal(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)
    with pytest.raises(ValidationError) as excinfo:
        Settings(_env_file=None)
    assert "MONGODB_URI" in str(excinfo.value)


def test_maps_script_url_carries_the_key(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://db:27017")
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "abc123")
    config = Settings(_env_file=None)
    assert config.MONGODB_URI == "mongodb://db:27017"
    assert "key=abc123" in config.maps_script_url
