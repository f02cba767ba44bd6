import os

import pytest

from yts_catalog.domain.models import CatalogMirror
from yts_catalog.utils.config import CatalogConfig

ENV_VARS = ("YTS_BASE_URL", "YTS_MIRROR", "YTS_TIMEOUT", "YTS_PAGE_SIZE")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield tmp_path / ".env"
    # load_dotenv writes os.environ directly
    for name in ENV_VARS:
        os.environ.pop(name, None)


def test_defaults():
    config = CatalogConfig()

    assert config.base_url == "https://yts.mx/api/v2"
    assert config.timeout == 10.0
    assert config.page_size == 50


def test_trailing_slash_is_stripped():
    assert CatalogConfig(base_url="https://yts.test/api/v2/").base_url == "https://yts.test/api/v2"


def test_timeout_must_be_positive():
    with pytest.raises(ValueError):
        CatalogConfig(timeout=0)


def test_for_mirror_accepts_enum_or_host():
    assert CatalogConfig.for_mirror(CatalogMirror.YTS_AG).base_url == "https://yts.ag/api/v2"
    assert CatalogConfig.for_mirror("yts.lt", timeout=3).timeout == 3


def test_from_env_reads_dotenv_file(clean_env):
    clean_env.write_text("YTS_MIRROR=yts.am\nYTS_TIMEOUT=2.5\nYTS_PAGE_SIZE=20\n", encoding="utf-8")

    config = CatalogConfig.from_env(str(clean_env))

    assert config.base_url == "https://yts.am/api/v2"
    assert config.timeout == 2.5
    assert config.page_size == 20


def test_from_env_base_url_wins_over_mirror(clean_env, monkeypatch):
    monkeypatch.setenv("YTS_MIRROR", "yts.ag")
    monkeypatch.setenv("YTS_BASE_URL", "http://localhost:8080/api/v2/")

    config = CatalogConfig.from_env(str(clean_env))

    assert config.base_url == "http://localhost:8080/api/v2"


def test_from_env_rejects_bad_timeout(clean_env, monkeypatch):
    monkeypatch.setenv("YTS_TIMEOUT", "soon")

    with pytest.raises(ValueError):
        CatalogConfig.from_env(str(clean_env))


def test_from_env_rejects_bad_page_size(clean_env, monkeypatch):
    monkeypatch.setenv("YTS_PAGE_SIZE", "fifty")

    with pytest.raises(ValueError, match="YTS_PAGE_SIZE"):
        CatalogConfig.from_env(str(clean_env))
