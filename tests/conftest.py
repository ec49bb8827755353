"""Shared test fixtures for installer tests."""

import pytest
from fastapi.testclient import TestClient

from common.i18n import TranslationService
from installer.config import PACKAGE_DIR, Settings
from installer.services.installer import InstallState, TranslationFinder
from installer.services.theme import TableSort, TemplateRenderer


TRANSLATION_FILES = [
    "drupal-8.0.0.de.po",
    "drupal-8.x.pt-br.po",
    "drupal-8.0.qq.po",
]


@pytest.fixture
def translations_dir(tmp_path):
    """A translations directory with German, Brazilian Portuguese and a non-standard 'qq'."""
    directory = tmp_path / "translations"
    directory.mkdir()
    for name in TRANSLATION_FILES:
        (directory / name).write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")
    (directory / "README.txt").write_text("not a translation", encoding="utf-8")
    return directory


@pytest.fixture
def empty_translations_dir(tmp_path):
    directory = tmp_path / "empty-translations"
    directory.mkdir()
    return directory


@pytest.fixture
def finder(translations_dir):
    return TranslationFinder(str(translations_dir))


@pytest.fixture
def install_state(finder):
    return InstallState(translations=finder.find_translations())


@pytest.fixture
def translation_service():
    return TranslationService(locales_dir=str(PACKAGE_DIR / "locales"))


@pytest.fixture
def renderer(translation_service):
    return TemplateRenderer(str(PACKAGE_DIR / "templates"), translation_service)


@pytest.fixture
def table_sort(renderer):
    return TableSort(renderer, asset_base_url="/")


def _make_settings(translations_path, **overrides):
    return Settings(_env_file=None, TRANSLATIONS_PATH=str(translations_path), **overrides)


@pytest.fixture
def make_client(monkeypatch):
    """Build a TestClient whose app starts with the given translations directory."""
    clients = []

    def _make(translations_path, **overrides):
        import api

        monkeypatch.setattr(api, "settings", _make_settings(translations_path, **overrides))
        client = TestClient(api.app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, translations_dir):
    return make_client(translations_dir)
