import importlib
import logging

import shop.main


def test_importing_factory_module_has_no_side_effects():
    assert not hasattr(shop.main, "app")


def test_asgi_app_reads_settings_from_environment(monkeypatch, tmp_path):
    database_url = f"sqlite:///{tmp_path / 'env.db'}"
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    import shop.asgi

    module = importlib.reload(shop.asgi)
    assert module.app.state.settings.DATABASE_URL == database_url
    assert str(module.app.state.engine.url) == database_url
    assert logging.getLogger().level == logging.WARNING
