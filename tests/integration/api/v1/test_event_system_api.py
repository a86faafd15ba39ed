"""
Tests for the event system management endpoints
"""
import asyncio

import pytest
from fastapi.testclient import TestClient

from order_notifier.events.config import EventConfigLoader
from order_notifier.events.core.event_bus import EventBus
from order_notifier.events.plugin_manager import PluginManager
from order_notifier.events.plugins.slack_notification import get_plugin
from order_notifier.events.runtime import set_plugin_manager
from order_notifier.main import app
from tests.helpers.asserts import assert_error_response
from tests.helpers.builders import FakeSnapshotReader


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "event_config.yaml"
    path.write_text(
        "plugins:\n  slack_notification:\n    webhook_url: https://hooks.example.test/x\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def plugin_manager(config_path):
    loader = EventConfigLoader(config_path)
    manager = PluginManager(EventBus(), loader)
    asyncio.run(manager.register(get_plugin(FakeSnapshotReader(), loader)))
    set_plugin_manager(manager)
    yield manager
    set_plugin_manager(None)


@pytest.mark.integration
class TestEventSystem:
    """Tests for /api/v1/events management endpoints"""

    def test_list_plugins(self, plugin_manager: PluginManager):
        response = TestClient(app).get("/api/v1/events/plugins")

        assert response.status_code == 200
        slack = response.json()["plugins"]["slack_notification"]
        assert slack["enabled"] is True
        assert slack["handlers"] == {
            "slack_order_status_handler": True,
            "slack_order_created_handler": True,
        }
        assert slack["metadata"]["webhook_configured"] is True

    def test_reload_config_applies_file_changes(self, plugin_manager: PluginManager, config_path):
        """
        Arrange: status handler disabled in the file after startup
        Act: POST /api/v1/events/reload-config
        Assert: new configuration returned and reflected in the plugin status
        """
        # Arrange
        client = TestClient(app)
        client.get("/api/v1/events/plugins")
        config_path.write_text(
            "disabled_handlers: [slack_order_status_handler]\n", encoding="utf-8"
        )

        # Act
        response = client.post("/api/v1/events/reload-config")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Event configuration reloaded"
        assert data["config"]["disabled_handlers"] == ["slack_order_status_handler"]
        handlers = client.get("/api/v1/events/plugins").json()["plugins"]["slack_notification"]["handlers"]
        assert handlers["slack_order_status_handler"] is False

    def test_reload_missing_file_returns_404(self, plugin_manager: PluginManager, config_path):
        config_path.unlink()

        response = TestClient(app).post("/api/v1/events/reload-config")

        assert_error_response(response, 404, error_code="ENTITY_NOT_FOUND")

    def test_reload_invalid_file_returns_400(self, plugin_manager: PluginManager, config_path):
        config_path.write_text("- not\n- a mapping\n", encoding="utf-8")

        response = TestClient(app).post("/api/v1/events/reload-config")

        assert_error_response(response, 400, error_code="VALIDATION_ERROR")

    def test_plugins_without_event_system_returns_503(self):
        set_plugin_manager(None)

        response = TestClient(app).get("/api/v1/events/plugins")

        assert_error_response(response, 503, error_code="EVENT_SYSTEM_UNAVAILABLE")

    def test_list_events(self):
        response = TestClient(app).get("/api/v1/events/list")

        assert response.status_code == 200
        assert response.json() == {
            "events": ["order_status_changed", "order_created"],
            "total": 2,
        }
