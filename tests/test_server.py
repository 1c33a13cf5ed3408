"""Tests for MCP server construction and startup."""

import logging
from unittest.mock import patch

import pytest

from lending_registry import server
from lending_registry.registry import Registry
from lending_registry.server import configure_logging, create_server


@pytest.mark.mcp_protocol
class TestCreateServer:
    async def test_registers_tools(self, registry, test_config):
        mcp = create_server(registry, test_config)

        tools = await mcp.get_tools()
        assert {"borrow_item", "return_item"} <= set(tools)

    async def test_registers_resources(self, registry, test_config):
        mcp = create_server(registry, test_config)

        resources = await mcp.get_resources()
        templates = await mcp.get_resource_templates()

        assert {"library://items/list", "library://summary"} <= {str(uri) for uri in resources}
        assert {
            "library://items/{item_id}",
            "library://members/{member_id}/items",
        } <= set(templates)

    def test_server_name_from_config(self, registry, test_config):
        mcp = create_server(registry, test_config)
        assert mcp.name == "test-lending-registry"


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    fastmcp_level = logging.getLogger("fastmcp").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("fastmcp").setLevel(fastmcp_level)


class TestLogging:
    def test_debug_config_sets_debug_level(self, test_config):
        configure_logging(test_config)
        assert logging.getLogger().level == logging.DEBUG

    def test_production_config_quiets_fastmcp(self, test_config):
        config = test_config.model_copy(update={"debug": False, "log_level": "WARNING"})

        configure_logging(config)

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("fastmcp").level == logging.WARNING


class TestMain:
    def test_main_runs_seeded_registry(self, test_config):
        config = test_config.model_copy(update={"seed_sample_data": True})

        with (
            patch.object(server, "get_config", return_value=config),
            patch.object(server, "run_server") as run_server,
        ):
            server.main()

        run_server.assert_called_once()

    def test_main_without_sample_data(self, test_config):
        with (
            patch.object(server, "get_config", return_value=test_config),
            patch.object(server, "create_server") as create,
            patch.object(server, "run_server"),
        ):
            server.main()

        registry = create.call_args.args[0]
        assert isinstance(registry, Registry)
        assert registry.items == {}

    def test_main_exits_on_failure(self, test_config):
        with (
            patch.object(server, "get_config", return_value=test_config),
            patch.object(server, "run_server", side_effect=RuntimeError("bind failed")),
            pytest.raises(SystemExit) as exc_info,
        ):
            server.main()

        assert exc_info.value.code == 1
