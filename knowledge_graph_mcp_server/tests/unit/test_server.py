"""Unit tests for MCP server wiring."""
import orjson
import mcp.types as types

from ...config import ServerConfig
from ...server import build_server

async def test_list_tools_request(dispatcher):
    server = build_server(ServerConfig(), dispatcher)
    handler = server.request_handlers[types.ListToolsRequest]

    result = await handler(types.ListToolsRequest(method="tools/list"))
    names = {tool.name for tool in result.root.tools}
    assert names == {
        "create_entities", "create_relations", "add_observations",
        "delete_entities", "delete_observations", "delete_relations",
        "read_graph", "search_nodes", "open_nodes"
    }

async def test_call_tool_request(dispatcher):
    server = build_server(ServerConfig(), dispatcher)
    handler = server.request_handlers[types.CallToolRequest]

    await handler(types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(
            name="create_entities",
            arguments={"entities": [{"name": "A", "entityType": "t", "observations": ["o"]}]}
        )
    ))
    result = await handler(types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="search_nodes", arguments={"query": "O"})
    ))

    assert orjson.loads(result.root.content[0].text) == {
        "entities": {"A": {"name": "A", "entityType": "t", "observations": ["o"]}},
        "relations": []
    }

async def test_call_tool_failure_sets_is_error(dispatcher):
    """Test a missing endpoint is reported as a failed tool call."""
    server = build_server(ServerConfig(), dispatcher)
    handler = server.request_handlers[types.CallToolRequest]

    result = await handler(types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(
            name="create_relations",
            arguments={"relations": [{"from": "A", "to": "B", "relationType": "knows"}]}
        )
    ))

    assert result.root.isError is True
    assert result.root.content[0].text == "Error in create_relations: Entity A does not exist"

async def test_call_tool_partial_batch_reports_error(dispatcher):
    """Test a batch that stops early is flagged while earlier items stay applied."""
    server = build_server(ServerConfig(), dispatcher)
    handler = server.request_handlers[types.CallToolRequest]
    await dispatcher.invoke("create_entities", {
        "entities": [{"name": "A", "entityType": "t"}, {"name": "B", "entityType": "t"}]
    })

    result = await handler(types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(
            name="create_relations",
            arguments={"relations": [
                {"from": "A", "to": "B", "relationType": "knows"},
                {"from": "A", "to": "ghost", "relationType": "knows"}
            ]}
        )
    ))

    assert result.root.isError is True
    assert "Entity ghost does not exist" in result.root.content[0].text
    graph = await dispatcher.invoke("read_graph", {})
    assert graph["relations"] == [{"from": "A", "to": "B", "relationType": "knows"}]
