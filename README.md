# cwmcp

A Model Context Protocol (MCP) tool server for a deployed CosmWasm contract.
It tells an agent where the contract is deployed and which queries and
transactions it accepts. It also wraps JSON entry-point messages into Cosmos
wasm `QueryRequest` and `CosmosMsg` JSON, ready for an RPC-enabled query tool
or wallet. The server never signs, broadcasts or sends anything itself.

## Tools

| Tool | Result |
| --- | --- |
| `list_contract_deployments` | The deployments as JSON: `network`, `chain_id`, `contract_address` |
| `list_query_entry_points` | The query message schema, as JSON |
| `build_query_msg` | `{"query_msg": ..., "query_request": ...}`, where the request is a wasm smart query |
| `list_tx_entry_points` | The execute message schema, as JSON |
| `build_execute_msg` | `{"execute_msg": ..., "cosmos_msg": ...}`, where the message is a wasm execute with optional funds |

The builders accept a message that is valid JSON and names exactly one entry
point. That is either a JSON string or an object with a single key. The message
is re-encoded as compact JSON and put in base64 in the `msg` field. Anything
else raises `ValueError`. When the tool is called through `CwMcp.call_tool` or
over JSON-RPC, that error comes back as an error result (`isError: true`).

Funds are attached only when both `payment` and `payment_denom` are given. An
amount that is not a valid unsigned 128-bit decimal becomes `0`.

## Installation

```
pip install .
```

## Running

```
cwmcp
```

By default the server speaks JSON-RPC over stdio, one message per line, and
stops when its input ends. Options:

- `--transport {stdio,sse,streamable-http}`: `sse` and `streamable-http` both
  start a plain HTTP server that answers JSON-RPC on `POST`. The reply is
  JSON. If the `Accept` header asks for `text/event-stream` but not
  `application/json`, the reply is a single `message` event. `GET` answers
  `405`.
- `--bind HOST:PORT`: the address for the HTTP transports (default
  `127.0.0.1:8000`).
- `--query-schema FILE` and `--execute-schema FILE`: JSON files holding the
  schemas that the two list tools return.

Log output goes to stderr.

```
cwmcp --help
```

## Using it as a library

```python
from cwmcp.contract import default_contracts
from cwmcp.server import CwMcp

server = CwMcp(default_contracts(), query_schema={}, execute_schema={})

result = server.build_query_msg(
    "archway1...", '{"balance": {"address": "archway1..."}}'
)
print(result.texts[0])

result = server.build_execute_msg("archway1...", '{"deposit": {}}', "1000", "aarch")
print(result.texts[0])
```

- `cwmcp.contract`:
  - `Network`, `CwContract` (with `to_dict()`).
  - `default_contracts()`, which returns the configured Archway mainnet
    (`archway-1`) and testnet (`constantine-3`) deployments.
- `cwmcp.messages`:
  - `build_query_request`, `build_cosmos_msg` and `parse_uint128`.
  - `Coin`, `ValidatedQuery` and `ValidatedExecute`.
- `cwmcp.server.CwMcp`:
  - One method per tool. Each returns a `ToolResult`, which has `texts` and
    `is_error`.
  - `get_info()`, `list_tools()` and `call_tool(name, arguments)`.
  - `handle_message(message)`, which answers one JSON-RPC request given as a
    dict and returns `None` for notifications. It handles `initialize`, `ping`,
    `tools/list` and `tools/call`.
- `cwmcp.cli`:
  - `serve_stdio(server, stdin, stdout)` and `serve_http(server, host, port)`.
    Both also take batched requests.

## What it does not do

- No contract schemas are bundled. Unless you pass your own, the list tools
  return only `{"title": "QueryMsg"}` and `{"title": "ExecuteMsg"}`.
- Messages are not checked against a schema, only for the one-entry-point
  shape described above.
- The HTTP transports hold no sessions and keep no event stream open. Each
  `POST` gets one reply.