"""The tool server: contract listings, schemas and message builders over JSON-RPC."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from cwmcp.contract import CwContract, default_contracts
from cwmcp.instructions import (
    BUILD_EXECUTE_MSG_DESCR,
    BUILD_QUERY_MSG_DESCR,
    LIST_CONTRACTS_DESCR,
    LIST_QUERY_ENTRY_POINTS_DESCR,
    LIST_TX_ENTRY_POINTS_DESCR,
    SERVER_INFO_DESCR,
)
from cwmcp.messages import (
    ValidatedExecute,
    ValidatedQuery,
    build_cosmos_msg,
    build_query_request,
)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "cosmwasm-mcp-template"
SERVER_VERSION = "0.1.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

_CONTRACT_ADDR_DESCR = "address of the deployed contract (e.g. mainnet or testnet address)"


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class ServerTransport(Enum):
    """Transports the server can be reached over."""

    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


class McpError(Exception):
    """A protocol-level error carrying a JSON-RPC error code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class ToolResult:
    """The text content returned by a tool call, flagged as success or error."""

    texts: tuple[str, ...]
    is_error: bool = False

    @classmethod
    def success(cls, *texts: str) -> ToolResult:
        return cls(tuple(texts), False)

    @classmethod
    def error(cls, *texts: str) -> ToolResult:
        return cls(tuple(texts), True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [{"type": "text", "text": text} for text in self.texts],
            "isError": self.is_error,
        }


@dataclass(frozen=True)
class _Param:
    name: str
    description: str
    required: bool = True


@dataclass(frozen=True)
class _Tool:
    name: str
    description: str
    params: tuple[_Param, ...] = ()

    def input_schema(self) -> dict[str, Any]:
        properties = {
            p.name: {
                "type": "string" if p.required else ["string", "null"],
                "description": p.description,
            }
            for p in self.params
        }
        schema: dict[str, Any] = {"type": "object", "properties": properties}
        required = [p.name for p in self.params if p.required]
        if required:
            schema["required"] = required
        return schema


_TOOLS = {
    tool.name: tool
    for tool in (
        _Tool("list_contract_deployments", LIST_CONTRACTS_DESCR),
        _Tool("list_query_entry_points", LIST_QUERY_ENTRY_POINTS_DESCR),
        _Tool(
            "build_query_msg",
            BUILD_QUERY_MSG_DESCR,
            (
                _Param("contract_addr", _CONTRACT_ADDR_DESCR),
                _Param(
                    "query_msg",
                    "JSON stringified QueryMsg variant needed for building the query "
                    "as a Cosmos SDK QueryRequest",
                ),
            ),
        ),
        _Tool("list_tx_entry_points", LIST_TX_ENTRY_POINTS_DESCR),
        _Tool(
            "build_execute_msg",
            BUILD_EXECUTE_MSG_DESCR,
            (
                _Param("contract_addr", _CONTRACT_ADDR_DESCR),
                _Param(
                    "execute_msg",
                    "ExecuteMsg variant and its values needed for building the "
                    "transaction as a Cosmos SDK CosmosMsg",
                ),
                _Param(
                    "payment",
                    "Optionally include native payment funds to be sent in the transaction "
                    "(required for any transactions that require native denom payments; "
                    "e.g. not cw20 payments)",
                    required=False,
                ),
                _Param(
                    "payment_denom",
                    "Optionally include native payment denom for funds being sent in the "
                    "transaction (required for any transactions that require native denom "
                    "payments; e.g. not cw20 payments)",
                    required=False,
                ),
            ),
        ),
    )
}


def _bind_arguments(tool: _Tool, arguments: Any) -> dict[str, str | None]:
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise McpError(INVALID_PARAMS, "tool arguments must be an object")
    bound: dict[str, str | None] = {}
    for param in tool.params:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                raise McpError(INVALID_PARAMS, f"missing argument: {param.name}")
        elif not isinstance(value, str):
            raise McpError(INVALID_PARAMS, f"argument {param.name} must be a string")
        bound[param.name] = value
    return bound


class CwMcp:
    """Tool server for one contract's deployments, schemas and messages."""

    def __init__(
        self,
        contracts: Iterable[CwContract] | None = None,
        query_schema: dict[str, Any] | None = None,
        execute_schema: dict[str, Any] | None = None,
    ) -> None:
        self.contracts = tuple(contracts) if contracts is not None else default_contracts()
        self.query_schema = query_schema if query_schema is not None else {"title": "QueryMsg"}
        self.execute_schema = (
            execute_schema if execute_schema is not None else {"title": "ExecuteMsg"}
        )

    def list_contract_deployments(self) -> ToolResult:
        """List deployed contracts with their networks and chain ids."""
        return ToolResult.success(_dumps([c.to_dict() for c in self.contracts]))

    def list_query_entry_points(self) -> ToolResult:
        """Return the query message schema."""
        return ToolResult.success(_dumps(self.query_schema))

    def build_query_msg(self, contract_addr: str, query_msg: str) -> ToolResult:
        """Build a query request; raises ValueError for a malformed message."""
        request = build_query_request(contract_addr, query_msg)
        validated = ValidatedQuery(query_msg=query_msg, query_request=_dumps(request))
        return ToolResult.success(validated.to_json())

    def list_tx_entry_points(self) -> ToolResult:
        """Return the execute message schema."""
        return ToolResult.success(_dumps(self.execute_schema))

    def build_execute_msg(
        self,
        contract_addr: str,
        execute_msg: str,
        payment: str | None = None,
        payment_denom: str | None = None,
    ) -> ToolResult:
        """Build a cosmos message; raises ValueError for a malformed message."""
        cosmos = build_cosmos_msg(contract_addr, execute_msg, payment, payment_denom)
        validated = ValidatedExecute(execute_msg=execute_msg, cosmos_msg=_dumps(cosmos))
        return ToolResult.success(validated.to_json())

    def get_info(self) -> dict[str, Any]:
        """Return the result of the initialize handshake."""
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
            "instructions": SERVER_INFO_DESCR,
        }

    def list_tools(self) -> list[dict[str, Any]]:
        """Describe every tool with its input schema."""
        return [
            {"name": t.name, "description": t.description, "inputSchema": t.input_schema()}
            for t in _TOOLS.values()
        ]

    def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Run a tool by name; bad messages become error results."""
        tool = _TOOLS.get(name)
        if tool is None:
            raise McpError(INVALID_PARAMS, f"tool not found: {name}")
        kwargs = _bind_arguments(tool, arguments)
        try:
            return getattr(self, tool.name)(**kwargs)
        except ValueError as exc:
            return ToolResult.error(str(exc))

    def handle_message(self, message: Any) -> dict[str, Any] | None:
        """Answer one JSON-RPC message; returns None for notifications."""
        if not isinstance(message, dict):
            return _error_response(None, INVALID_REQUEST, "invalid request")
        method = message.get("method")
        if method is None and ("result" in message or "error" in message):
            return None
        is_notification = "id" not in message
        request_id = message.get("id")
        if message.get("jsonrpc") != "2.0" or not isinstance(method, str):
            return None if is_notification else _error_response(
                request_id, INVALID_REQUEST, "invalid request"
            )
        try:
            result = self._dispatch(method, message.get("params") or {})
        except McpError as exc:
            return None if is_notification else _error_response(request_id, exc.code, exc.message)
        if is_notification:
            return None
        return {"jsonrpc": "2.0", "id": request_id, "result": result}

    def _dispatch(self, method: str, params: Any) -> Any:
        if method.startswith("notifications/"):
            return None
        if method == "initialize":
            return self.get_info()
        if method == "ping":
            return {}
        if method == "tools/list":
            return {"tools": self.list_tools()}
        if method == "tools/call":
            if not isinstance(params, dict) or not isinstance(params.get("name"), str):
                raise McpError(INVALID_PARAMS, "tools/call requires a tool name")
            return self.call_tool(params["name"], params.get("arguments")).to_dict()
        raise McpError(METHOD_NOT_FOUND, f"method not found: {method}")


def _error_response(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}