"""Command-line entry point: serve the tools over stdio or HTTP."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, TextIO

from cwmcp.server import INVALID_REQUEST, PARSE_ERROR, CwMcp, ServerTransport

logger = logging.getLogger("cwmcp")

DEFAULT_BIND = "127.0.0.1:8000"


def _error(code: int, message: str) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": None, "error": {"code": code, "message": message}}


def _dispatch_text(server: CwMcp, text: str) -> Any:
    """Handle one raw JSON-RPC payload, single or batched."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        return _error(PARSE_ERROR, f"parse error: {exc}")
    if isinstance(payload, list):
        if not payload:
            return _error(INVALID_REQUEST, "empty batch")
        responses = [r for r in map(server.handle_message, payload) if r is not None]
        return responses or None
    return server.handle_message(payload)


def serve_stdio(server: CwMcp, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Serve newline-delimited JSON-RPC until the input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        response = _dispatch_text(server, line)
        if response is not None:
            stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
            stdout.flush()


def _make_http_server(server: CwMcp, host: str, port: int) -> ThreadingHTTPServer:
    class Handler(BaseHTTPRequestHandler):
        def do_POST(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length).decode("utf-8", errors="replace")
            response = _dispatch_text(server, body)
            if response is None:
                self.send_response(202)
                self.send_header("Content-Length", "0")
                self.end_headers()
                return
            data = json.dumps(response, ensure_ascii=False)
            accept = self.headers.get("Accept", "")
            if "text/event-stream" in accept and "application/json" not in accept:
                payload = f"event: message\ndata: {data}\n\n".encode("utf-8")
                content_type = "text/event-stream"
            else:
                payload = data.encode("utf-8")
                content_type = "application/json"
            self.send_response(200)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def do_GET(self) -> None:
            self.send_response(405)
            self.send_header("Allow", "POST")
            self.send_header("Content-Length", "0")
            self.end_headers()

        def log_message(self, format: str, *args: Any) -> None:
            logger.debug("%s - %s", self.address_string(), format % args)

    return ThreadingHTTPServer((host, port), Handler)


def serve_http(server: CwMcp, host: str = "127.0.0.1", port: int = 8000) -> None:
    """Serve JSON-RPC over HTTP POST until interrupted."""
    httpd = _make_http_server(server, host, port)
    logger.info("listening on %s:%d", host, httpd.server_address[1])
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        logger.info("http server cancelled")
    finally:
        httpd.server_close()


def _load_schema(path: str | None) -> dict[str, Any] | None:
    if path is None:
        return None
    return json.loads(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cwmcp", description="Contract tool server.")
    parser.add_argument(
        "--transport",
        choices=[t.value for t in ServerTransport],
        default=ServerTransport.STDIO.value,
    )
    parser.add_argument("--bind", default=DEFAULT_BIND, help="host:port for HTTP transports")
    parser.add_argument("--query-schema", help="JSON file with the query message schema")
    parser.add_argument("--execute-schema", help="JSON file with the execute message schema")
    args = parser.parse_args(argv)

    host, _, port_text = args.bind.rpartition(":")
    if not host or not port_text.isdigit():
        parser.error(f"invalid bind address: {args.bind}")

    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG)
    server = CwMcp(
        query_schema=_load_schema(args.query_schema),
        execute_schema=_load_schema(args.execute_schema),
    )
    if ServerTransport(args.transport) is ServerTransport.STDIO:
        serve_stdio(server, sys.stdin, sys.stdout)
    else:
        serve_http(server, host, int(port_text))
    return 0


if __name__ == "__main__":
    sys.exit(main())