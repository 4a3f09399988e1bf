import io
import json
import threading
import urllib.error
import urllib.request

import pytest

from cwmcp.cli import _make_http_server, main, serve_stdio
from cwmcp.server import PARSE_ERROR, CwMcp


def _lines(text):
    return [json.loads(line) for line in text.splitlines() if line]


def test_serve_stdio_responds_to_requests_only():
    stdin = io.StringIO(
        '{"jsonrpc":"2.0","id":1,"method":"initialize","params":{}}\n'
        '{"jsonrpc":"2.0","method":"notifications/initialized"}\n'
        "\n"
        '{"jsonrpc":"2.0","id":2,"method":"tools/list"}\n'
        "not json\n"
    )
    stdout = io.StringIO()
    serve_stdio(CwMcp(), stdin, stdout)
    responses = _lines(stdout.getvalue())
    assert [r["id"] for r in responses] == [1, 2, None]
    assert len(responses[1]["result"]["tools"]) == 5
    assert responses[2]["error"]["code"] == PARSE_ERROR


def test_serve_stdio_batch():
    stdin = io.StringIO(
        '[{"jsonrpc":"2.0","id":1,"method":"ping"},{"jsonrpc":"2.0","id":2,"method":"ping"}]\n'
    )
    stdout = io.StringIO()
    serve_stdio(CwMcp(), stdin, stdout)
    (batch,) = _lines(stdout.getvalue())
    assert [r["id"] for r in batch] == [1, 2]


def test_main_stdio_with_schema_file(tmp_path, monkeypatch):
    schema = {"title": "QueryMsg", "oneOf": []}
    path = tmp_path / "query.json"
    path.write_text(json.dumps(schema))
    request = {
        "jsonrpc": "2.0",
        "id": 7,
        "method": "tools/call",
        "params": {"name": "list_query_entry_points", "arguments": {}},
    }
    stdout = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(request) + "\n"))
    monkeypatch.setattr("sys.stdout", stdout)
    assert main(["--query-schema", str(path)]) == 0
    (response,) = _lines(stdout.getvalue())
    assert json.loads(response["result"]["content"][0]["text"]) == schema


def test_main_rejects_bad_bind():
    with pytest.raises(SystemExit) as info:
        main(["--transport", "streamable-http", "--bind", "nope"])
    assert info.value.code == 2


@pytest.fixture
def http_url():
    httpd = _make_http_server(CwMcp(), "127.0.0.1", 0)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}/"
    httpd.shutdown()
    httpd.server_close()


def _post(url, payload, accept="application/json"):
    request = urllib.request.Request(
        url,
        data=json.dumps(payload).encode(),
        headers={"Content-Type": "application/json", "Accept": accept},
        method="POST",
    )
    with urllib.request.urlopen(request, timeout=5) as response:
        return response.status, response.headers.get("Content-Type"), response.read().decode()


def test_http_request(http_url):
    status, ctype, body = _post(http_url, {"jsonrpc": "2.0", "id": 1, "method": "ping"})
    assert status == 200
    assert ctype == "application/json"
    assert json.loads(body) == {"jsonrpc": "2.0", "id": 1, "result": {}}


def test_http_event_stream(http_url):
    status, ctype, body = _post(
        http_url, {"jsonrpc": "2.0", "id": 4, "method": "ping"}, accept="text/event-stream"
    )
    assert ctype == "text/event-stream"
    data_line = next(line for line in body.splitlines() if line.startswith("data: "))
    assert json.loads(data_line[len("data: "):])["id"] == 4


def test_http_notification_accepted(http_url):
    status, _, body = _post(http_url, {"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert status == 202
    assert body == ""


def test_http_get_not_allowed(http_url):
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(http_url, timeout=5)
    assert info.value.code == 405