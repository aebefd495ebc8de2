"""Tests for the selection history store and the getLatestSelection tool."""

import json

import pytest

from sidepane.errors import INTERNAL_ERROR, METHOD_NOT_FOUND, ToolError
from sidepane.selection import Position, Selection, SelectionStore, SelectionStoreError
from sidepane.tools import call_tool, get_tool, list_tools


def make_selection(text="hello", path="/src/app.py", start=(1, 0), end=(1, 5)):
    return Selection(text=text, file_path=path, start=Position(*start), end=Position(*end))


@pytest.fixture
def store(tmp_path):
    return SelectionStore(tmp_path / "state" / "selections.json", history_size=3)


def test_missing_file_is_empty(store):
    assert store.load() == []
    assert store.get_latest_selection() is None


def test_record_and_latest(store):
    store.record(make_selection("first"))
    store.record(make_selection("second"))
    assert store.get_latest_selection().text == "second"


def test_history_is_bounded(store):
    for i in range(5):
        store.record(make_selection(f"s{i}"))
    assert [s.text for s in store.load()] == ["s2", "s3", "s4"]


def test_clear(store):
    store.record(make_selection())
    store.clear()
    assert store.get_latest_selection() is None


def test_serialized_format():
    data = make_selection(start=(2, 4), end=(2, 4)).to_dict()
    assert data["filePath"] == "/src/app.py"
    assert data["fileUrl"] == "file:///src/app.py"
    assert data["selection"] == {
        "start": {"line": 2, "character": 4},
        "end": {"line": 2, "character": 4},
        "isEmpty": True,
    }
    assert Selection.from_dict(data) == make_selection(start=(2, 4), end=(2, 4))


@pytest.mark.parametrize("content", ["{not json", '{"a": 1}', '[{"text": "x"}]'])
def test_corrupt_store_raises(store, content):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(content)
    with pytest.raises(SelectionStoreError):
        store.load()


def test_tool_is_registered():
    tool = get_tool("getLatestSelection")
    assert tool is not None
    assert tool in list_tools()
    assert tool.schema["inputSchema"]["additionalProperties"] is False


def test_tool_without_selection(store):
    result = call_tool("getLatestSelection", store)
    payload = json.loads(result["content"][0]["text"])
    assert result["content"][0]["type"] == "text"
    assert payload == {"success": False, "message": "No selection available"}


def test_tool_returns_latest_selection(store):
    store.record(make_selection("older"))
    store.record(make_selection("newest", path="/src/other.py"))
    text = call_tool("getLatestSelection", store)["content"][0]["text"]
    payload = json.loads(text)
    assert payload["text"] == "newest"
    assert payload["filePath"] == "/src/other.py"
    assert text == json.dumps(payload, indent=2)


def test_tool_store_failure_is_internal_error(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json")
    with pytest.raises(ToolError) as exc:
        call_tool("getLatestSelection", store)
    assert exc.value.code == INTERNAL_ERROR
    assert exc.value.to_dict() == {
        "code": INTERNAL_ERROR,
        "message": "Internal server error",
        "data": "Failed to load selection store",
    }


def test_unknown_tool(store):
    with pytest.raises(ToolError) as exc:
        call_tool("getEverything", store)
    assert exc.value.code == METHOD_NOT_FOUND
