"""End-to-end tests of the command dispatcher against a mock transport."""

import json
from datetime import datetime

import httpx
import pytest

from clickupcom.core import config
from clickupcom.core.config import API_KEY, BASE_URL, MASK
from clickupcom.main import run


@pytest.fixture
def cli(store, fake_api):
    """Run the CLI with a configured store and the fake API."""
    def invoke(*argv):
        return run(list(argv), store=store, transport=fake_api.transport)
    return invoke


class TestEntryPoint:
    """Test help output and argument errors."""

    def test_no_arguments_prints_help(self, store, capsys):
        assert run([], store=store) == 0
        out = capsys.readouterr().out
        assert "usage: clickupcom" in out
        assert "tasks" in out

    def test_resource_without_verb_prints_its_help(self, store, capsys):
        assert run(["tasks"], store=store) == 0
        out = capsys.readouterr().out
        assert "create" in out
        assert "delete" in out

    def test_missing_required_option(self, cli, fake_api):
        """argparse should reject the call before anything is sent."""
        with pytest.raises(SystemExit) as exc_info:
            cli("tasks", "list")
        assert exc_info.value.code == 2
        assert fake_api.requests == []

    def test_version(self, store, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run(["--version"], store=store)
        assert exc_info.value.code == 0
        assert "clickupcom 1.0.0" in capsys.readouterr().out


class TestAuthPrecondition:
    """Test that commands needing a key stop before any request."""

    @pytest.mark.parametrize("argv", [
        ["teams", "list"],
        ["spaces", "list", "--team-id", "T1"],
        ["spaces", "get", "S1"],
        ["folders", "create", "--space-id", "S1", "--name", "Q3"],
        ["lists", "list", "--folder-id", "F1"],
        ["tasks", "create", "--list-id", "L1", "--name", "Test"],
        ["tasks", "delete", "t1"],
        ["time", "start", "--team-id", "T1", "--task-id", "X1"],
        ["time", "stop", "--team-id", "T1"],
    ])
    def test_unconfigured_exits_without_request(self, empty_store, fake_api, capsys, argv):
        code = run(argv, store=empty_store, transport=fake_api.transport)

        assert code == 1
        assert fake_api.requests == []
        err = capsys.readouterr().err
        assert "ClickUp API key not configured." in err
        assert "clickupcom config set --api-key <key>" in err

    def test_config_commands_need_no_key(self, empty_store, fake_api):
        assert run(["config", "show"], store=empty_store, transport=fake_api.transport) == 0
        assert fake_api.requests == []


class TestConfigCommand:
    """Test config set / show."""

    def test_set_api_key(self, empty_store, capsys):
        assert run(["config", "set", "--api-key", "pk_999"], store=empty_store) == 0
        assert empty_store.get(API_KEY) == "pk_999"
        assert "API Key set" in capsys.readouterr().out

    def test_set_persists_to_disk(self, empty_store):
        run(["config", "set", "--api-key", "pk_999"], store=empty_store)
        assert json.loads(empty_store.path.read_text())[API_KEY] == "pk_999"

    def test_set_base_url(self, empty_store):
        assert run(["config", "set", "--base-url", "https://api.example.org"], store=empty_store) == 0
        assert empty_store.get(BASE_URL) == "https://api.example.org"

    def test_set_without_options(self, empty_store, capsys):
        assert run(["config", "set"], store=empty_store) == 1
        assert "No options provided" in capsys.readouterr().err

    def test_show_masks_key(self, store, api_key, capsys):
        """The literal key must never be printed."""
        assert run(["config", "show"], store=store) == 0
        out = capsys.readouterr().out
        assert api_key not in out
        assert MASK in out
        assert "not set" in out  # base URL

    def test_show_unset_key(self, empty_store, capsys):
        run(["config", "show"], store=empty_store)
        out = capsys.readouterr().out
        assert "API Key:" in out
        assert "not set" in out
        assert MASK not in out


class TestTeamsAndSpaces:
    """Test teams and spaces commands."""

    def test_teams_table(self, cli, fake_api, capsys):
        fake_api.reply({"teams": [{"id": "9001", "name": "Acme", "color": "#7b68ee"}]})
        assert cli("teams", "list") == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["Team", "ID", "Name", "Color"]
        assert any(line.startswith("9001") and "Acme" in line for line in lines)
        assert lines[-1] == "1 result(s)"

    def test_teams_empty(self, cli, fake_api, capsys):
        fake_api.reply({})
        assert cli("teams", "list") == 0
        assert capsys.readouterr().out.strip() == "No results found."

    def test_spaces_list_endpoint(self, cli, fake_api):
        fake_api.reply({"spaces": []})
        cli("spaces", "list", "--team-id", "T1")
        assert fake_api.last.url.path == "/api/v2/team/T1/space"

    def test_space_details(self, cli, fake_api, capsys):
        fake_api.reply({"id": "S1", "name": "Engineering", "private": True, "statuses": [{}, {}]})
        assert cli("spaces", "get", "S1") == 0

        out = capsys.readouterr().out
        assert "Space Details" in out
        assert "Engineering" in out
        assert "Yes" in out
        assert out.index("Space ID") < out.index("Name") < out.index("Private") < out.index("Statuses")

    def test_space_create(self, cli, fake_api, capsys):
        fake_api.reply({"id": "S9", "name": "Design"})
        assert cli("spaces", "create", "--team-id", "T1", "--name", "Design", "--feature", "due_dates") == 0

        assert fake_api.last_body() == {"name": "Design", "features": {"due_dates": {"enabled": True}}}
        out = capsys.readouterr().out
        assert "Space created: Design" in out
        assert "Space ID: S9" in out


class TestFoldersAndLists:
    """Test folders and lists commands."""

    def test_folder_create(self, cli, fake_api, capsys):
        fake_api.reply({"id": "F1", "name": "Q3"})
        assert cli("folders", "create", "--space-id", "S1", "--name", "Q3") == 0
        assert fake_api.last.url.path == "/api/v2/space/S1/folder"
        assert "Folder ID: F1" in capsys.readouterr().out

    def test_folders_table(self, cli, fake_api, capsys):
        fake_api.reply({"folders": [{"id": "F1", "name": "Q3", "hidden": False, "task_count": "4"}]})
        assert cli("folders", "list", "--space-id", "S1") == 0
        out = capsys.readouterr().out
        assert "Hidden" in out
        assert "1 result(s)" in out

    def test_lists_in_folder(self, cli, fake_api):
        fake_api.reply({"lists": []})
        assert cli("lists", "list", "--folder-id", "F1") == 0
        assert fake_api.last.url.path == "/api/v2/folder/F1/list"

    def test_folderless_lists(self, cli, fake_api):
        fake_api.reply({"lists": []})
        assert cli("lists", "list", "--space-id", "S1") == 0
        assert fake_api.last.url.path == "/api/v2/space/S1/list"

    def test_lists_needs_exactly_one_parent(self, cli, fake_api):
        with pytest.raises(SystemExit):
            cli("lists", "list", "--folder-id", "F1", "--space-id", "S1")
        assert fake_api.requests == []

    def test_list_create_with_iso_due_date(self, cli, fake_api):
        fake_api.reply({"id": "L1", "name": "Backlog"})
        assert cli("lists", "create", "--folder-id", "F1", "--name", "Backlog", "--due-date", "2024-01-15") == 0

        expected = int(datetime(2024, 1, 15).timestamp() * 1000)
        assert fake_api.last_body() == {"name": "Backlog", "due_date": expected}

    def test_invalid_date_rejected(self, cli, fake_api):
        with pytest.raises(SystemExit) as exc_info:
            cli("lists", "create", "--folder-id", "F1", "--name", "B", "--due-date", "tomorrow")
        assert exc_info.value.code == 2


class TestTasks:
    """Test task commands."""

    def test_create_omits_description(self, cli, fake_api, capsys):
        """Without --description the body must not contain the field at all."""
        fake_api.reply({"id": "t1", "name": "Test"})
        assert cli("tasks", "create", "--list-id", "L1", "--name", "Test") == 0

        body = fake_api.last_body()
        assert fake_api.last.url.path == "/api/v2/list/L1/task"
        assert "description" not in body
        assert body == {"name": "Test"}
        out = capsys.readouterr().out
        assert "Task created: Test" in out
        assert "Task ID: t1" in out

    def test_create_with_options(self, cli, fake_api):
        fake_api.reply({"id": "t2", "name": "Ship"})
        cli(
            "tasks", "create", "--list-id", "L1", "--name", "Ship",
            "--description", "Cut the release", "--assignee", "183", "--assignee", "184",
            "--priority", "2", "--due-date", "1700000000000",
        )
        assert fake_api.last_body() == {
            "name": "Ship",
            "description": "Cut the release",
            "assignees": [183, 184],
            "priority": 2,
            "due_date": 1700000000000,
        }

    def test_list_json_verbatim(self, cli, fake_api, capsys):
        tasks = [{"id": "t1", "name": "A", "status": {"status": "open"}, "priority": None, "due_date": "1700000000000"}]
        fake_api.reply({"tasks": tasks})
        assert cli("tasks", "list", "--list-id", "L1", "--json") == 0

        out = capsys.readouterr().out
        assert json.loads(out) == tasks
        assert '\n  {\n    "id": "t1"' in out

    def test_list_table(self, cli, fake_api, sample_tasks, capsys):
        fake_api.reply({"tasks": sample_tasks})
        assert cli("tasks", "list", "--list-id", "L1") == 0

        out = capsys.readouterr().out
        assert "86a1b2c3" in out
        assert "86a1b2c3d4e5" not in out
        assert "in progress" in out
        assert "2 result(s)" in out

    def test_list_filters(self, cli, fake_api):
        fake_api.reply({"tasks": []})
        cli("tasks", "list", "--list-id", "L1", "--status", "open", "--status", "review", "--include-closed")

        params = fake_api.last.url.params
        assert params.get_list("statuses[]") == ["open", "review"]
        assert params["include_closed"] == "true"
        assert "archived" not in params

    def test_get_details(self, cli, fake_api, capsys):
        fake_api.reply({
            "id": "t1",
            "name": "Fix login",
            "status": {"status": "open"},
            "priority": {"priority": "urgent"},
            "description": "",
            "assignees": [{"id": 1}],
        })
        assert cli("tasks", "get", "t1") == 0

        out = capsys.readouterr().out
        assert "Task Details" in out
        assert "urgent" in out
        assert "N/A" in out  # empty description

    def test_update(self, cli, fake_api, capsys):
        fake_api.reply({"id": "t1"})
        assert cli("tasks", "update", "t1", "--status", "done") == 0
        assert fake_api.last.method == "PUT"
        assert fake_api.last_body() == {"status": "done"}
        assert "Task updated" in capsys.readouterr().out

    def test_delete(self, cli, fake_api, capsys):
        fake_api.reply({})
        assert cli("tasks", "delete", "t1") == 0
        assert fake_api.last.method == "DELETE"
        assert "Task deleted" in capsys.readouterr().out

    def test_not_found(self, cli, fake_api, capsys):
        fake_api.reply({"err": "Task not found"}, status_code=404)
        assert cli("tasks", "get", "missing") == 1

        captured = capsys.readouterr()
        assert captured.err.strip() == "✖ Resource not found."
        assert captured.out == ""

    def test_api_error_line(self, cli, fake_api, capsys):
        fake_api.reply({"err": "Status does not exist", "ECODE": "CRTSK_001"}, status_code=400)
        assert cli("tasks", "update", "t1", "--status", "nope") == 1
        assert "API Error (400): Status does not exist" in capsys.readouterr().err


class TestTime:
    """Test time tracking commands."""

    def test_start_prints_entry_id(self, cli, fake_api, capsys):
        fake_api.reply({"data": {"id": "te_42", "task": {"id": "X1"}}})
        assert cli("time", "start", "--team-id", "T1", "--task-id", "X1") == 0

        assert fake_api.last.url.path == "/api/v2/team/T1/time_entries/start"
        assert fake_api.last_body() == {"tid": "X1"}
        lines = capsys.readouterr().out.splitlines()
        started = next(i for i, line in enumerate(lines) if "Timer started" in line)
        assert "te_42" in lines[started + 1]

    def test_stop(self, cli, fake_api, capsys):
        fake_api.reply({"data": {"id": "te_42"}})
        assert cli("time", "stop", "--team-id", "T1") == 0
        assert fake_api.last.url.path == "/api/v2/team/T1/time_entries/stop"
        assert "Timer stopped" in capsys.readouterr().out

    def test_entries_table(self, cli, fake_api, capsys):
        fake_api.reply({"data": [{"id": "te1", "task": {"name": "Fix login"}, "duration": "60000", "start": "1700000000000"}]})
        assert cli("time", "list", "--team-id", "T1") == 0
        out = capsys.readouterr().out
        assert "Fix login" in out
        assert "1 result(s)" in out

    def test_entries_date_filter(self, cli, fake_api):
        fake_api.reply({"data": []})
        cli("time", "list", "--team-id", "T1", "--start-date", "1700000000000")
        assert fake_api.last.url.params["start_date"] == "1700000000000"


class TestFailureBoundary:
    """Test the single-line error reporting."""

    def test_connectivity(self, cli, fake_api, capsys):
        fake_api.fail_with(httpx.ConnectError)
        assert cli("teams", "list") == 1
        err = capsys.readouterr().err
        assert "No response from ClickUp API" in err
        assert "Traceback" not in err

    def test_unexpected_exception(self, store, capsys):
        """Errors the client does not classify should still exit 1 cleanly."""
        def explode(request):
            raise RuntimeError("transport exploded")

        code = run(["teams", "list"], store=store, transport=httpx.MockTransport(explode))
        assert code == 1
        err = capsys.readouterr().err
        assert "transport exploded" in err
        assert "Traceback" not in err

    def test_invalid_log_level_setting(self, store, fake_api, monkeypatch, capsys):
        """A bad environment setting should be one error line and exit 1."""
        monkeypatch.setattr(config, "_settings", None)
        monkeypatch.setenv("CLICKUPCOM_LOG_LEVEL", "loud")

        assert run(["config", "show"], store=store, transport=fake_api.transport) == 1
        err = capsys.readouterr().err
        assert "Invalid setting CLICKUPCOM_LOG_LEVEL" in err
        assert "Traceback" not in err
        assert fake_api.requests == []
