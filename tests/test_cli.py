import json

import pytest

import cli


def run(tasks_path, *argv):
    return cli.main(["--file", str(tasks_path), *argv])


def test_example_scenario(tasks_path, capsys):
    assert run(tasks_path, "list") == 0
    assert "No tasks found" in capsys.readouterr().out

    assert run(tasks_path, "add", "Write report", "2024-03-01 09:00:00") == 0
    assert "Task 1 added successfully" in capsys.readouterr().out

    assert run(tasks_path, "list") == 0
    out = capsys.readouterr().out
    row = next(line for line in out.splitlines() if "Write report" in line)
    cells = [c.strip() for c in row.strip("│").split("│")]
    assert cells == ["1", "Write report", "", "2024-03-01 09:00:00", "false"]

    assert run(tasks_path, "done", "1") == 0
    assert "Task 1 marked as done" in capsys.readouterr().out
    assert run(tasks_path, "list") == 0
    assert "│ true " in capsys.readouterr().out

    assert run(tasks_path, "clean") == 0
    assert "Tasks cleaned successfully" in capsys.readouterr().out
    assert run(tasks_path, "list") == 0
    assert "No tasks found" in capsys.readouterr().out


def test_add_with_bad_date_exits_non_zero(tasks_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(tasks_path, "add", "Report", "2024/03/01")
    assert excinfo.value.code == 2
    assert "YYYY-MM-DD HH:MM:SS" in capsys.readouterr().err
    assert not tasks_path.exists()


def test_add_with_description_and_alias(tasks_path, capsys):
    assert run(tasks_path, "a", "Buy milk", "-d", "semi-skimmed") == 0
    stored = json.loads(tasks_path.read_text(encoding="utf-8"))
    assert stored[0]["name"] == "Buy milk"
    assert stored[0]["description"] == "semi-skimmed"


def test_done_unknown_id(tasks_path, capsys):
    run(tasks_path, "add", "only")
    capsys.readouterr()
    before = tasks_path.read_bytes()

    assert run(tasks_path, "done", "9") == 1
    assert "Task 9 not found" in capsys.readouterr().err
    assert tasks_path.read_bytes() == before


def test_undo_sets_pending(tasks_path, capsys):
    run(tasks_path, "add", "only")
    run(tasks_path, "done", "1")
    assert run(tasks_path, "undo", "1") == 0
    assert "Task 1 marked as pending" in capsys.readouterr().out
    assert json.loads(tasks_path.read_text(encoding="utf-8"))[0]["done"] is False


def test_clean_is_idempotent(tasks_path, capsys):
    assert run(tasks_path, "clean") == 0
    assert run(tasks_path, "c") == 0
    assert capsys.readouterr().out.count("Tasks cleaned successfully") == 2


def test_list_warns_on_corrupt_file(tasks_path, capsys):
    tasks_path.write_text("[{oops", encoding="utf-8")
    assert run(tasks_path, "list") == 0
    captured = capsys.readouterr()
    assert "Warning:" in captured.err
    assert "No tasks found" in captured.out


def test_empty_name_rejected(tasks_path, capsys):
    assert run(tasks_path, "add", "  ") == 1
    assert "must not be empty" in capsys.readouterr().err


def test_command_is_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_render_table_columns():
    table = cli.render_table([])
    assert "Id" in table and "Description" in table and "Done" in table


def test_unusable_file_location_exits_one(tmp_path, capsys):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    assert run(blocker / "task.json", "list") == 1
    assert "Error preparing task file" in capsys.readouterr().err
