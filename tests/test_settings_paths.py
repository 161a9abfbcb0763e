from datetime import datetime, timedelta
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core import settings
from storage import backup as backup_module
from storage.backup import ensure_daily_backup, quarantine_file
from storage.config import AppConfig, load_config, save_config, update_config


def test_linux_data_dir_with_xdg():
    env = {"XDG_DATA_HOME": "/tmp/xdg"}
    result = settings.get_default_data_dir(
        settings.APP_NAME,
        platform="linux",
        env=env,
        home=Path("/home/test"),
    )
    assert result == Path("/tmp/xdg") / settings.APP_NAME


def test_linux_data_dir_default_home():
    result = settings.get_default_data_dir(
        settings.APP_NAME,
        platform="linux",
        env={},
        home=Path("/home/test"),
    )
    assert result == Path("/home/test/.local/share") / settings.APP_NAME


def test_macos_data_dir():
    result = settings.get_default_data_dir(
        settings.APP_NAME,
        platform="darwin",
        env={},
        home=Path("/Users/test"),
    )
    assert result == Path("/Users/test/Library/Application Support") / settings.APP_NAME


def test_windows_data_dir_appdata():
    env = {"APPDATA": "C:/Users/test/AppData/Roaming"}
    result = settings.get_default_data_dir(
        settings.APP_NAME,
        platform="win32",
        env=env,
        home=Path("C:/Users/test"),
    )
    assert result == Path(env["APPDATA"]) / settings.APP_NAME


def test_data_dir_env_override(tmp_path):
    result = settings.resolve_data_dir(settings.APP_NAME, env={"TODO_DATA_DIR": str(tmp_path)})
    assert result == tmp_path


def test_runtime_paths_inside_data_dir():
    assert settings.TASKS_PATH.parent == settings.DATA_DIR
    assert settings.CONFIG_PATH.parent == settings.DATA_DIR
    assert settings.LOG_PATH.parent == settings.LOG_DIR
    assert settings.BACKUP.directory == settings.BACKUP_DIR


def test_config_roundtrip_and_tolerance(tmp_path):
    path = tmp_path / "config.json"
    assert load_config(path) == AppConfig()

    save_config(AppConfig(last_task_id=4), path)
    assert load_config(path).last_task_id == 4
    assert update_config(path, last_task_id=9).last_task_id == 9
    assert not path.with_suffix(".tmp").exists()

    path.write_text('{"last_task_id": "x"}', encoding="utf-8")
    assert load_config(path).last_task_id == 0
    path.write_text("garbage", encoding="utf-8")
    assert load_config(path).last_task_id == 0


def test_backup_rotation(monkeypatch, tmp_path):
    tasks_path = tmp_path / "task.json"
    tasks_path.write_text("[]", encoding="utf-8")
    backup_dir = tmp_path / "backups"

    base = datetime(2024, 1, 1)

    for offset in range(5):
        tasks_path.write_text(f'[{{"v": {offset}}}]', encoding="utf-8")

        class FakeDateTime(datetime):
            @classmethod
            def now(cls, tz=None):
                return base + timedelta(days=offset)

        monkeypatch.setattr(backup_module, "datetime", FakeDateTime)
        ensure_daily_backup(tasks_path, backup_dir, keep_days=3)

    monkeypatch.setattr(backup_module, "datetime", datetime)

    backups = sorted(p.name for p in backup_dir.iterdir())
    assert backups == [
        "task_2024-01-03.json",
        "task_2024-01-04.json",
        "task_2024-01-05.json",
    ]


def test_backup_skips_missing_file(tmp_path):
    assert ensure_daily_backup(tmp_path / "task.json", tmp_path / "backups") is None
    assert quarantine_file(tmp_path / "task.json") is None


def test_backup_skips_file_without_tasks(tmp_path):
    tasks_path = tmp_path / "task.json"
    backup_dir = tmp_path / "backups"

    tasks_path.write_text("[]", encoding="utf-8")
    assert ensure_daily_backup(tasks_path, backup_dir) is None
    tasks_path.write_text("", encoding="utf-8")
    assert ensure_daily_backup(tasks_path, backup_dir) is None
    assert list(backup_dir.iterdir()) == []

    tasks_path.write_text('[{"id": 1}]', encoding="utf-8")
    assert ensure_daily_backup(tasks_path, backup_dir) is not None


def test_prune_ignores_foreign_files(tmp_path):
    tasks_path = tmp_path / "task.json"
    backup_dir = tmp_path / "backups"
    backup_dir.mkdir()
    for name in ("task_2024-01-01.json", "task_2024-01-09.json", "task_notes.json", "other_2024-01-01.json"):
        (backup_dir / name).write_text("[]", encoding="utf-8")

    removed = backup_module.prune_backups(backup_dir, tasks_path, datetime(2024, 1, 10).date(), keep_days=3)

    assert removed == 1
    assert sorted(p.name for p in backup_dir.iterdir()) == [
        "other_2024-01-01.json",
        "task_2024-01-09.json",
        "task_notes.json",
    ]
