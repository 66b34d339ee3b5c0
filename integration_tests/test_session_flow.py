"""Integration tests for logging across app sessions.

Each session builds a new store over the same SQLite file, the way the CLI
does on every invocation.
"""

from datetime import datetime, timedelta

from click.testing import CliRunner

from lift_log.cli import main
from lift_log.clients.manual import build_entry, submit_entry
from lift_log.db import SqliteKeyValueStore, TrainingLogStore, get_db_path, init_db
from lift_log.models.training_log import BodyPart


def _open(db_path):
    return TrainingLogStore(SqliteKeyValueStore(db_path))


class TestSessionFlow:
    """Logs written in one session are visible in the next."""

    def test_week_of_training(self, tmp_path):
        db_path = get_db_path(tmp_path)
        init_db(db_path)
        monday = datetime(2024, 6, 3, 18, 0)

        plan = [
            (BodyPart.CHEST, "Bench Press", "60", "10", "3"),
            (BodyPart.BACK, "Row", "50", "8", "4"),
            (BodyPart.LEGS, "Squat", "100", "5", "5"),
            (BodyPart.SHOULDERS, "Overhead Press", "not a number", "5", "5"),
            (BodyPart.CORE, "Plank", "0", "1", "3"),
        ]

        # One session per day
        for day, (part, name, weight, reps, sets) in enumerate(plan):
            store = _open(db_path)
            entry = build_entry(part, name, weight, reps, sets)
            submit_entry(store, entry, monday + timedelta(days=day))

        logs = _open(db_path).current()

        assert [log.exercise_name for log in logs] == ["Bench Press", "Row", "Squat", "Plank"]
        assert [log.volume for log in logs] == [1800.0, 1600.0, 2500.0, 0.0]
        assert logs[2].date == monday + timedelta(days=2)
        assert len({log.id for log in logs}) == 4

    def test_cli_and_library_share_storage(self, tmp_path):
        runner = CliRunner()
        runner.invoke(main, ["--data-dir", str(tmp_path), "init"])
        runner.invoke(
            main,
            ["--data-dir", str(tmp_path), "add", "-p", "arms", "-e", "Curl",
             "-w", "12.5", "-r", "10", "-s", "3"],
        )

        store = _open(get_db_path(tmp_path))
        assert [log.get_summary_display() for log in store.current()] == ["Curl - Arms"]

        store.append(datetime.now(), BodyPart.ARMS, "Pushdown", 20.0, 12, 3)
        result = runner.invoke(main, ["--data-dir", str(tmp_path), "list"])

        assert result.exit_code == 0
        assert result.output.index("Curl") < result.output.index("Pushdown")
        assert "375.0" in result.output
        assert "720.0" in result.output
        assert "Total: 2 log(s)" in result.output
