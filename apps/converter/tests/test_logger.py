import logging
import os
from datetime import datetime, timedelta

from converter.logger import archive_daily_log_file, prune_log_archives

_log = logging.getLogger("converter_api_tests.logger")


def test_archives_current_log(tmp_path):
    log_file = tmp_path / "converter_api.jsonl"
    log_file.write_text('{"message": "hello"}\n')
    now = datetime(2024, 1, 31, 12, 0, 0)

    archive = archive_daily_log_file(log_file, now, _log)

    assert archive == tmp_path / "converter_api_20240131_120000.jsonl"
    assert archive.exists()
    assert not log_file.exists()


def test_skips_when_recent_archive_exists(tmp_path):
    log_file = tmp_path / "converter_api.jsonl"
    log_file.write_text("{}\n")
    (tmp_path / "converter_api_20240131_080000.jsonl").write_text("{}\n")

    assert archive_daily_log_file(log_file, datetime(2024, 1, 31, 12, 0, 0), _log) is None
    assert log_file.exists()


def test_skips_empty_log(tmp_path):
    log_file = tmp_path / "converter_api.jsonl"
    log_file.touch()
    assert archive_daily_log_file(log_file, datetime(2024, 1, 31), _log) is None


def test_prunes_oldest_archives(tmp_path):
    log_file = tmp_path / "converter_api.jsonl"
    start = datetime(2024, 1, 1)
    archives = []
    for day in range(5):
        path = tmp_path / f"converter_api_{(start + timedelta(days=day)):%Y%m%d_%H%M%S}.jsonl"
        path.write_text("{}\n")
        mtime = (start + timedelta(days=day)).timestamp()
        os.utime(path, (mtime, mtime))
        archives.append(path)

    deleted = prune_log_archives(log_file, 3, _log)

    assert sorted(deleted) == archives[:2]
    assert all(p.exists() for p in archives[2:])
