from fwos.config import ConfigEngine, WriteAheadLog


def test_set_and_get():
    config = ConfigEngine()
    config.set("mode", "strict")
    assert config.get("mode") == "strict"


def test_overwrite():
    config = ConfigEngine()
    config.set("mode", "strict")
    config.set("mode", "open")
    assert config.get("mode") == "open"


def test_missing_key_is_empty():
    assert ConfigEngine().get("absent") == ""


def test_wal_appends_lines(tmp_path):
    path = tmp_path / "log.wal"
    wal = WriteAheadLog(path)
    wal.append("set mode strict")
    wal.append("set mode open")
    assert path.read_text(encoding="utf-8").splitlines() == [
        "set mode strict",
        "set mode open",
    ]


def test_wal_keeps_existing_content(tmp_path):
    path = tmp_path / "log.wal"
    path.write_text("first\n", encoding="utf-8")
    WriteAheadLog(path).append("second")
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"


def test_wal_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "fwos.wal"
    WriteAheadLog().append("entry")
    WriteAheadLog(path).append("second")
    assert path.read_text(encoding="utf-8") == "entry\nsecond\n"