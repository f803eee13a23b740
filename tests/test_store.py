import json

from tetris_store import JsonBestScore, MemoryBestScore


def test_memory_store_never_decreases():
    s = MemoryBestScore()
    assert s.get() == 0
    assert s.set_if_greater(30) == 30
    assert s.set_if_greater(20) == 30
    assert s.get() == 30


def test_json_store_missing_file_reads_zero(tmp_path):
    assert JsonBestScore(tmp_path / "none.json").get() == 0


def test_json_store_persists_max(tmp_path):
    path = tmp_path / "sub" / "best.json"
    s = JsonBestScore(path, key="highScore")
    s.set_if_greater(40)
    s.set_if_greater(10)
    assert json.loads(path.read_text()) == {"highScore": 40}
    assert JsonBestScore(path, key="highScore").get() == 40


def test_json_store_keeps_other_keys(tmp_path):
    path = tmp_path / "best.json"
    path.write_text(json.dumps({"other": 1, "highScore": 5}))
    JsonBestScore(path, key="highScore").set_if_greater(7)
    assert json.loads(path.read_text()) == {"other": 1, "highScore": 7}


def test_json_store_ignores_broken_file(tmp_path, caplog):
    path = tmp_path / "best.json"
    path.write_text("{not json")
    s = JsonBestScore(path)
    assert s.get() == 0
    assert "could not read best score" in caplog.text
    s.set_if_greater(3)
    assert JsonBestScore(path).get() == 3


def test_json_store_ignores_non_integer(tmp_path):
    path = tmp_path / "best.json"
    path.write_text(json.dumps({"highScore": "lots"}))
    assert JsonBestScore(path, key="highScore").get() == 0
