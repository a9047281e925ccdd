"""Command line entrypoint tests"""

import json

import pytest

from symbolgen import update_symbols
from symbolgen.core.config import Settings


class TestMain:
    """Test process exit codes and wiring"""

    @pytest.fixture(autouse=True)
    def isolated_settings(self, tmp_path, monkeypatch):
        settings = Settings(
            MAPPING_PATH=str(tmp_path / "coins.json"),
            OUTPUTS={"symbols.rs.j2": str(tmp_path / "symbols.rs")},
        )
        monkeypatch.setattr(update_symbols, "settings", settings)
        return settings

    def test_run_from_feed_file(self, tmp_path, feed_record):
        feed = tmp_path / "feed.json"
        feed.write_text(json.dumps([feed_record("LTC"), feed_record("ETH")]), encoding="utf-8")

        assert update_symbols.main([str(feed)]) == 0
        mapping = json.loads((tmp_path / "coins.json").read_text(encoding="utf-8"))
        assert mapping == {"ETH": 3, "LTC": 4, "NZDT": 5}
        assert (tmp_path / "symbols.rs").exists()

    def test_fatal_error_exit_code(self, tmp_path):
        assert update_symbols.main([str(tmp_path / "missing.json")]) == 1
        assert not (tmp_path / "coins.json").exists()

    def test_too_many_arguments(self):
        assert update_symbols.main(["a.json", "b.json"]) == 2
