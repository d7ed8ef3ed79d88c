"""
Training Calendar · CLI tests
Run with: pytest tests/
"""

import re

import pytest

from training_calendar import cli
from training_calendar.series import SeriesNormalizer

ANSI = re.compile(r"\033\[[0-9;]*m")


def run(capsys, *argv) -> tuple[int, str]:
    # an empty resources folder makes every read fall back to the embedded data
    code = cli.main(list(argv))
    return code, ANSI.sub("", capsys.readouterr().out)


@pytest.fixture
def common(tmp_path):
    return ["--tz", "UTC", "--resources", str(tmp_path)]


class TestCommands:
    def test_month(self, capsys, common):
        code, out = run(capsys, "month", "--month", "2025-11", *common)
        assert code == 0
        assert "Ноябрь 2025" in out
        assert "Пн  Вт  Ср  Чт  Пт  Сб  Вс" in out
        assert "9 workout(s) this month" in out

    def test_month_english(self, capsys, common):
        code, out = run(capsys, "month", "--month", "2025-12", "--locale", "en", *common)
        assert code == 0
        assert "December 2025" in out
        assert "0 workout(s) this month" in out

    def test_day(self, capsys, common):
        code, out = run(capsys, "day", "2025-11-25", *common)
        assert code == 0
        assert "Вт, 2025-11-25" in out
        assert "09:30" in out and "18:00" in out
        assert "5.2 км" in out
        assert "1ч 0мин" in out

    def test_empty_day(self, capsys, common):
        _, out = run(capsys, "day", "2025-11-26", *common)
        assert "No workouts" in out

    def test_show(self, capsys, common):
        code, out = run(capsys, "show", "7823456789012345", *common)
        assert code == 0
        assert "Бег/Ходьба" in out
        assert "45 мин" in out
        assert "min 72 · max 145 bpm" in out
        assert "0 мин · 5 мин · 10 мин · 15 мин · 20 мин" in out
        assert "21 GPS points" in out

    def test_show_sample_table(self, capsys, common):
        _, out = run(capsys, "show", "7823456789012345", *common)
        rows = [line for line in out.splitlines() if "bpm" in line and "км/ч" in line]
        assert len(rows) == 5
        assert "10 мин" in rows[2]
        assert "135 bpm" in rows[2]
        assert "11.0 км/ч" in rows[2]
        assert "1555 м" in rows[2]
        assert "49.5 м" in rows[2]

    def test_show_without_diagram(self, capsys, common):
        code, out = run(capsys, "show", "7823456789012346", *common)
        assert code == 0
        assert "No diagram data" in out

    def test_show_unknown(self, capsys, common):
        code, out = run(capsys, "show", "0000", *common)
        assert code == 1
        assert "No workout '0000'" in out

    def test_bad_month_argument(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["month", "--month", "November"])

    def test_bad_timezone(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["month", "--tz", "Mars/Olympus"])


class TestChart:
    def test_render_chart_grid(self):
        lines = cli.render_chart([1, 2, 3], float, SeriesNormalizer(), rows=3, cols=3)
        assert lines == ["  •", " • ", "•  "]
