import logging
import runpy
from pathlib import Path

import pytest

EXAMPLE = Path(__file__).parents[1] / "examples" / "example.py"


def test_example_shows_sweep_logging(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    levels: list[int] = []
    monkeypatch.setattr(
        logging, "basicConfig", lambda **kwargs: levels.append(kwargs["level"])
    )

    runpy.run_path(str(EXAMPLE), run_name="__main__")

    assert levels == [logging.DEBUG]
    out = capsys.readouterr().out
    assert "Slots:" in out
    assert out.count("duration: 1h 0m") >= 4
