from __future__ import annotations

import pytest

from flapgate import main as entry
from flapgate.exceptions import NotifierConfigError


@pytest.mark.parametrize(
    ("argv", "debug", "calibration"),
    [
        ([], False, False),
        (["-d"], True, False),
        (["-debug"], True, False),
        (["-c"], False, True),
        (["-calibration", "-debug"], True, True),
    ],
)
def test_flags(argv: list[str], debug: bool, calibration: bool) -> None:
    args = entry.build_parser().parse_args(argv)

    assert args.debug is debug
    assert args.calibration is calibration


def test_unknown_flag_is_rejected() -> None:
    with pytest.raises(SystemExit):
        entry.build_parser().parse_args(["--verbose"])


def test_startup_error_exits_non_zero(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def no_token(*args, **kwargs):
        raise NotifierConfigError("access token file secret.txt is empty")

    monkeypatch.setattr(entry.MastodonNotifier, "from_config", no_token)

    assert entry.main([]) == 1
    out = capsys.readouterr().out
    assert "FlapGate V" in out
    assert "[Error] access token file secret.txt is empty" in out
