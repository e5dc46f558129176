import pytest

from main import main, run_demo


def test_run_demo_reproduces_station_output(capsys):
    data = run_demo(13, [14, 15], ["Display1", "Display2"])

    assert data.temperature == 15
    assert len(data.observers) == 1
    assert capsys.readouterr().out.splitlines() == [
        "Display1 - Temperature: 13",
        "Display2 - Temperature: 13",
        "Display1 - Temperature: 14",
        "Display2 - Temperature: 14",
        "Display1 - Temperature: 15",
    ]


def test_cli_prints_integral_floats_as_ints(capsys):
    main(["--initial", "13.0", "--readings", "14", "15.5", "--labels", "A", "B"])

    assert capsys.readouterr().out.splitlines() == [
        "A - Temperature: 13",
        "B - Temperature: 13",
        "A - Temperature: 14",
        "B - Temperature: 14",
        "A - Temperature: 15.5",
    ]


def test_cli_with_statistics(capsys):
    main(["--initial", "10", "--readings", "20", "--labels", "Only", "--stats"])

    assert capsys.readouterr().out.splitlines() == [
        "Only - Temperature: 10",
        "Statistics - Avg/Max/Min temperature = 10.0/10.0/10.0",
        "Only - Temperature: 20",
        "Statistics - Avg/Max/Min temperature = 15.0/20.0/10.0",
    ]


def test_cli_rejects_unknown_log_level():
    with pytest.raises(ValueError):
        main(["--log-level", "LOUD"])


def test_cli_defaults_come_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("WEATHER_INITIAL_TEMPERATURE", "5")
    monkeypatch.setenv("WEATHER_DISPLAY_LABELS", "North,South")

    main(["--readings", "6"])

    assert capsys.readouterr().out.splitlines() == [
        "North - Temperature: 5",
        "South - Temperature: 5",
        "North - Temperature: 6",
        "South - Temperature: 6",
    ]


def test_cli_statistics_window_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("WEATHER_HISTORY_SIZE", "2")

    main(["--initial", "0", "--readings", "10", "20", "--labels", "Only", "--stats"])

    assert capsys.readouterr().out.splitlines()[-1] == (
        "Statistics - Avg/Max/Min temperature = 15.0/20.0/10.0"
    )


def test_run_demo_keeps_a_single_display_registered(capsys):
    data = run_demo(1, [2, 3], ["Solo"])

    assert [d.label for d in data.observers] == ["Solo"]
    assert capsys.readouterr().out.splitlines() == [
        "Solo - Temperature: 1",
        "Solo - Temperature: 2",
        "Solo - Temperature: 3",
    ]
