import io

import pytest

from restaurant_dip import demo
from restaurant_dip.core.config import Settings


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(demo, "setup_logging", lambda level=None: None)


def outcomes(result):
    return [step.outcome for step in result.steps]


def test_runs_every_scenario_in_order():
    results = demo.run_scenarios(settings=Settings())

    assert [r.key for r in results] == ["problem", "injection", "factory", "strategy", "testing"]


def test_injection_scenario_sends_fixed_template():
    result = demo.run_dependency_injection(Settings())

    assert outcomes(result) == [
        "Order 2 processed successfully!",
        "Order 3 processed successfully!",
    ]
    assert "MySQL + Email" in result.steps[0].action
    assert "PostgreSQL + SMS" in result.steps[1].action


def test_factory_scenario_covers_uninitialized_and_invalid_keys():
    result = demo.run_factory(Settings(database_type="mongodb", notification_type="sms"))

    assert outcomes(result) == [
        "Not initialized",
        "MongoDB + Slack: Order 4 processed successfully!",
        "PostgreSQL + Email: Order 5 processed successfully!",
        "rejected: Unknown database type: oracle",
        "MongoDB + SMS: Order 7 processed successfully!",
    ]


def test_strategy_scenario_reports_each_payment():
    result = demo.run_strategy(Settings())

    assert outcomes(result) == [
        "Payment successful",
        "Payment validation failed",
        "Payment successful",
        "Payment successful",
    ]


def test_testing_scenario_uses_doubles():
    result = demo.run_testing(Settings())

    assert outcomes(result) == ["order 999", "Order 999 processed successfully!"]


def test_render_report_prints_titles_and_outcomes():
    stream = io.StringIO()

    demo.render_report([demo.run_testing(Settings())], stream=stream)

    text = stream.getvalue()
    assert "TESTING: Easy Mocking with DIP" in text
    assert "Order 999 processed successfully!" in text


def test_main_runs_selected_scenario(capsys):
    assert demo.main(["--scenario", "strategy"]) == 0

    out = capsys.readouterr().out
    assert "SOLUTION 3: Strategy Pattern" in out
    assert "SOLUTION 1" not in out


def test_main_applies_command_line_overrides(capsys):
    assert demo.main(["--scenario", "factory", "--database", "mongodb", "--notification", "slack"]) == 0

    assert "MongoDB + Slack: Order 7 processed successfully!" in capsys.readouterr().out


def test_main_exits_with_error_on_unknown_key(capsys):
    assert demo.main(["--scenario", "factory", "--database", "oracle"]) == 2

    assert "FACTORY" not in capsys.readouterr().out.upper()


def test_render_report_writes_to_current_stdout(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr("sys.stdout", stream)

    demo.render_report([demo.run_testing(Settings())])

    assert "TESTING: Easy Mocking with DIP" in stream.getvalue()


def test_main_exits_with_error_on_unknown_key_in_environment(monkeypatch, capsys):
    monkeypatch.setenv("DATABASE_TYPE", "oracle")

    assert demo.main(["--scenario", "factory"]) == 2

    assert "SOLUTION 2" not in capsys.readouterr().out
