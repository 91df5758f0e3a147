import json

import pytest

from unified_ai_platform.cli import build_parser, main, run_once


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["--module", "fraud_upi", "--input", "{}"])
    assert args.module == "fraud_upi"
    assert args.explain is False
    assert args.profile is None


def test_run_once_prints_prediction(clean_env) -> None:
    output = run_once("health_stress", json.dumps({"sleepHours": 5, "workHours": 11, "exerciseMinutes": 10, "socialInteraction": 1}))
    payload = json.loads(output)
    assert payload["moduleType"] == "health_stress"
    assert payload["prediction"] == "HIGH STRESS LEVEL"
    assert payload["riskLevel"] == "high"


def test_explain_without_api_key_keeps_prediction(clean_env) -> None:
    payload = json.loads(
        run_once("fraud_upi", json.dumps({"amount": 1000, "time": "14:30"}), explain=True)
    )
    assert payload["prediction"] == "LEGITIMATE TRANSACTION"
    assert payload["explanationError"] == "Could not generate AI explanation. Prediction still valid."


def test_main_lists_modules(capsys) -> None:
    assert main(["--list-modules"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [row["moduleType"] for row in rows][:3] == ["fraud_upi", "fraud_credit_card", "fraud_phishing"]


def test_main_requires_module(capsys) -> None:
    assert main([]) == 2
    assert "usage:" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["--module", "fraud_upi"], "error: --input is required with --module"),
        (["--module", "fraud_upi", "--input", "{oops"], "error: --input is not valid JSON"),
        (["--module", "fraud_upi", "--input", "[1, 2]"], "error: --input must be a JSON object"),
        (["--module", "fraud_crypto", "--input", "{}"], "error: Unknown module: fraud_crypto"),
    ],
)
def test_main_reports_errors(clean_env, capsys, argv, message: str) -> None:
    assert main(argv) == 1
    assert message in capsys.readouterr().err


def test_main_prints_json(clean_env, capsys) -> None:
    code = main(["--module", "fraud_phishing", "--input", json.dumps({"url": "https://example.com", "hasSuspiciousTLD": False, "hasHTTPS": True})])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["moduleType"] == "fraud_phishing"
    assert payload["id"] == "pred_000001"
