import pytest

from unified_ai_platform.core.errors import InputValidationError, UnknownModuleError
from unified_ai_platform.domain.models import ModuleType, RiskLevel
from unified_ai_platform.scoring.registry import get_module, list_modules, parse_input, predict


def test_every_module_type_is_registered_in_order() -> None:
    assert [item.module_type for item in list_modules()] == list(ModuleType)


def test_predict_accepts_form_payload() -> None:
    result = predict(
        "fraud_upi",
        {"amount": "150000", "senderUPI": "a@x", "receiverUPI": "b@x", "time": "02:00", "location": "Mumbai"},
    )
    assert result.prediction == "FRAUDULENT TRANSACTION"
    assert result.confidence == 0.95
    assert result.risk_level is RiskLevel.CRITICAL


def test_module_lookup_normalizes_identifier() -> None:
    assert get_module(" Fraud_UPI ").module_type is ModuleType.FRAUD_UPI
    assert get_module(ModuleType.HEALTH_STRESS).title == "Stress Level Analysis"


def test_unknown_module_is_rejected() -> None:
    with pytest.raises(UnknownModuleError) as excinfo:
        predict("weather_forecast", {})
    assert excinfo.value.status_code == 404


def test_missing_field_lists_offending_fields() -> None:
    with pytest.raises(InputValidationError) as excinfo:
        parse_input("content_fake_review", {"reviewText": "fine", "rating": 9})
    fields = {item["field"] for item in excinfo.value.errors}
    assert "rating" in fields
    assert "reviewerHistory" in fields
    assert excinfo.value.status_code == 400


def test_non_numeric_amount_is_rejected() -> None:
    with pytest.raises(InputValidationError):
        predict("fraud_credit_card", {"amount": "lots", "isInternational": False, "previousTransactions": 3})


def test_input_fields_use_wire_names() -> None:
    assert get_module("fraud_phishing").input_fields() == ["url", "hasSuspiciousTLD", "urlLength", "hasHTTPS"]
