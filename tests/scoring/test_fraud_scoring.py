import pytest

from unified_ai_platform.domain.inputs import CardTransaction, UpiTransaction, UrlSample
from unified_ai_platform.domain.models import RiskLevel
from unified_ai_platform.scoring.fraud import (
    has_embedded_redirect,
    parse_hour,
    phishing_url_score,
    predict_credit_card_fraud,
    predict_phishing_url,
    predict_upi_fraud,
    upi_fraud_score,
)


def _upi(**overrides) -> UpiTransaction:
    fields = {
        "amount": 1000,
        "senderUPI": "alice@okbank",
        "receiverUPI": "bob@okbank",
        "time": "14:30",
        "location": "Delhi",
    }
    fields.update(overrides)
    return UpiTransaction.model_validate(fields)


def test_large_night_transfer_is_critical_fraud() -> None:
    result = predict_upi_fraud(
        _upi(amount=150000, senderUPI="a@x", receiverUPI="b@x", time="02:00", location="Mumbai")
    )
    assert result.prediction == "FRAUDULENT TRANSACTION"
    assert result.confidence == 0.95
    assert result.risk_level is RiskLevel.CRITICAL


def test_ordinary_daytime_transfer_is_legitimate() -> None:
    result = predict_upi_fraud(_upi())
    assert result.prediction == "LEGITIMATE TRANSACTION"
    assert result.confidence == 0.5
    assert result.risk_level is RiskLevel.LOW


def test_random_identifier_and_late_hour_stack() -> None:
    txn = _upi(amount=60000, senderUPI="random123@upi", time="23:15")
    assert upi_fraud_score(txn) == pytest.approx(0.65)
    result = predict_upi_fraud(txn)
    assert result.risk_level is RiskLevel.CRITICAL
    assert result.confidence == 0.95


def test_random_match_is_case_sensitive() -> None:
    assert upi_fraud_score(_upi(senderUPI="RANDOM@upi")) == 0.0


def test_unknown_location_is_case_insensitive() -> None:
    result = predict_upi_fraud(_upi(location="UNKNOWN city"))
    assert result.prediction == "LEGITIMATE TRANSACTION"
    assert result.confidence == pytest.approx(0.65)
    assert result.risk_level is RiskLevel.LOW


@pytest.mark.parametrize(
    ("time", "expected"),
    [("06:00", 0.0), ("22:59", 0.0), ("05:59", 0.2), ("23:00", 0.2), (" 3:00", 0.2), ("7pm", 0.0), ("", 0.0)],
)
def test_hour_window(time: str, expected: float) -> None:
    assert upi_fraud_score(_upi(time=time)) == pytest.approx(expected)


def test_score_on_threshold_stays_in_lower_tier() -> None:
    result = predict_upi_fraud(_upi(time="01:00"))
    assert result.risk_level is RiskLevel.LOW
    assert result.confidence == pytest.approx(0.7)


def test_parse_hour() -> None:
    assert parse_hour("02:00") == 2
    assert parse_hour("7pm") == 7
    assert parse_hour("abc") is None
    assert parse_hour("") is None


def test_optional_identifiers_default_to_empty() -> None:
    txn = UpiTransaction.model_validate({"amount": 10})
    assert txn.sender_upi == ""
    assert predict_upi_fraud(txn).risk_level is RiskLevel.LOW


def test_card_all_signals_is_high_risk() -> None:
    txn = CardTransaction.model_validate(
        {
            "cardNumber": "4111111111111111",
            "amount": 60000,
            "merchantType": "Online Store",
            "isInternational": True,
            "previousTransactions": 2,
        }
    )
    result = predict_credit_card_fraud(txn)
    assert result.prediction == "HIGH FRAUD RISK"
    assert result.confidence == 0.93
    assert result.risk_level is RiskLevel.CRITICAL


def test_card_domestic_grocery_is_normal() -> None:
    txn = CardTransaction(
        amount=500,
        merchant_type="Grocery",
        is_international=False,
        previous_transactions=20,
    )
    result = predict_credit_card_fraud(txn)
    assert result.prediction == "NORMAL TRANSACTION"
    assert result.confidence == 0.55
    assert result.risk_level is RiskLevel.LOW


def test_card_score_equal_to_fraud_threshold_is_not_fraud() -> None:
    txn = CardTransaction(
        amount=20000,
        merchant_type="Retail",
        is_international=True,
        previous_transactions=10,
    )
    result = predict_credit_card_fraud(txn)
    assert result.prediction == "NORMAL TRANSACTION"
    assert result.risk_level is RiskLevel.MEDIUM
    assert result.confidence == 0.93


def _url(url: str, *, tld: bool = False, https: bool = True, length: int | None = None) -> UrlSample:
    fields: dict[str, object] = {"url": url, "hasSuspiciousTLD": tld, "hasHTTPS": https}
    if length is not None:
        fields["urlLength"] = length
    return UrlSample.model_validate(fields)


def test_keyword_stuffed_http_url_is_phishing() -> None:
    result = predict_phishing_url(_url("http://secure-login.bank-verify.xyz/account/update", tld=True, https=False))
    assert result.prediction == "PHISHING URL DETECTED"
    assert result.confidence == 0.96
    assert result.risk_level is RiskLevel.CRITICAL


def test_plain_https_url_is_safe() -> None:
    result = predict_phishing_url(_url("https://example.com/home"))
    assert result.prediction == "SAFE URL"
    assert result.confidence == 0.5
    assert result.risk_level is RiskLevel.LOW


def test_at_sign_counts_regardless_of_position() -> None:
    result = predict_phishing_url(_url("https://example.com/@home"))
    assert result.prediction == "SAFE URL"
    assert result.risk_level is RiskLevel.MEDIUM
    assert result.confidence == pytest.approx(0.75)


def test_redirect_checks() -> None:
    assert has_embedded_redirect("https://example.com//evil") is True
    assert has_embedded_redirect("user@host") is True
    assert has_embedded_redirect("https://a.b/c") is False
    assert has_embedded_redirect("ab//cd") is False


def test_url_length_falls_back_to_url() -> None:
    long_url = "https://example.com/" + "a" * 60
    sample = _url(long_url)
    assert sample.url_length == len(long_url)
    assert phishing_url_score(sample) == pytest.approx(0.2)
    assert _url(long_url, length=10).url_length == 10
