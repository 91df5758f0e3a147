"""Fraud detection heuristics: UPI payments, card payments and phishing URLs."""

from __future__ import annotations

import re

from unified_ai_platform.domain.inputs import CardTransaction, UpiTransaction, UrlSample
from unified_ai_platform.domain.models import PredictionResult, RiskLevel
from unified_ai_platform.scoring.tiers import add_per_match, capped, tier_for

UPI_TIERS = (
    (0.6, RiskLevel.CRITICAL),
    (0.4, RiskLevel.HIGH),
    (0.2, RiskLevel.MEDIUM),
)
CARD_TIERS = (
    (0.6, RiskLevel.CRITICAL),
    (0.45, RiskLevel.HIGH),
    (0.25, RiskLevel.MEDIUM),
)
PHISHING_TIERS = (
    (0.6, RiskLevel.CRITICAL),
    (0.35, RiskLevel.HIGH),
    (0.2, RiskLevel.MEDIUM),
)

PHISHING_KEYWORDS = ("login", "verify", "secure", "update", "confirm", "account", "bank")

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_hour(time: str) -> int | None:
    """Read the hour from an ``HH:MM`` string, accepting a loose integer prefix."""

    match = _LEADING_INT.match(time.split(":")[0])
    if not match:
        return None
    return int(match.group(1))


def upi_fraud_score(txn: UpiTransaction) -> float:
    score = 0.0
    if txn.amount > 50000:
        score += 0.3
    if txn.amount > 100000:
        score += 0.2
    if txn.time:
        hour = parse_hour(txn.time)
        if hour is not None and (hour < 6 or hour > 22):
            score += 0.2
    if "random" in txn.sender_upi or "random" in txn.receiver_upi:
        score += 0.15
    if "unknown" in txn.location.lower():
        score += 0.15
    return score


def predict_upi_fraud(txn: UpiTransaction) -> PredictionResult:
    score = upi_fraud_score(txn)
    return PredictionResult(
        prediction="FRAUDULENT TRANSACTION" if score > 0.4 else "LEGITIMATE TRANSACTION",
        confidence=capped(0.5, score, 0.95),
        risk_level=tier_for(score, UPI_TIERS),
    )


def card_fraud_score(txn: CardTransaction) -> float:
    score = 0.0
    if txn.amount > 10000:
        score += 0.25
    if txn.amount > 50000:
        score += 0.25
    if txn.is_international:
        score += 0.2
    merchant = txn.merchant_type.lower()
    if "unknown" in merchant or "online" in merchant:
        score += 0.15
    if txn.previous_transactions < 5:
        score += 0.15
    return score


def predict_credit_card_fraud(txn: CardTransaction) -> PredictionResult:
    score = card_fraud_score(txn)
    return PredictionResult(
        prediction="HIGH FRAUD RISK" if score > 0.45 else "NORMAL TRANSACTION",
        confidence=capped(0.55, score, 0.93),
        risk_level=tier_for(score, CARD_TIERS),
    )


def has_embedded_redirect(url: str) -> bool:
    """True for an ``@`` anywhere, or a ``//`` past the scheme separator.

    The ``@`` test is deliberately not combined with the position check.
    """

    return "@" in url or ("//" in url and url.rfind("//") > 7)


def phishing_url_score(sample: UrlSample) -> float:
    url = sample.url.lower()
    score = add_per_match(0.0, url, PHISHING_KEYWORDS, 0.1)
    if sample.has_suspicious_tld:
        score += 0.25
    if sample.url_length > 75:
        score += 0.2
    if not sample.has_https:
        score += 0.2
    if has_embedded_redirect(url):
        score += 0.25
    return score


def predict_phishing_url(sample: UrlSample) -> PredictionResult:
    score = phishing_url_score(sample)
    return PredictionResult(
        prediction="PHISHING URL DETECTED" if score > 0.35 else "SAFE URL",
        confidence=capped(0.5, score, 0.96),
        risk_level=tier_for(score, PHISHING_TIERS),
    )
