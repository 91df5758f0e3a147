"""Content heuristics: fake news, fake reviews and cyberbullying."""

from __future__ import annotations

from unified_ai_platform.domain.inputs import ChatMessageSample, NewsArticle, ProductReview
from unified_ai_platform.domain.models import PredictionResult, RiskLevel
from unified_ai_platform.scoring.tiers import add_per_match, capped, tier_for

SENSATIONAL_WORDS = ("shocking", "unbelievable", "breaking", "exclusive", "secret", "exposed", "scandal")
SPAM_PHRASES = ("best ever", "amazing product", "highly recommend", "must buy", "perfect", "love it")
HARMFUL_WORDS = ("hate", "ugly", "stupid", "loser", "kill", "die", "worthless", "pathetic", "disgusting")

NEWS_TIERS = (
    (0.6, RiskLevel.CRITICAL),
    (0.4, RiskLevel.HIGH),
    (0.25, RiskLevel.MEDIUM),
)
REVIEW_TIERS = (
    (0.5, RiskLevel.HIGH),
    (0.35, RiskLevel.MEDIUM),
)
BULLYING_TIERS = (
    (0.5, RiskLevel.CRITICAL),
    (0.3, RiskLevel.HIGH),
    (0.15, RiskLevel.MEDIUM),
)


def _is_shouted(text: str) -> bool:
    # Strings without cased characters count as shouted, e.g. "" or "2024".
    return text.upper() == text


def fake_news_score(article: NewsArticle) -> float:
    text = (article.headline + " " + article.content).lower()
    score = add_per_match(0.0, text, SENSATIONAL_WORDS, 0.12)
    if _is_shouted(article.headline):
        score += 0.2
    if "!!!" in article.headline or "???" in article.headline:
        score += 0.15
    if not article.source or "unknown" in article.source.lower():
        score += 0.25
    return score


def predict_fake_news(article: NewsArticle) -> PredictionResult:
    score = fake_news_score(article)
    return PredictionResult(
        prediction="LIKELY FAKE NEWS" if score > 0.4 else "APPEARS CREDIBLE",
        confidence=capped(0.45, score, 0.88),
        risk_level=tier_for(score, NEWS_TIERS),
    )


def fake_review_score(review: ProductReview) -> float:
    text = review.review_text
    length = len(text)
    score = add_per_match(0.0, text.lower(), SPAM_PHRASES, 0.1)
    if review.rating == 5 and length < 50:
        score += 0.25
    if review.rating == 1 and length < 50:
        score += 0.25
    if review.reviewer_history < 3:
        score += 0.2
    if length < 20:
        score += 0.15
    return score


def predict_fake_review(review: ProductReview) -> PredictionResult:
    score = fake_review_score(review)
    return PredictionResult(
        prediction="SUSPICIOUS REVIEW" if score > 0.35 else "GENUINE REVIEW",
        confidence=capped(0.5, score, 0.85),
        risk_level=tier_for(score, REVIEW_TIERS),
    )


def cyberbullying_score(sample: ChatMessageSample) -> float:
    message = sample.message
    score = add_per_match(0.0, message.lower(), HARMFUL_WORDS, 0.15)
    if _is_shouted(message) and len(message) > 10:
        score += 0.15
    if sample.sender_reputation < 3:
        score += 0.2
    return score


def predict_cyberbullying(sample: ChatMessageSample) -> PredictionResult:
    score = cyberbullying_score(sample)
    return PredictionResult(
        prediction="CYBERBULLYING DETECTED" if score > 0.3 else "SAFE CONTENT",
        confidence=capped(0.5, score, 0.9),
        risk_level=tier_for(score, BULLYING_TIERS),
    )
