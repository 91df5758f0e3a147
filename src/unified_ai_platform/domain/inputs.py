"""Typed input records for each prediction module.

Field aliases carry the camelCase names used by the web forms and stored in the
prediction log, so a logged ``input_data`` mapping can be validated again as-is.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScoringInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class UpiTransaction(ScoringInput):
    amount: float
    sender_upi: str = Field(default="", alias="senderUPI")
    receiver_upi: str = Field(default="", alias="receiverUPI")
    time: str = ""
    location: str = ""


class CardTransaction(ScoringInput):
    card_number: str = Field(default="", alias="cardNumber")
    amount: float
    merchant_type: str = Field(default="", alias="merchantType")
    is_international: bool = Field(alias="isInternational")
    previous_transactions: int = Field(alias="previousTransactions")


class UrlSample(ScoringInput):
    url: str
    has_suspicious_tld: bool = Field(alias="hasSuspiciousTLD")
    url_length: int = Field(default=0, alias="urlLength")
    has_https: bool = Field(alias="hasHTTPS")

    @model_validator(mode="before")
    @classmethod
    def _default_length(cls, data):
        if not isinstance(data, dict):
            return data
        raw = data.get("urlLength", data.get("url_length"))
        if raw in (None, "", 0, "0"):
            patched = {k: v for k, v in data.items() if k != "url_length"}
            patched["urlLength"] = len(str(data.get("url", "")))
            return patched
        return data


class NewsArticle(ScoringInput):
    headline: str
    source: str = ""
    content: str


class ProductReview(ScoringInput):
    review_text: str = Field(alias="reviewText")
    rating: int = Field(ge=1, le=5)
    reviewer_history: int = Field(alias="reviewerHistory")


class ChatMessageSample(ScoringInput):
    message: str
    sender_reputation: int = Field(alias="senderReputation")


class LifestyleProfile(ScoringInput):
    sleep_hours: float = Field(alias="sleepHours")
    work_hours: float = Field(alias="workHours")
    exercise_minutes: float = Field(alias="exerciseMinutes")
    social_interaction: float = Field(alias="socialInteraction")


class HealthProfile(ScoringInput):
    age: float
    bmi: float
    family_history: bool = Field(alias="familyHistory")
    physical_activity: float = Field(alias="physicalActivity")
    blood_pressure: float = Field(alias="bloodPressure")


class SoilConditions(ScoringInput):
    nitrogen: float
    phosphorus: float
    potassium: float
    temperature: float
    humidity: float
    rainfall: float


class PollutantReadings(ScoringInput):
    pm25: float
    pm10: float
    no2: float
    so2: float
    co: float


class PlantObservation(ScoringInput):
    image_name: str = Field(default="", alias="imageName")
    symptoms: str
