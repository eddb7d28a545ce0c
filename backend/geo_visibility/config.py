"""
Configuration management for the GEO visibility engine
Environment-based settings plus the static scoring tables
"""

from functools import lru_cache
from typing import Dict, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables"""

    # Application
    APP_NAME: str = "geo-visibility"
    APP_ENV: str = "development"  # development, staging, production
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Celery
    CELERY_BROKER_URL: str = "redis://localhost:6379/1"
    CELERY_RESULT_BACKEND: str = "redis://localhost:6379/2"

    # Mention analysis
    SENTIMENT_CONTEXT_WINDOW: int = 100  # characters before/after a mention
    AUTHORITY_MENTION_THRESHOLD: int = 3

    # Visibility score
    VISIBILITY_BASE_CITED: int = 100
    VISIBILITY_BASE_MENTIONED: int = 50
    VISIBILITY_POINTS_PER_MENTION: int = 5
    VISIBILITY_MENTION_CAP: int = 20

    # Trust index
    TRUST_CITATION_WEIGHT: float = 0.6
    TRUST_AUTHORITY_WEIGHT: float = 0.4

    # Dashboard
    TOP_SOURCES_DISPLAY_LIMIT: int = 5
    INSIGHT_HIGH_SOV: int = 50
    INSIGHT_MEDIUM_SOV: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).upper()

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings loader"""
    return Settings()


# Rank bonus added to a model's visibility score
RANK_BONUS: Dict[int, int] = {
    1: 30,
    2: 20,
    3: 10,
}

# Sentiment lexicon (phrases are matched as whole words)
POSITIVE_KEYWORDS: List[str] = [
    "best", "top", "excellent", "recommended", "trusted", "leading",
    "popular", "great", "reliable", "outstanding", "top-rated",
    "highly rated", "verified", "genuine", "safe", "secure", "preferred",
    "well-known", "award-winning", "favorite",
]

NEGATIVE_KEYWORDS: List[str] = [
    "avoid", "poor", "worst", "scam", "unreliable", "fake", "fraud",
    "bad", "terrible", "complaints", "disappointing", "overpriced",
    "risky", "outdated", "buggy", "stay away", "falls short",
]

# AI engines queried for each prompt
AI_MODELS: List[dict] = [
    {"id": "chatgpt", "name": "ChatGPT", "provider": "OpenAI", "color": "#10a37f",
     "cost_per_query": 0.02, "is_llm": True, "weight": 1.0},
    {"id": "claude", "name": "Claude", "provider": "Anthropic", "color": "#d97706",
     "cost_per_query": 0.02, "is_llm": True, "weight": 0.95},
    {"id": "gemini", "name": "Gemini", "provider": "Google", "color": "#4285f4",
     "cost_per_query": 0.02, "is_llm": True, "weight": 0.95},
    {"id": "perplexity", "name": "Perplexity", "provider": "Perplexity AI", "color": "#6366f1",
     "cost_per_query": 0.02, "is_llm": True, "weight": 0.9},
    {"id": "google_ai_overview", "name": "Google AI Overview", "provider": "DataForSEO",
     "color": "#ea4335", "cost_per_query": 0.003, "is_llm": False, "weight": 0.85},
    {"id": "google_serp", "name": "Google SERP", "provider": "DataForSEO", "color": "#34a853",
     "cost_per_query": 0.002, "is_llm": False, "weight": 0.7},
]

# Industry presets: default competitors and categorized prompt templates
INDUSTRY_PRESETS: Dict[str, dict] = {
    "Dating/Matrimony": {
        "competitors": ["Bumble", "Hinge", "Tinder", "Shaadi", "Aisle", "OkCupid",
                        "Coffee Meets Bagel", "Happn"],
        "prompts": [
            {"text": "Best dating apps in {region} 2025", "category": "broad"},
            {"text": "Top dating apps for serious relationships", "category": "broad"},
            {"text": "Dating apps with ID verification {region}", "category": "niche"},
            {"text": "Dating apps for professionals in {region}", "category": "niche"},
            {"text": "Safe dating apps for women {region}", "category": "niche"},
            {"text": "Verified dating apps for doctors in {region}", "category": "super_niche"},
            {"text": "Dating apps for divorced people over 40 in {region}", "category": "super_niche"},
            {"text": "{brand} vs Bumble which is better", "category": "comparison"},
            {"text": "Alternatives to Tinder for serious relationships", "category": "comparison"},
            {"text": "Dating apps without fake profiles {region}", "category": "problem"},
            {"text": "Dating apps with video calling feature", "category": "feature"},
            {"text": "Best dating apps in Mumbai 2025", "category": "local"},
        ],
    },
    "Food/Beverage": {
        "competitors": ["Sysco", "US Foods", "Makro", "Metro", "CP Foods", "Charoen Pokphand"],
        "prompts": [
            {"text": "Best food distributors in {region}", "category": "broad"},
            {"text": "Organic food suppliers for restaurants {region}", "category": "niche"},
            {"text": "Sustainable seafood suppliers for hotels in {region}", "category": "super_niche"},
            {"text": "{brand} vs Sysco comparison", "category": "comparison"},
            {"text": "How to find reliable food suppliers", "category": "problem"},
        ],
    },
    "Healthcare/Dental": {
        "competitors": ["Bupa Dental", "MyDentist", "Dental Care", "Smile Direct", "Aspen Dental"],
        "prompts": [
            {"text": "Best dental clinic in {region}", "category": "broad"},
            {"text": "Cosmetic dentistry specialists {region}", "category": "niche"},
            {"text": "Invisalign specialists for adults in {region}", "category": "super_niche"},
            {"text": "Affordable dental implants {region}", "category": "problem"},
            {"text": "Dental clinics with payment plans {region}", "category": "feature"},
            {"text": "Emergency dentist {region}", "category": "local"},
        ],
    },
    "E-commerce/Fashion": {
        "competitors": ["Myntra", "Ajio", "Amazon Fashion", "Meesho", "Nykaa", "Flipkart Fashion"],
        "prompts": [
            {"text": "Best online fashion stores {region}", "category": "broad"},
            {"text": "Sustainable fashion brands {region}", "category": "niche"},
            {"text": "Handloom sarees online authentic {region}", "category": "super_niche"},
            {"text": "{brand} vs Myntra which is better", "category": "comparison"},
        ],
    },
    "Technology/SaaS": {
        "competitors": ["Salesforce", "HubSpot", "Zendesk", "Freshworks", "Zoho"],
        "prompts": [
            {"text": "Best CRM software 2025", "category": "broad"},
            {"text": "CRM for small businesses under $50/month", "category": "niche"},
            {"text": "CRM with WhatsApp integration for {region} businesses", "category": "super_niche"},
            {"text": "Alternatives to {competitor}", "category": "comparison"},
            {"text": "How to choose the right CRM for my business", "category": "problem"},
        ],
    },
    "Travel/Hospitality": {
        "competitors": ["Booking.com", "Airbnb", "Expedia", "MakeMyTrip", "Agoda", "TripAdvisor"],
        "prompts": [
            {"text": "Best hotels in {region}", "category": "broad"},
            {"text": "Boutique hotels in {region}", "category": "niche"},
            {"text": "Eco-friendly resorts for honeymoon in {region}", "category": "super_niche"},
            {"text": "Cheap flights to {region}", "category": "local"},
        ],
    },
    "Custom": {
        "competitors": [],
        "prompts": [],
    },
}
