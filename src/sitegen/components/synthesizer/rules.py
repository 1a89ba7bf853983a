"""Rule tables for profile synthesis.

Every table is ordered; where a lookup is "first match wins" the order here
is the priority. Keywords match at the start of a word ("garden" also hits
"gardens", "web" also hits "websites"). Keywords in WHOLE_WORD_KEYWORDS must
match a whole word so "fun" doesn't fire on "fund" and "app" doesn't fire on
"appointment".
"""

from __future__ import annotations

import re

from sitegen.schemas.profile import BrandTone

# Short keywords that are the prefix of too many unrelated words
WHOLE_WORD_KEYWORDS = frozenset({"ui", "ux", "fun", "seo", "app"})


def keyword_pattern(*keywords: str) -> re.Pattern[str]:
    """Compile keywords into one case-insensitive word-start regex."""
    parts = []
    for kw in keywords:
        escaped = re.escape(kw.lower())
        parts.append(escaped + r"\b" if kw.lower() in WHOLE_WORD_KEYWORDS else escaped)
    return re.compile(r"\b(?:" + "|".join(parts) + ")", re.IGNORECASE)


DEFAULT_NAME = "Business"
DEFAULT_CATEGORY = "Services"
DEFAULT_SERVICE = "Services"

# ── Category detection: (pattern, category), first match wins ──────────

CATEGORY_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (keyword_pattern("landscap", "garden", "plant", "outdoor"), "Landscaping"),
    (keyword_pattern("photo", "event", "wedding", "portrait"), "Photography"),
    (keyword_pattern("design", "graphic", "ui", "ux", "branding"), "Design"),
    (keyword_pattern("develop", "code", "coding", "software", "web"), "Software Development"),
    (keyword_pattern("consult", "advis", "strategy"), "Consulting"),
    (keyword_pattern("market", "advertis", "social", "content"), "Marketing"),
    (keyword_pattern("teach", "train", "course", "education"), "Education"),
    (keyword_pattern("retail", "shop", "store", "ecommerce"), "Retail"),
)

# ── Service extraction: every label whose keyword set hits is added ────

SERVICE_KEYWORDS: dict[str, re.Pattern[str]] = {
    "design": keyword_pattern("design", "ui", "ux", "branding", "logo", "visual"),
    "development": keyword_pattern("development", "coding", "programming", "software", "app", "apps", "web"),
    "marketing": keyword_pattern("marketing", "seo", "advertising", "social", "content"),
    "consulting": keyword_pattern("consulting", "advisory", "strategy", "business"),
    "services": keyword_pattern("services", "repair", "maintenance", "cleaning", "installation"),
    "landscaping": keyword_pattern("garden", "landscaping", "landscape", "outdoor", "plants"),
    "photography": keyword_pattern("photography", "photo", "portrait", "wedding", "event"),
}

# ── Location: first capturing match wins ───────────────────────────────

_PLACE = r"([A-Z][A-Za-z]+(?:[ \t]+[A-Z][A-Za-z]+)*(?:,[ \t]*[A-Z]{2}\b)?)"

LOCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?i:based in|located in|available in|serving|in)[ \t]+" + _PLACE),
    re.compile(r"\b([A-Z][A-Za-z]+(?:[ \t]+[A-Z][A-Za-z]+)*,[ \t]*[A-Z]{2})\b"),
)

# ── Brand tone: first bucket with a hit wins, professional otherwise ───

TONE_RULES: tuple[tuple[re.Pattern[str], BrandTone], ...] = (
    (keyword_pattern("luxury", "premium", "exclusive"), BrandTone.LUXURY),
    (keyword_pattern("bold", "aggressive", "innovative"), BrandTone.BOLD),
    (keyword_pattern("casual", "fun", "relaxed"), BrandTone.CASUAL),
    (keyword_pattern("friendly", "approachable", "warm"), BrandTone.FRIENDLY),
)
DEFAULT_TONE = BrandTone.PROFESSIONAL

# ── Trust signals: independent tests, each adds one sentence ───────────

TRUST_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (keyword_pattern("award", "certified"), "Industry certified and award-winning"),
    (keyword_pattern("year", "since"), "Established business with proven track record"),
    (keyword_pattern("client", "customer"), "Hundreds of satisfied clients"),
    (keyword_pattern("expert", "professional"), "Expert team of professionals"),
    (keyword_pattern("guarantee", "money back"), "100% satisfaction guarantee"),
)
DEFAULT_TRUST_SIGNALS: tuple[str, ...] = (
    "Professional service delivered",
    "Customer-focused approach",
    "Quality guaranteed",
)
MAX_TRUST_SIGNALS = 5

# ── SEO keywords ───────────────────────────────────────────────────────

CATEGORY_SEO_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Landscaping": ("landscaping", "garden design", "lawn care", "outdoor design", "landscape maintenance"),
    "Photography": ("photography", "photographer", "photo services", "event photography", "professional photos"),
    "Design": ("graphic design", "web design", "branding", "ui design", "visual design"),
    "Software Development": ("web development", "software development", "app development", "coding", "custom software"),
    "Consulting": ("consulting", "business consulting", "strategy", "advisory", "strategic planning"),
    "Marketing": ("digital marketing", "social media marketing", "seo services", "marketing", "online marketing"),
}
GENERIC_SEO_KEYWORDS: tuple[str, ...] = ("professional services", "local services")
CLOSING_SEO_KEYWORDS: tuple[str, ...] = ("local services", "professional services")  # + category
FILLER_SEO_KEYWORDS: tuple[str, ...] = ("service", "professional", "quality", "trusted", "experienced")
MIN_SEO_KEYWORDS = 5
MAX_SEO_KEYWORDS = 20

# ── Value proposition ──────────────────────────────────────────────────

SENTENCE_SPLIT = re.compile(r"[.!?]+")
MIN_VALUE_SENTENCE = 20
DEFAULT_VALUE_PROPOSITION = "Professional services delivered with attention to detail"

# ── Target audience: first match wins ──────────────────────────────────

AUDIENCE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (keyword_pattern("local"), "Local businesses and homeowners"),
    (keyword_pattern("b2b"), "Other businesses"),
    (keyword_pattern("b2c"), "Individual consumers"),
    (keyword_pattern("startup"), "Startups and entrepreneurs"),
    (keyword_pattern("enterprise"), "Large organizations"),
)
DEFAULT_AUDIENCE = "Businesses and entrepreneurs"

# ── Brand colors / assets ──────────────────────────────────────────────

DEFAULT_BRAND_COLORS: tuple[str, ...] = ("#3B82F6", "#10B981", "#F59E0B", "#EF4444", "#8B5CF6")
MAX_GALLERY_IMAGES = 5

# Scraped page titles are often "Name | Tagline" or "Name - Home".
TITLE_SEPARATORS = re.compile(r"\s+[|–—-]\s+")
MAX_NAME_LENGTH = 200
