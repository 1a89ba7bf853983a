"""Profile Synthesizer — raw signal in, complete BusinessProfile out.

Pure and total: no I/O, no randomness, and it never raises. Every step is a
lookup against the ordered tables in ``rules``. If anything inside goes wrong
(including a bounds check failing on the finished profile) the caller gets
``fallback_profile()`` instead of an exception.
"""

from __future__ import annotations

import logging

from sitegen.components.synthesizer import rules
from sitegen.schemas.profile import BrandTone, BusinessProfile, ContactPreferences, ImageAssets
from sitegen.schemas.signal import RawSignal

logger = logging.getLogger(__name__)


def synthesize(signal: RawSignal | None, conversational_text: str | None = None) -> BusinessProfile:
    """Build a BusinessProfile from whatever the signal provides."""
    try:
        return _synthesize_strict(signal or RawSignal(), conversational_text or "")
    except Exception:
        logger.warning("Profile synthesis failed, returning fallback profile", exc_info=True)
        return fallback_profile()


def fallback_profile() -> BusinessProfile:
    """The fixed minimal profile used when synthesis can't complete."""
    return BusinessProfile(
        name=rules.DEFAULT_NAME,
        category=rules.DEFAULT_CATEGORY,
        location="",
        services=[rules.DEFAULT_SERVICE],
        value_proposition=rules.DEFAULT_VALUE_PROPOSITION,
        target_audience=rules.DEFAULT_AUDIENCE,
        brand_tone=rules.DEFAULT_TONE,
        brand_colors=list(rules.DEFAULT_BRAND_COLORS[:2]),
        trust_signals=list(rules.DEFAULT_TRUST_SIGNALS),
        seo_keywords=list(rules.FILLER_SEO_KEYWORDS),
        contact_preferences=ContactPreferences(email=True, phone=True, booking=True),
    )


def _synthesize_strict(signal: RawSignal, conversational_text: str) -> BusinessProfile:
    name = extract_name(signal.title)
    description = " ".join(
        part.strip()
        for part in (signal.description, signal.free_text, conversational_text)
        if part and part.strip()
    )

    category = detect_category(description, name)
    logo_url = None
    image_assets = None
    if signal.images:
        logo_url = signal.images[0]
        image_assets = ImageAssets(
            hero=signal.images[0],
            gallery=signal.images[: rules.MAX_GALLERY_IMAGES],
            source="scraped",
        )

    return BusinessProfile(
        name=name,
        category=category,
        location=extract_location(description),
        services=extract_services(description, name),
        value_proposition=extract_value_proposition(description),
        target_audience=detect_target_audience(description),
        brand_tone=detect_brand_tone(description),
        brand_colors=list(rules.DEFAULT_BRAND_COLORS),
        trust_signals=generate_trust_signals(description),
        seo_keywords=generate_seo_keywords(name, category),
        contact_preferences=ContactPreferences(
            email=bool(signal.contact_email.strip()),
            phone=bool(signal.contact_phone.strip()),
            booking=True,
        ),
        logo_url=logo_url,
        image_assets=image_assets,
    )


def extract_name(title: str) -> str:
    name = rules.TITLE_SEPARATORS.split(title.strip(), maxsplit=1)[0].strip()
    return name[: rules.MAX_NAME_LENGTH] or rules.DEFAULT_NAME


def detect_category(description: str, name: str) -> str:
    text = f"{description} {name}".lower()
    for pattern, category in rules.CATEGORY_RULES:
        if pattern.search(text):
            return category
    return rules.DEFAULT_CATEGORY


def extract_services(description: str, name: str) -> list[str]:
    text = f"{description} {name}".lower()
    services = [
        label.capitalize()
        for label, pattern in rules.SERVICE_KEYWORDS.items()
        if pattern.search(text)
    ]
    return services or [rules.DEFAULT_SERVICE]


def extract_location(description: str) -> str:
    # Case matters here: place names are recognised by their capitals.
    for pattern in rules.LOCATION_PATTERNS:
        match = pattern.search(description)
        if match:
            return match.group(1).strip()
    return ""


def detect_brand_tone(description: str) -> BrandTone:
    for pattern, tone in rules.TONE_RULES:
        if pattern.search(description):
            return tone
    return rules.DEFAULT_TONE


def generate_trust_signals(description: str) -> list[str]:
    signals = [sentence for pattern, sentence in rules.TRUST_RULES if pattern.search(description)]
    if not signals:
        signals = list(rules.DEFAULT_TRUST_SIGNALS)
    return signals[: rules.MAX_TRUST_SIGNALS]


def generate_seo_keywords(name: str, category: str) -> list[str]:
    """Name, category keywords, closing keywords; deduped, padded, capped."""
    candidates = [name]
    candidates.extend(rules.CATEGORY_SEO_KEYWORDS.get(category, rules.GENERIC_SEO_KEYWORDS))
    candidates.extend(rules.CLOSING_SEO_KEYWORDS)
    candidates.append(category.lower())

    keywords: list[str] = []
    seen: set[str] = set()

    def _add(keyword: str) -> None:
        key = keyword.strip().casefold()
        if key and key not in seen:
            seen.add(key)
            keywords.append(keyword.strip())

    for keyword in candidates:
        _add(keyword)

    for filler in rules.FILLER_SEO_KEYWORDS:
        if len(keywords) >= rules.MIN_SEO_KEYWORDS:
            break
        _add(filler)

    return keywords[: rules.MAX_SEO_KEYWORDS]


def extract_value_proposition(description: str) -> str:
    for sentence in rules.SENTENCE_SPLIT.split(description):
        sentence = sentence.strip()
        if len(sentence) > rules.MIN_VALUE_SENTENCE:
            return sentence
    return rules.DEFAULT_VALUE_PROPOSITION


def detect_target_audience(description: str) -> str:
    for pattern, audience in rules.AUDIENCE_RULES:
        if pattern.search(description):
            return audience
    return rules.DEFAULT_AUDIENCE
