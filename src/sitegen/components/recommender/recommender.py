"""Template Recommender — ranks the catalog against a profile.

score = CATEGORY_WEIGHT * [category matches] + TONE_WEIGHT * [tone matches]

A category match means any token of the profile's category (or the whole
category, hyphenated) is one of the template's affinity tags. Ranking is a
stable sort, so equal scores keep catalog order.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from sitegen.components.recommender.catalog import CATALOG
from sitegen.schemas.profile import BusinessProfile
from sitegen.schemas.template import Recommendation, TemplateDefinition, TemplateMatch

CATEGORY_WEIGHT = 2
TONE_WEIGHT = 1
MAX_SCORE = CATEGORY_WEIGHT + TONE_WEIGHT

_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")


def category_tokens(category: str) -> set[str]:
    """``"Software Development"`` -> {"software", "development", "software-development"}."""
    words = [w for w in _TOKEN_SPLIT.split(category.lower()) if w]
    tokens = set(words)
    if len(words) > 1:
        tokens.add("-".join(words))
    return tokens


def score_template(template: TemplateDefinition, profile: BusinessProfile) -> TemplateMatch:
    score = 0
    reasons: list[str] = []

    if category_tokens(profile.category) & template.categories:
        score += CATEGORY_WEIGHT
        reasons.append("category match")
    if profile.brand_tone in template.tones:
        score += TONE_WEIGHT
        reasons.append("tone match")

    return TemplateMatch(template=template, score=score, reasons=reasons)


def recommend(
    profile: BusinessProfile,
    catalog: Sequence[TemplateDefinition] = CATALOG,
) -> Recommendation:
    """Rank ``catalog`` for ``profile`` and pick the best entry.

    If nothing scores above zero the first catalog entry is the pick.
    """
    if not catalog:
        raise ValueError("Template catalog is empty")

    matches = [score_template(template, profile) for template in catalog]
    ranked = sorted(matches, key=lambda m: m.score, reverse=True)
    top = ranked[0]

    if top.score > 0:
        best = top.template
        reason = f"Selected based on: {', '.join(top.reasons)}"
    else:
        best = catalog[0]
        reason = "No category or tone match; using the default template"

    return Recommendation(
        ranked=ranked,
        best=best,
        confidence=round(100 * top.score / MAX_SCORE),
        reason=reason,
    )
