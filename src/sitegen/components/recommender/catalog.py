"""Reference template catalog.

Declaration order matters: it is the tie-break order for recommendations and
the first entry is the default when nothing scores.
"""

from __future__ import annotations

from sitegen.schemas.profile import BrandTone
from sitegen.schemas.template import StylingRules, TemplateDefinition, TemplateLayout

IMAGE_HEAVY = TemplateDefinition(
    id="image-heavy",
    name="Image Heavy",
    description=(
        "Visual-first design with large hero images and grid-based service showcase. "
        "Perfect for creative industries, restaurants, and lifestyle brands."
    ),
    layout=TemplateLayout(hero_style="image-full", services_layout="grid", typography="modern"),
    styling=StylingRules(spacing="comfortable", image_radius=12, shadow_intensity="medium", border_style="none"),
    categories=frozenset({
        "photography", "creative", "restaurant", "food", "fashion", "beauty", "fitness",
        "art", "design", "lifestyle", "travel", "hospitality", "events", "wedding",
        "interior-design",
    }),
    tones=frozenset({BrandTone.BOLD, BrandTone.FRIENDLY, BrandTone.CASUAL}),
)

SERVICE_HEAVY = TemplateDefinition(
    id="service-heavy",
    name="Service Heavy",
    description=(
        "Content-focused layout emphasizing services and expertise. "
        "Ideal for consultants, agencies, and professional service providers."
    ),
    layout=TemplateLayout(hero_style="image-left", services_layout="list", typography="classic"),
    styling=StylingRules(spacing="compact", image_radius=8, shadow_intensity="light", border_style="subtle"),
    categories=frozenset({
        "consulting", "legal", "accounting", "finance", "insurance", "marketing", "agency",
        "tech", "software", "saas", "healthcare", "medical", "dental", "education",
        "coaching", "home-services", "plumbing", "electrical", "hvac", "cleaning",
        "landscaping", "construction", "real-estate",
    }),
    tones=frozenset({BrandTone.PROFESSIONAL, BrandTone.FRIENDLY}),
)

LUXURY = TemplateDefinition(
    id="luxury",
    name="Luxury",
    description=(
        "Elegant, spacious design with premium aesthetics. "
        "Perfect for high-end brands, luxury services, and exclusive experiences."
    ),
    layout=TemplateLayout(hero_style="centered", services_layout="grid", typography="luxury"),
    styling=StylingRules(spacing="spacious", image_radius=0, shadow_intensity="none", border_style="bold"),
    categories=frozenset({
        "luxury", "jewelry", "watches", "automotive", "yacht", "private-jet", "spa",
        "wellness", "fine-dining", "wine", "spirits", "fashion", "couture", "architecture",
        "art-gallery", "concierge", "private-banking", "luxury-real-estate",
    }),
    tones=frozenset({BrandTone.LUXURY, BrandTone.PROFESSIONAL}),
)

CATALOG: tuple[TemplateDefinition, ...] = (IMAGE_HEAVY, SERVICE_HEAVY, LUXURY)


def get_template(template_id: str, catalog: tuple[TemplateDefinition, ...] = CATALOG) -> TemplateDefinition | None:
    for template in catalog:
        if template.id == template_id:
            return template
    return None
