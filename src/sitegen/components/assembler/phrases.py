"""Copy tables for the generated site, keyed by brand tone."""

from sitegen.schemas.profile import BrandTone

SERVICE_DESCRIPTIONS: dict[BrandTone, str] = {
    BrandTone.PROFESSIONAL: "Our expert team delivers exceptional {service} with precision and reliability.",
    BrandTone.FRIENDLY: "We love providing {service} that makes a real difference in your life!",
    BrandTone.LUXURY: "Experience the finest {service} crafted with unparalleled attention to detail.",
    BrandTone.BOLD: "Revolutionary {service} that sets us apart from the competition.",
    BrandTone.CASUAL: "Great {service} without the hassle. Simple as that.",
}

ABOUT_CLOSINGS: dict[BrandTone, str] = {
    BrandTone.PROFESSIONAL: "Contact us today to discuss how we can assist you.",
    BrandTone.FRIENDLY: "We can't wait to work with you!",
    BrandTone.LUXURY: "Experience the difference of premium service.",
    BrandTone.BOLD: "Ready to transform your experience? Let's talk.",
    BrandTone.CASUAL: "Drop us a line anytime!",
}

FONTS_BY_TYPOGRAPHY: dict[str, str] = {
    "luxury": "Playfair Display",
    "modern": "Inter",
    "classic": "Georgia",
}
DEFAULT_FONT = "Georgia"

DEFAULT_PRIMARY_COLOR = "#3B82F6"
DEFAULT_SECONDARY_COLOR = "#1E40AF"

DEFAULT_SUBTEXT = "Quality services tailored to your needs"
MAX_META_DESCRIPTION = 160
