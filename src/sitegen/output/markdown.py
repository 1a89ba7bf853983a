"""Markdown summary builder — renders a finished job to a short Markdown document."""

from __future__ import annotations

from sitegen.schemas.job import JobSnapshot, JobStatus
from sitegen.schemas.profile import BusinessProfile
from sitegen.schemas.template import Recommendation


def render_generation_summary(
    snapshot: JobSnapshot,
    *,
    profile: BusinessProfile | None = None,
    recommendation: Recommendation | None = None,
) -> str:
    """Render a job snapshot (plus optional profile and ranking) into Markdown."""
    sections: list[str] = []

    sections.append(f"# Website Generation: {snapshot.business_id}\n")
    sections.append(f"*Started: {snapshot.started_at.isoformat()}*")
    if snapshot.completed_at:
        sections.append(f"*Finished: {snapshot.completed_at.isoformat()}*")
    sections.append("")

    status_icon = {JobStatus.COMPLETED: "✅", JobStatus.FAILED: "❌"}.get(snapshot.status, "⏳")
    sections.append("## Status\n")
    sections.append(f"- {status_icon} **{snapshot.step}** ({snapshot.status.value}, {snapshot.progress}%)")
    sections.append(f"- {snapshot.message}")
    if snapshot.error:
        sections.append(f"- **Error:** {snapshot.error}")
    sections.append("")

    # Business Profile
    if profile:
        sections.append("## Business Profile\n")
        sections.append(f"- **Name:** {profile.name}")
        sections.append(f"- **Category:** {profile.category}")
        sections.append(f"- **Location:** {profile.location or 'N/A'}")
        sections.append(f"- **Brand tone:** {profile.brand_tone.value}")
        sections.append(f"- **Services:** {', '.join(profile.services)}")
        if profile.value_proposition:
            sections.append(f"- **Value proposition:** {profile.value_proposition}")
        if profile.target_audience:
            sections.append(f"- **Audience:** {profile.target_audience}")
        sections.append("- **Trust signals:**")
        for signal in profile.trust_signals:
            sections.append(f"  - {signal}")
        sections.append(f"- **SEO keywords:** {', '.join(profile.seo_keywords)}")
        sections.append("")

    # Template ranking
    if recommendation:
        sections.append("## Template Ranking\n")
        sections.append(f"*{recommendation.reason}* (confidence {recommendation.confidence}%)\n")
        sections.append("| Template | Score | Matched on |")
        sections.append("|----------|-------|------------|")
        for match in recommendation.ranked:
            marker = " **(selected)**" if match.template.id == recommendation.best.id else ""
            reasons = ", ".join(match.reasons) or "-"
            sections.append(f"| {match.template.name}{marker} | {match.score} | {reasons} |")
        sections.append("")

    # Generated site
    config = snapshot.website_config
    if config:
        sections.append("## Generated Website\n")
        sections.append(f"- **Slug:** `{config.slug}`")
        sections.append(f"- **Template:** {config.template_id}")
        sections.append(f"- **Sections:** {' → '.join(config.sections)}")
        sections.append(
            f"- **Theme:** {config.theme.font}, {config.theme.primary_color} / {config.theme.secondary_color}"
        )
        sections.append(f"- **Lead form fields:** {', '.join(config.lead_form.fields)}")
        sections.append(f"- **Booking:** {config.booking.provider if config.booking else 'disabled'}")
        sections.append("")

        sections.append("### Hero\n")
        sections.append(f"**{config.content.hero_headline}**\n")
        sections.append(f"{config.content.hero_subtext}\n")
        sections.append(f"[{config.content.cta_text}]({config.content.cta_link})\n")

        if config.content.services:
            sections.append("### Services\n")
            for card in config.content.services:
                sections.append(f"- **{card.title}**: {card.description}")
            sections.append("")

        sections.append("### SEO\n")
        sections.append(f"- **Title:** {config.seo.title}")
        sections.append(f"- **Description:** {config.seo.description}")
        sections.append(f"- **Keywords:** {', '.join(config.seo.keywords)}")
        if config.seo.local_keywords:
            sections.append(f"- **Local keywords:** {', '.join(config.seo.local_keywords)}")
        sections.append("")

    if snapshot.image_assets:
        sections.append("## Images\n")
        sections.append(f"*Source: {snapshot.image_assets.source}*\n")
        sections.append(f"- Hero: {snapshot.image_assets.hero}")
        for url in snapshot.image_assets.gallery:
            sections.append(f"- {url}")
        sections.append("")

    return "\n".join(sections)
