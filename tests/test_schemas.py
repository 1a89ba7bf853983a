"""Tests for the Pydantic schemas."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from conftest import make_profile
from sitegen.schemas.job import GenerationJob, JobSnapshot, JobStatus
from sitegen.schemas.profile import BrandTone, ImageAssets
from sitegen.schemas.signal import RawSignal
from sitegen.schemas.template import TemplateDefinition
from sitegen.schemas.website import BookingConfig, Theme


class TestRawSignal:
    def test_empty(self) -> None:
        signal = RawSignal()
        assert signal.title == ""
        assert signal.images == []
        assert signal.social_links == {}

    def test_nulls_coerced(self) -> None:
        signal = RawSignal.model_validate({
            "title": None,
            "description": None,
            "images": None,
            "headings": ["About", "", None],
            "social_links": None,
        })
        assert signal.title == ""
        assert signal.description == ""
        assert signal.images == []
        assert signal.headings == ["About"]
        assert signal.social_links == {}

    def test_unknown_keys_ignored(self) -> None:
        signal = RawSignal.model_validate({"title": "Acme", "scrapedAt": "2024-01-01"})
        assert signal.title == "Acme"
        assert not hasattr(signal, "scrapedAt")


class TestBusinessProfile:
    def test_valid(self) -> None:
        profile = make_profile()
        assert profile.brand_tone is BrandTone.FRIENDLY
        assert profile.contact_preferences.booking is True

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="name"):
            make_profile(name="  ")

    def test_services_required(self) -> None:
        with pytest.raises(ValidationError, match="service"):
            make_profile(services=[])

    def test_duplicate_services_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_profile(services=["Design", "design"])

    def test_too_few_seo_keywords(self) -> None:
        with pytest.raises(ValidationError):
            make_profile(seo_keywords=["a", "b", "c", "d"])

    def test_too_many_seo_keywords(self) -> None:
        with pytest.raises(ValidationError):
            make_profile(seo_keywords=[f"kw{i}" for i in range(21)])

    def test_casefold_duplicate_keywords_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_profile(seo_keywords=["Lawn", "lawn", "a", "b", "c"])

    def test_trust_signal_bounds(self) -> None:
        with pytest.raises(ValidationError):
            make_profile(trust_signals=[])
        with pytest.raises(ValidationError):
            make_profile(trust_signals=[f"signal {i}" for i in range(6)])

    def test_image_assets_need_hero(self) -> None:
        with pytest.raises(ValidationError, match="hero"):
            make_profile(image_assets=ImageAssets(hero="", gallery=["https://x.example/a.jpg"]))


class TestJobStatus:
    def test_terminal_states(self) -> None:
        terminal = {s for s in JobStatus if s.is_terminal}
        assert terminal == {JobStatus.COMPLETED, JobStatus.FAILED}

    def test_values_are_wire_names(self) -> None:
        assert JobStatus.SELECTING_TEMPLATE.value == "selecting_template"


class TestGenerationJob:
    def test_defaults(self) -> None:
        job = GenerationJob(job_id="j1", business_id="biz-1", source_url="https://acme.example")
        assert job.status is JobStatus.QUEUED
        assert job.history == [JobStatus.QUEUED]
        assert job.started_at.tzinfo is not None
        assert job.completed_at is None


class TestJobSnapshot:
    def test_camel_case_wire_shape(self) -> None:
        snapshot = JobSnapshot(
            business_id="biz-1",
            status=JobStatus.SCRAPING,
            step="Analyzing your website",
            message="Collecting information from your website",
            progress=20,
            started_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        )
        data = snapshot.model_dump(by_alias=True, mode="json")
        assert data["businessId"] == "biz-1"
        assert data["status"] == "scraping"
        assert data["websiteConfig"] is None
        assert "startedAt" in data
        assert not snapshot.is_terminal

    def test_parses_wire_shape(self) -> None:
        snapshot = JobSnapshot.model_validate({
            "businessId": "biz-1",
            "status": "failed",
            "step": "Generation failed",
            "message": "boom",
            "progress": 0,
            "error": "boom",
            "startedAt": "2024-05-01T00:00:00Z",
        })
        assert snapshot.status is JobStatus.FAILED
        assert snapshot.is_terminal


class TestWebsiteModels:
    def test_theme_aliases(self) -> None:
        theme = Theme(primary_color="#000000", secondary_color="#ffffff", font="Inter")
        data = theme.model_dump(by_alias=True)
        assert data["primaryColor"] == "#000000"
        assert data["heroStyle"] == "image-left"

    def test_booking_defaults(self) -> None:
        booking = BookingConfig()
        assert booking.provider == "internal"
        assert booking.calendar_id is None


class TestTemplateDefinition:
    def test_frozen(self) -> None:
        template = TemplateDefinition(id="t", name="T")
        with pytest.raises(ValidationError):
            template.name = "Other"
