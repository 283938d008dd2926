"""
Tests for availability classification.
"""

import time

import pytest

from keyword_domain_tool.classifier import (
    AVAILABLE_INDICATORS,
    Availability,
    LookupResult,
    TAKEN_INDICATORS,
    classify,
    classify_lookup,
)
from keyword_domain_tool.sources import SourceTimeoutError


class TestClassify:
    """Tests for the substring heuristic."""

    def test_no_match_is_available(self):
        assert classify('No match for "ONETWO.COM".') == Availability.AVAILABLE

    def test_registrar_is_taken(self):
        assert classify("Registrar: Example Registrar, LLC") == Availability.TAKEN

    def test_unrecognised_defaults_to_taken(self):
        """Unknown formats are treated as taken."""
        assert classify("% rate limit exceeded, come back later") == Availability.TAKEN
        assert classify("") == Availability.TAKEN

    def test_available_wins_over_taken(self):
        """Available indicators are checked first."""
        text = "Domain Name: foo.example\nStatus: free"
        assert classify(text) == Availability.AVAILABLE

    @pytest.mark.parametrize("indicator", AVAILABLE_INDICATORS)
    def test_each_available_indicator(self, indicator):
        assert classify(f">>> {indicator.upper()} <<<") == Availability.AVAILABLE

    @pytest.mark.parametrize("indicator", TAKEN_INDICATORS)
    def test_each_taken_indicator(self, indicator):
        assert classify(f"{indicator.title()} something") == Availability.TAKEN


class TestClassifyLookup:
    """Tests for building LookupResults."""

    def test_success(self):
        result = classify_lookup("a.com", raw_text="NOT FOUND", source="mock")

        assert result.available
        assert not result.failed
        assert result.error is None
        assert result.source == "mock"

    def test_failure_has_no_verdict(self):
        """A failed lookup carries only the failure."""
        result = classify_lookup("a.com", error=SourceTimeoutError("timed out"))

        assert result.failed
        assert result.availability is None
        assert result.error == "timed out"
        assert not result.available
        assert not result.taken

    def test_failure_without_message_uses_type(self):
        result = classify_lookup("a.com", error=ConnectionResetError())

        assert result.error == "ConnectionResetError"

    def test_duration_measured(self):
        started = time.monotonic() - 1.0
        result = classify_lookup("a.com", raw_text="", started_at=started)

        assert result.duration_seconds >= 1.0

    def test_to_dict(self):
        result = LookupResult(domain="a.com", availability=Availability.TAKEN, source="whois")

        data = result.to_dict()

        assert data["domain"] == "a.com"
        assert data["availability"] == "taken"
        assert data["error"] is None
