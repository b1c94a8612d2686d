"""Tests for the citation registry."""

from roi_estimator.citations.registry import get_all_citations, get_citation
from roi_estimator.kpi_library.registry import get_all_components
from roi_estimator.methodology.loader import get_default_methodology


class TestCitations:
    def test_every_component_citation_resolves(self):
        for component in get_default_methodology().components:
            assert get_citation(component.citation_key) is not None, component.id

    def test_every_registered_default_citation_resolves(self):
        for component_id, definition in get_all_components().items():
            assert get_citation(definition.citation_key) is not None, component_id

    def test_every_assumption_citation_resolves(self):
        for name, rng in get_default_methodology().assumptions.items():
            if rng.citation_key is not None:
                assert get_citation(rng.citation_key) is not None, name

    def test_breach_citation_matches_default_cost(self):
        citation = get_citation("breach_cost")
        assert "$4.81 million" in citation.text
        assert citation.source == "IBM Cost of a Data Breach Report 2024"

    def test_threat_note_present(self):
        assert "ai_phishing" in get_all_citations()

    def test_unknown_key_is_none(self):
        assert get_citation("gartner") is None

    def test_registry_copy_is_isolated(self):
        table = get_all_citations()
        table.pop("insurance")
        assert get_citation("insurance") is not None

    def test_to_dict(self):
        data = get_citation("password_reset").to_dict()
        assert set(data) == {"key", "title", "source", "text", "link"}
        assert data["link"].startswith("https://")
