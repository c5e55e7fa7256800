"""Unit tests for the PortfolioDocument entity."""

from portfolio.domain.entities import PortfolioDocument


def test_from_dict_fills_missing_collections():
    document = PortfolioDocument.from_dict({"projects": [{"id": 1}]})
    assert document.projects == [{"id": 1}]
    assert document.clients == []
    assert document.activity == []


def test_unknown_top_level_keys_survive():
    data = {"projects": [], "clients": [], "contacts": [], "newsletter": [], "activity": [], "settings": {"theme": "dark"}}
    assert PortfolioDocument.from_dict(data).to_dict() == data


def test_to_dict_collection_order():
    assert list(PortfolioDocument().to_dict()) == ["projects", "clients", "contacts", "newsletter", "activity"]
