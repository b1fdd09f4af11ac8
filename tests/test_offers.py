# This project was developed with assistance from AI tools.
"""Tests for the offer catalog and bundle construction."""

import pytest
from factories import make_offer

from loanmatch.services.errors import NotFoundError
from loanmatch.services.offers import (
    build_bundles,
    get_available_offers,
    get_bundle,
    get_bundled_offers,
    get_offer,
)


def test_available_offers_respect_amount_ceiling(store):
    offers = get_available_offers(store.offers, 10000, ceiling=1.5)
    assert [o.id for o in offers] == ["offer-2", "offer-5"]


def test_available_offers_ceiling_is_inclusive(store):
    offers = get_available_offers(store.offers, 20000, ceiling=1.5)
    assert "offer-4" in [o.id for o in offers]  # exactly 30000


def test_get_offer(store):
    assert get_offer(store.offers, "offer-3").bank_name == "TechFinance"


def test_get_missing_offer_raises(store):
    with pytest.raises(NotFoundError, match="offer-99"):
        get_offer(store.offers, "offer-99")


def test_no_bundles_from_single_offer():
    assert build_bundles([make_offer()]) == []


def test_two_offers_only_make_low_rate_bundle():
    bundles = build_bundles([make_offer(id="a"), make_offer(id="b")])
    assert [b.name for b in bundles] == ["Low Rate Bundle"]


def test_bundles_from_catalog(store):
    bundles = {b.name: b for b in build_bundles(store.offers.list())}

    max_value = bundles["Max Value Bundle"]
    assert max_value.offer_ids == ["offer-4", "offer-3", "offer-1"]
    assert max_value.total_amount == 63750
    assert max_value.lenders == ["Heritage Bank", "TechFinance", "First Bank"]

    low_rate = bundles["Low Rate Bundle"]
    assert low_rate.offer_ids == ["offer-2", "offer-1"]
    assert low_rate.total_amount == 31500
    assert low_rate.average_interest_rate == pytest.approx(4.1)
    assert low_rate.total_monthly_payment == pytest.approx(1248.23)


def test_bundled_offers_filtered_by_amount(store):
    bundles = get_bundled_offers(store.offers.list(), 20000, ceiling=2.0)
    assert [b.name for b in bundles] == ["Low Rate Bundle"]


def test_get_bundle_by_id(store):
    bundle = get_bundle(store.offers.list(), "bundle-low-rate")
    assert bundle.name == "Low Rate Bundle"
    assert bundle.offer_ids == ["offer-2", "offer-1"]


def test_get_bundle_missing_raises(store):
    with pytest.raises(NotFoundError, match="Bundle 'bundle-none' not found"):
        get_bundle(store.offers.list(), "bundle-none")


def test_max_value_bundle_needs_three_offers():
    offers = [make_offer(id="a"), make_offer(id="b")]
    with pytest.raises(NotFoundError):
        get_bundle(offers, "bundle-max-value")
