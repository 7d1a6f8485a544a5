import pytest

from pricing import DEFAULT_PRICE_TABLE, build_quote, normalize_currency, normalize_quantity
from pricing.price_table import FREE_SHIPPING_LABEL, PAID_SHIPPING_LABEL


def _amounts(quote):
    return [(item.unit_amount, item.quantity) for item in quote.line_items]


def test_single_unit_usd_charges_shipping():
    quote = build_quote(1, "usd")

    assert quote.currency == "usd"
    assert _amounts(quote) == [(79900, 1)]
    assert quote.shipping.fee_amount == 4000
    assert quote.shipping.label == PAID_SHIPPING_LABEL
    assert quote.line_items[0].name == "UV Car Inspection Device (1 pc)"


def test_two_units_are_one_bundle_line_with_free_shipping():
    quote = build_quote(2, "usd")

    assert _amounts(quote) == [(129900, 1)]
    assert quote.shipping.fee_amount == 0
    assert quote.shipping.label == FREE_SHIPPING_LABEL
    assert quote.unit_count == 2


def test_five_units_bundle_plus_three_extras():
    quote = build_quote(5, "usd")

    assert _amounts(quote) == [(129900, 1), (70000, 3)]
    assert quote.line_items[0].name.endswith("(2 pcs bundle)")
    assert quote.line_items[1].name.endswith("(additional unit)")
    assert quote.shipping.fee_amount == 0
    assert quote.unit_count == 5
    assert quote.total_amount == 129900 + 3 * 70000


def test_three_units_in_turkish_lira():
    quote = build_quote(3, "try")

    assert quote.currency == "try"
    assert _amounts(quote) == [(4599000, 1), (2400000, 1)]
    assert quote.shipping.fee_amount == 0


def test_shipping_estimate_is_five_to_seven_days():
    for quantity in (1, 2, 7):
        shipping = build_quote(quantity, "eur").shipping
        assert (shipping.estimated_min_days, shipping.estimated_max_days) == (5, 7)


@pytest.mark.parametrize(
    "quantity",
    [0, -1, -250, None, "abc", "", [], {}, True, float("nan"), float("inf"), "9" * 5000],
)
def test_invalid_quantities_behave_like_one(quantity):
    assert build_quote(quantity, "eur") == build_quote(1, "eur")


@pytest.mark.parametrize("currency", ["gbp", "", None, 42, "xx", ["usd"]])
def test_unknown_currencies_fall_back_to_usd(currency):
    assert build_quote(4, currency) == build_quote(4, "usd")


def test_currency_lookup_is_case_insensitive():
    assert build_quote(3, " TRY ") == build_quote(3, "try")
    assert build_quote(1, "Eur").currency == "eur"


@pytest.mark.parametrize(
    "raw, expected",
    [(3, 3), (2.9, 2), ("4", 4), (" 6 units", 6), ("+2", 2), ("-3", 1), (0.5, 1), (10**9, 10**9)],
)
def test_normalize_quantity(raw, expected):
    assert normalize_quantity(raw) == expected


def test_normalize_currency():
    assert normalize_currency("EUR") == "eur"
    assert normalize_currency("jpy") == DEFAULT_PRICE_TABLE.default_currency


def test_large_quantities_are_not_capped():
    quote = build_quote(10_000, "usd")
    assert quote.line_items[1].quantity == 9_998


def test_same_input_gives_equal_quotes():
    first = build_quote(7, "eur")
    second = build_quote(7, "eur")

    assert first == second
    assert first.model_dump() == second.model_dump()


@pytest.mark.parametrize("currency", DEFAULT_PRICE_TABLE.currencies)
def test_bundle_is_cheaper_than_two_singles(currency):
    assert build_quote(2, currency).total_amount < 2 * build_quote(1, currency).total_amount
