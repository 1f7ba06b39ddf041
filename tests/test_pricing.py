from services.pricing import discount_amount, discount_badge, discount_percent, price_per_area


def test_discount_percent_rounds_half_up():
    assert discount_percent(100, 75) == 25
    assert discount_percent(3, 2) == 33
    assert discount_percent(8, 7) == 13


def test_discount_needs_both_prices_and_positive_original():
    assert discount_percent(None, 10) is None
    assert discount_percent(100, None) is None
    assert discount_percent(0, 0) is None
    assert discount_amount(None, 10) is None


def test_discount_amount():
    assert discount_amount(100, 75) == 25.0
    assert discount_amount(59.9, 49.9) == 10.0


def test_badge_only_for_real_discounts():
    assert discount_badge(100, 75) == "-25%"
    assert discount_badge(100, 100) is None
    assert discount_badge(100, 120) is None
    assert discount_badge(None, 50) is None


def test_price_per_area():
    assert price_per_area(450000, 95) == 4736.84
    assert price_per_area(1, 8) == 0.13
    assert price_per_area(100, 0) is None
    assert price_per_area(0, 10) is None
    assert price_per_area(None, 10) is None
    assert price_per_area(100, None) is None
