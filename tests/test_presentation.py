import pytest

from fleet_builder.engine import QuoteRequest
from fleet_builder.presentation import format_eur, breakdown_frame, catalog_frame, display_totals
from fleet_builder.presentation.frames import LINE_COLUMNS

NBSP = "\u00a0"


@pytest.mark.parametrize("amount,expected", [
    (0, "€ 0"),
    (999, "€ 999"),
    (1234.5, "€ 1.235"),
    (1234.49, "€ 1.234"),
    (1234567, "€ 1.234.567"),
    (6741.3375, "€ 6.741"),
    (-1234.4, "€ -1.234"),
    (None, "€ 0"),
    (float("nan"), "€ 0"),
])
def test_format_eur(amount, expected):
    assert format_eur(amount) == expected.replace(" ", NBSP)


def test_breakdown_frame(engine):
    result = engine.calculate(QuoteRequest(vehicles={"curtain": 3, "hovercraft": 1}))
    df = breakdown_frame(result)

    assert list(df.columns) == LINE_COLUMNS
    assert len(df) == 2
    assert df['Key'].tolist() == ["curtain", "hovercraft"]
    assert df['Vehicle'].tolist() == ["Curtain Sider Trailer", "hovercraft"]
    assert df['Line Total'].sum() == pytest.approx(result.subtotal)


def test_breakdown_frame_empty(engine):
    df = breakdown_frame(engine.calculate(QuoteRequest()))
    assert df.empty
    assert list(df.columns) == LINE_COLUMNS


def test_catalog_frame_rates():
    df = catalog_frame(region_key="international", service_key="totalcare")
    assert len(df) == 14
    assert df.loc["box", "Base Rate"] == 55
    assert df.loc["box", "Daily Rate"] == pytest.approx(55 * 1.06 * 1.25)
    assert set(df['Category']) == {"truck", "specialized", "trailer"}


def test_catalog_frame_unknown_selection_uses_defaults():
    df = catalog_frame(region_key="moon", service_key=None)
    assert (df['Daily Rate'] == df['Base Rate']).all()


def test_display_totals(engine):
    result = engine.calculate(QuoteRequest(vehicles={"van": 2},
                                           start_date="2025-02-01", end_date="2025-02-10"))
    display = display_totals(result)
    assert display['duration'] == "10 days"
    assert display['assets'] == "2 total"
    assert display['total'] == f"€{NBSP}1.800"
    assert display['discount_rate'] == "0%"
