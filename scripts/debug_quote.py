#!/usr/bin/env python
"""
Print the full trace of a sample fleet quote.

Usage:
    python scripts/debug_quote.py
"""
import pandas as pd

from fleet_builder.engine import PricingEngine, QuoteRequest
from fleet_builder.presentation import breakdown_frame, display_totals


def debug():
    engine = PricingEngine()

    print("--- Testing mixed fleet, regional SmartCare, 30 days ---")
    req = QuoteRequest(
        region_key="regional",
        service_key="smartcare",
        insurance_key="full",
        delivery_key="express",
        vehicles={"curtain": 3, "tanker": 2, "hovercraft": 1},
        start_date="2025-06-01",
        end_date="2025-06-30",
    )
    result = engine.calculate(req)

    print(result.get_trace_text())

    print("\nLines:")
    with pd.option_context('display.width', 120, 'display.max_columns', None):
        print(breakdown_frame(result).to_string(index=False))

    for line in result.lines:
        print(f"\n{line.label}:")
        for t in line.trace:
            print(f"  → {t.step}: {t.description} = {t.value}")

    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f" - {w}")

    print("\nSummary:")
    for name, value in display_totals(result).items():
        print(f"  {name:<14}{value}")


if __name__ == "__main__":
    debug()
