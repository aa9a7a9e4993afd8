"""
Parcel Shipping Cost Calculator
===============================

Interactive CLI tool to calculate the shipping cost for a single parcel.

Usage:
    python -m parcel_estimator.scripts.calculator
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Callable

from parcel_estimator.calculate_costs import ShippingSpeed, try_calculate_shipping_cost
from parcel_estimator.errors import InvalidArgument
from parcel_estimator.parcel import Parcel, try_create_parcel
from parcel_estimator.version import VERSION

RETRY_HINT = "Please check your inputs and try again."


def parse_positive_decimal(text: str | None) -> Decimal | None:
    """Parse text as a finite Decimal > 0, or return None."""
    if text is None:
        return None
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not value.is_finite() or value <= 0:
        return None
    return value


def get_decimal_input(
    prompt: str,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Decimal:
    """Prompt until the user enters a positive decimal number."""
    while True:
        value = parse_positive_decimal(input_fn(prompt))
        if value is not None:
            return value
        output_fn("Invalid input. Please enter a positive decimal number.")


def get_speed_input(
    prompt: str,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> ShippingSpeed:
    """Prompt until the user enters Standard or Express (any case)."""
    text = input_fn(prompt)
    while True:
        try:
            return ShippingSpeed.parse(text)
        except InvalidArgument:
            output_fn("Invalid shipping speed. Please enter 'Standard' or 'Express'.")
        text = input_fn("")


def print_parcel_details(parcel: Parcel, output_fn: Callable[[str], None] = print) -> None:
    """Print dimensions and derived weights."""
    output_fn("\nParcel details:")
    output_fn(
        f"Dimensions: {parcel.length:f} × {parcel.width:f} × {parcel.height:f} in"
    )
    output_fn(f"Actual weight: {parcel.actual_weight:f} lbs")
    output_fn(f"Dimensional weight: {parcel.dimensional_weight:f} lbs")
    output_fn(f"Billable weight: {parcel.billable_weight:f} lbs")


def print_error(error: InvalidArgument, output_fn: Callable[[str], None] = print) -> None:
    output_fn(f"\nError: {error.message}")
    output_fn(RETRY_HINT)


def run_session(
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Decimal | None:
    """
    Run one calculator session.

    Returns:
        The total cost, or None if the session ended on an error or was
        cancelled
    """
    output_fn("Shipping Cost Calculator")
    output_fn(f"Version: {VERSION}\n")

    try:
        length = get_decimal_input("Enter package length (inches): ", input_fn, output_fn)
        width = get_decimal_input("Enter package width (inches): ", input_fn, output_fn)
        height = get_decimal_input("Enter package height (inches): ", input_fn, output_fn)
        weight = get_decimal_input("Enter package weight (lbs): ", input_fn, output_fn)

        parcel_result = try_create_parcel(length, width, height, weight)
        if not parcel_result.ok:
            print_error(parcel_result.error, output_fn)
            return None
        parcel = parcel_result.value

        print_parcel_details(parcel, output_fn)

        zone = input_fn("\nEnter destination zone (1-5): ")
        speed = get_speed_input("Enter shipping speed (Standard/Express): ", input_fn, output_fn)

        cost_result = try_calculate_shipping_cost(parcel, zone, speed)
        if not cost_result.ok:
            print_error(cost_result.error, output_fn)
            return None

        output_fn(f"\nTotal Shipping Cost: ${cost_result.value:.2f}")
        return cost_result.value

    except (EOFError, KeyboardInterrupt):
        output_fn("\n\nCancelled.")
        return None


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    run_session()


if __name__ == "__main__":
    main()
