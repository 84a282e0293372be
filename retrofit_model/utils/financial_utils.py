"""Financial utility functions for common calculations."""

import numpy as np


def calculate_discount_factors(
    discount_rate: float,
    n_years: int,
) -> np.ndarray:
    """
    Calculate end-of-period discount factors for years 0..n_years.

    Year 0 is not discounted. Factors that overflow (rates near -1 with
    long lifetimes) come back as ``inf`` instead of raising.

    Args:
        discount_rate: Discount rate as decimal (e.g. 0.10 for 10%).
        n_years: Number of discounted years after year 0.

    Returns:
        Array of shape (n_years + 1,).

    Example:
        >>> calculate_discount_factors(0.05, 3)
        array([1.        , 0.95238095, 0.90702948, 0.8638376 ])
    """
    years = np.arange(n_years + 1)
    with np.errstate(over="ignore", divide="ignore", under="ignore"):
        factors = 1 / (1 + discount_rate) ** years
    factors[0] = 1.0
    return factors


def calculate_annuity_factor(discount_rate: float, n_years: int) -> float:
    """
    Present value of 1 currency unit received at the end of each year.

    A = sum_{t=1..n} 1 / (1+r)^t

    Args:
        discount_rate: Discount rate as decimal.
        n_years: Number of payments.

    Returns:
        Annuity factor. Equals n_years at a zero rate.

    Example:
        >>> round(calculate_annuity_factor(0.10, 10), 4)
        6.1446
    """
    return float(np.sum(calculate_discount_factors(discount_rate, n_years)[1:]))


def build_annuity_cash_flows(
    initial_investment: float,
    annual_amount: float,
    n_years: int,
) -> np.ndarray:
    """
    Cash flows of an investment followed by a flat annual amount.

    Args:
        initial_investment: Upfront cost, booked as negative at year 0.
        annual_amount: Amount received at the end of years 1..n_years.
        n_years: Project lifetime.

    Returns:
        Array of shape (n_years + 1,): [-investment, amount, ..., amount].
    """
    cash_flows = np.full(n_years + 1, float(annual_amount), dtype=np.float64)
    cash_flows[0] = -float(initial_investment)
    return cash_flows
