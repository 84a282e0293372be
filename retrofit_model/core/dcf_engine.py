"""Discounted Cash Flow engine for NPV and IRR calculations."""

import logging
from typing import Any

import numpy as np

from retrofit_model.models.results import IRRSolution, SolverMethod
from retrofit_model.templates.retrofit_defaults import SOLVER_DEFAULTS
from retrofit_model.utils.financial_utils import (
    build_annuity_cash_flows,
    calculate_discount_factors,
)

logger = logging.getLogger(__name__)


class DCFEngine:
    """
    Calculates NPV and IRR for a flat annual savings stream.

    Cash flows follow the end-of-period convention: the investment is
    paid at year 0 and savings arrive at the end of years 1..N.

    The IRR search runs Newton-Raphson from ``initial_guess`` with the
    rate clamped to ``newton_rate_bounds`` each step. If Newton fails to
    reach the tolerance within ``max_iterations`` (or the derivative
    vanishes), bisection over ``bisection_bracket`` takes over. Both
    stages stop once ``|NPV| < tolerance``.

    Args:
        solver_config: Overrides for ``SOLVER_DEFAULTS``.
    """

    def __init__(self, solver_config: dict[str, Any] | None = None) -> None:
        """Initialize with optional solver overrides."""
        config = dict(SOLVER_DEFAULTS)
        if solver_config:
            unknown = set(solver_config) - set(SOLVER_DEFAULTS)
            if unknown:
                raise ValueError(
                    f"Unknown solver settings: {sorted(unknown)}. "
                    f"Available: {list(SOLVER_DEFAULTS.keys())}"
                )
            config.update(solver_config)

        low, high = config["newton_rate_bounds"]
        bracket_low, bracket_high = config["bisection_bracket"]
        if not -1 < low < high or not -1 < bracket_low < bracket_high:
            raise ValueError(
                "Solver bounds must satisfy -1 < low < high, got "
                f"newton_rate_bounds={config['newton_rate_bounds']}, "
                f"bisection_bracket={config['bisection_bracket']}"
            )
        if config["max_iterations"] < 1 or config["tolerance"] <= 0:
            raise ValueError("max_iterations must be >= 1 and tolerance > 0")

        self.config = config

    @staticmethod
    def calculate_npv(cash_flows: np.ndarray, discount_rate: float) -> float:
        """
        Calculate Net Present Value with end-of-period convention.

        Args:
            cash_flows: Cash flows for years 0..N (year 0 undiscounted).
            discount_rate: Discount rate as decimal.

        Returns:
            NPV as float. May be ``inf`` for rates close to -1.
        """
        n_years = len(cash_flows) - 1
        discount_factors = calculate_discount_factors(discount_rate, n_years)
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.sum(cash_flows * discount_factors))

    @staticmethod
    def calculate_npv_derivative(
        cash_flows: np.ndarray, discount_rate: float
    ) -> float:
        """
        First derivative of NPV with respect to the discount rate.

        d/dr CF_t / (1+r)^t = -t · CF_t / (1+r)^(t+1)
        """
        n_years = len(cash_flows) - 1
        years = np.arange(n_years + 1)
        discount_factors = calculate_discount_factors(discount_rate, n_years)
        with np.errstate(over="ignore", invalid="ignore"):
            return float(
                np.sum(-years * cash_flows * discount_factors / (1 + discount_rate))
            )

    def calculate_annuity_npv(
        self,
        initial_investment: float,
        annual_amount: float,
        discount_rate: float,
        n_years: int,
    ) -> float:
        """
        NPV of an investment followed by ``n_years`` flat annual amounts.

        Args:
            initial_investment: Upfront cost (positive number).
            annual_amount: Annual savings.
            discount_rate: Discount rate as decimal.
            n_years: Project lifetime.

        Returns:
            NPV in currency units.
        """
        cash_flows = build_annuity_cash_flows(
            initial_investment, annual_amount, n_years
        )
        return self.calculate_npv(cash_flows, discount_rate)

    def calculate_irr(
        self,
        initial_investment: float,
        annual_amount: float,
        n_years: int,
    ) -> IRRSolution:
        """
        Calculate the Internal Rate of Return of an annuity investment.

        Args:
            initial_investment: Upfront cost (positive number).
            annual_amount: Annual savings.
            n_years: Project lifetime.

        Returns:
            IRRSolution with the rate as decimal, or rate None with
            method NOT_COMPUTABLE when no root can be established.
        """
        if annual_amount <= 0:
            logger.warning(
                "IRR not computable: annual savings %.2f are not positive",
                annual_amount,
            )
            return IRRSolution(rate=None, method=SolverMethod.NOT_COMPUTABLE)

        cash_flows = build_annuity_cash_flows(
            initial_investment, annual_amount, n_years
        )

        rate, newton_iterations = self._solve_newton(cash_flows)
        if rate is not None:
            return IRRSolution(
                rate=rate,
                method=SolverMethod.NEWTON_RAPHSON,
                iterations=newton_iterations,
            )

        logger.debug(
            "Newton-Raphson did not converge after %d iterations, "
            "falling back to bisection",
            newton_iterations,
        )
        rate, bisection_iterations = self._solve_bisection(cash_flows)
        total_iterations = newton_iterations + bisection_iterations
        if rate is None:
            logger.warning(
                "IRR not computable: no sign change of NPV in %s",
                self.config["bisection_bracket"],
            )
            return IRRSolution(
                rate=None,
                method=SolverMethod.NOT_COMPUTABLE,
                iterations=total_iterations,
            )

        return IRRSolution(
            rate=rate,
            method=SolverMethod.BISECTION,
            iterations=total_iterations,
        )

    def _solve_newton(self, cash_flows: np.ndarray) -> tuple[float | None, int]:
        """
        Newton-Raphson search with the rate clamped every step.

        Returns:
            (rate, iterations). Rate is None if the stage failed.
        """
        low, high = self.config["newton_rate_bounds"]
        tolerance = self.config["tolerance"]
        rate = float(self.config["initial_guess"])

        for iteration in range(self.config["max_iterations"]):
            npv = self.calculate_npv(cash_flows, rate)
            if not np.isfinite(npv):
                return None, iteration + 1

            if abs(npv) < tolerance:
                logger.debug(
                    "Newton-Raphson converged to %.6f in %d iterations",
                    rate,
                    iteration + 1,
                )
                return rate, iteration + 1

            derivative = self.calculate_npv_derivative(cash_flows, rate)
            if derivative == 0 or not np.isfinite(derivative):
                return None, iteration + 1

            rate = rate - npv / derivative
            # Keep the search away from -1 and runaway growth
            rate = min(max(rate, low), high)

        return None, self.config["max_iterations"]

    def _solve_bisection(self, cash_flows: np.ndarray) -> tuple[float | None, int]:
        """
        Bisection over the configured bracket.

        Stops on ``|NPV| < tolerance`` rather than on bracket width, which
        ``scipy.optimize.bisect`` does not support.

        Returns:
            (rate, iterations). Rate is None if the bracket ends have
            the same NPV sign.
        """
        low, high = self.config["bisection_bracket"]
        tolerance = self.config["tolerance"]

        npv_low = self.calculate_npv(cash_flows, low)
        npv_high = self.calculate_npv(cash_flows, high)
        if np.isnan(npv_low) or np.isnan(npv_high):
            return None, 0
        if np.sign(npv_low) == np.sign(npv_high):
            return None, 0

        # Narrow towards whichever end keeps the sign change
        low_is_positive = npv_low > 0

        for iteration in range(self.config["max_iterations"]):
            mid = (low + high) / 2
            npv = self.calculate_npv(cash_flows, mid)

            if abs(npv) < tolerance:
                return mid, iteration + 1

            if (npv > 0) == low_is_positive:
                low = mid
            else:
                high = mid

        return (low + high) / 2, self.config["max_iterations"]
