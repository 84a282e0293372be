"""Tests for the KPICalculator."""

import math

import pytest

from retrofit_model.core.kpi_calculator import KPICalculator
from retrofit_model.models.energy_cost_model import EnergyCostModel
from retrofit_model.models.results import InputParameters, InvestmentSignal


class TestPayback:
    """Tests for simple payback."""

    def test_payback_ratio(self) -> None:
        """Payback is investment divided by annual savings."""
        assert KPICalculator.calculate_payback_simple(185000, 270000) == pytest.approx(
            0.685185, rel=1e-5
        )

    def test_payback_zero_savings(self) -> None:
        """Zero savings never pay back."""
        assert KPICalculator.calculate_payback_simple(185000, 0.0) == math.inf

    def test_payback_negative_savings(self) -> None:
        """Negative savings never pay back."""
        assert KPICalculator.calculate_payback_simple(185000, -10.0) == math.inf


class TestCashFlowSeries:
    """Tests for the cumulative savings series."""

    def test_series_shape(self) -> None:
        """Series covers years 0..N with linear accumulation."""
        series = KPICalculator.calculate_cash_flow_series(1000, 300, 5)

        assert [p.year for p in series] == [0, 1, 2, 3, 4, 5]
        assert [p.cumulative_savings for p in series] == pytest.approx(
            [-1000, -700, -400, -100, 200, 500]
        )

    def test_series_zero_savings(self) -> None:
        """Without savings the series stays at the negative investment."""
        series = KPICalculator.calculate_cash_flow_series(1000, 0.0, 3)
        assert all(p.cumulative_savings == -1000 for p in series)

    def test_series_brackets_payback(self) -> None:
        """Cumulative savings cross zero between floor and ceil of payback."""
        investment, savings, years = 100000, 23000, 10
        payback = KPICalculator.calculate_payback_simple(investment, savings)
        series = KPICalculator.calculate_cash_flow_series(investment, savings, years)

        assert series[math.ceil(payback)].cumulative_savings >= 0
        assert series[math.floor(payback)].cumulative_savings <= 0

    def test_series_values_are_python_floats(self) -> None:
        """Series entries are plain floats, safe for JSON."""
        series = KPICalculator.calculate_cash_flow_series(1000, 300, 2)
        assert all(type(p.cumulative_savings) is float for p in series)


class TestInvestmentSignal:
    """Tests for the decision table."""

    @pytest.mark.parametrize(
        "irr, payback, expected",
        [
            (145.9, 0.69, InvestmentSignal.HIGHLY_FAVORABLE),
            (30.0, 2.9, InvestmentSignal.HIGHLY_FAVORABLE),
            (30.0, 3.0, InvestmentSignal.FAVORABLE),
            (25.0, 2.0, InvestmentSignal.FAVORABLE),
            (13.0, 4.9, InvestmentSignal.FAVORABLE),
            (13.0, 5.0, InvestmentSignal.MARGINAL),
            (12.0, 2.0, InvestmentSignal.MARGINAL),
            (7.0, 10.0, InvestmentSignal.MARGINAL),
            (6.0, 1.0, InvestmentSignal.REVIEW_REQUIRED),
            (-3.0, 20.0, InvestmentSignal.REVIEW_REQUIRED),
            (None, math.inf, InvestmentSignal.REVIEW_REQUIRED),
            (None, 0.5, InvestmentSignal.REVIEW_REQUIRED),
        ],
    )
    def test_classification(
        self, irr: float | None, payback: float, expected: InvestmentSignal
    ) -> None:
        """First matching row of the table wins."""
        assert KPICalculator.classify_signal(irr, payback) == expected

    def test_signal_labels(self) -> None:
        """Signals expose display labels and recommendations."""
        assert InvestmentSignal.HIGHLY_FAVORABLE.label == "Highly Favorable"
        assert InvestmentSignal.REVIEW_REQUIRED.label == "Review Required"
        assert "further review" in InvestmentSignal.REVIEW_REQUIRED.recommendation


class TestImpact:
    """Tests for lifetime carbon and benchmark figures."""

    @pytest.fixture
    def calculator(self) -> KPICalculator:
        """Create KPICalculator with default benchmarks."""
        return KPICalculator()

    def test_impact_values(
        self, calculator: KPICalculator, compressor_params: InputParameters
    ) -> None:
        """Lifetime figures scale the annual ones by project life."""
        energy = EnergyCostModel().calculate(compressor_params)
        impact = calculator.calculate_impact(
            compressor_params, energy, 0.685, InvestmentSignal.HIGHLY_FAVORABLE
        )

        assert impact.lifetime_co2_reduction_tons == pytest.approx(295.2)
        # 295.2 t × 45 trees/t
        assert impact.trees_equivalent == 13284
        assert impact.total_lifetime_savings == pytest.approx(2700000.0)
        assert impact.roi_multiple == pytest.approx(2700000 / 185000)
        assert impact.payback_vs_benchmark_pct == pytest.approx(
            (4.5 - 0.685) / 4.5 * 100
        )
        assert impact.beats_benchmark
        assert impact.recommendation == InvestmentSignal.HIGHLY_FAVORABLE.recommendation

    def test_impact_infinite_payback(
        self, calculator: KPICalculator, compressor_params: InputParameters
    ) -> None:
        """Infinite payback has no benchmark percentage."""
        energy = EnergyCostModel().calculate(compressor_params)
        impact = calculator.calculate_impact(
            compressor_params, energy, math.inf, InvestmentSignal.REVIEW_REQUIRED
        )

        assert impact.payback_vs_benchmark_pct is None
        assert not impact.beats_benchmark

    def test_custom_benchmarks(self, compressor_params: InputParameters) -> None:
        """Benchmark overrides change tree count and comparison."""
        calculator = KPICalculator(trees_per_ton_co2=10, industry_avg_payback_years=0.5)
        energy = EnergyCostModel().calculate(compressor_params)
        impact = calculator.calculate_impact(
            compressor_params, energy, 0.685, InvestmentSignal.HIGHLY_FAVORABLE
        )

        assert impact.trees_equivalent == 2952
        assert not impact.beats_benchmark
        assert impact.payback_vs_benchmark_pct < 0

    @pytest.mark.parametrize("benchmark", [0, -4.5])
    def test_non_positive_benchmark_rejected(self, benchmark: float) -> None:
        """The payback benchmark must be positive."""
        with pytest.raises(ValueError, match="industry_avg_payback_years"):
            KPICalculator(industry_avg_payback_years=benchmark)

    def test_negative_tree_factor_rejected(self) -> None:
        """Tree equivalents cannot be negative."""
        with pytest.raises(ValueError, match="trees_per_ton_co2"):
            KPICalculator(trees_per_ton_co2=-1)
