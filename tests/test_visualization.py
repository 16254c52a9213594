import pandas as pd
import plotly.graph_objects as go

from ledger_dashboard.fixtures import load_seed
from ledger_dashboard.models import BudgetStatus
from ledger_dashboard.reporting import category_series, monthly_breakdown
from ledger_dashboard.visualization import (
    STATUS_COLORS,
    create_budget_progress_chart,
    create_category_bar_chart,
    create_category_pie_chart,
    create_comparison_line_chart,
    create_grouped_bar_chart,
    create_line_chart,
)


def test_empty_inputs_return_placeholder_figure() -> None:
    for fig in (
        create_line_chart(pd.DataFrame()),
        create_category_pie_chart(pd.Series(dtype=float)),
        create_category_bar_chart(pd.Series(dtype=float)),
        create_grouped_bar_chart(pd.DataFrame(), ["Income"]),
        create_budget_progress_chart([]),
    ):
        assert isinstance(fig, go.Figure)
        assert fig.layout.title.text == "No data to display"


def test_seed_charts() -> None:
    seed = load_seed()
    line = create_line_chart(seed.monthly_spending, title="Monthly Spending")
    assert line.layout.title.text == "Monthly Spending"
    assert list(line.data[0].x) == ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul"]

    pie = create_category_pie_chart(category_series(seed.expenses), colors=seed.category_colors)
    assert len(pie.data) == 1

    yearly = create_comparison_line_chart(seed.yearly_comparison)
    assert {trace.name for trace in yearly.data} == {"Current", "Previous"}

    grouped = create_grouped_bar_chart(monthly_breakdown(seed.transactions), ["Income", "Expenses"])
    assert {trace.name for trace in grouped.data} == {"Income", "Expenses"}


def test_budget_progress_chart_colors_by_status() -> None:
    fig = create_budget_progress_chart([
        {"category": "Shopping", "percent": 100, "status": BudgetStatus.OVER},
        {"category": "Utilities", "percent": 84, "status": "warning"},
    ])
    assert list(fig.data[0].marker.color) == [STATUS_COLORS["over"], STATUS_COLORS["warning"]]
