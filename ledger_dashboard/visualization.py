"""Plotly visualisation helpers for the Ledger Dashboard.

Each function accepts a pandas object produced by :mod:`reporting` or
:mod:`fixtures` (or engine results) and returns a
``plotly.graph_objects.Figure`` that Streamlit renders via
``st.plotly_chart``. Empty input yields an empty figure titled
"No data to display" rather than raising.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .models import BudgetStatus

STATUS_COLORS = {
    BudgetStatus.SAFE.value: "#10B981",
    BudgetStatus.WARNING.value: "#F59E0B",
    BudgetStatus.OVER.value: "#EF4444",
}
PRIMARY_COLOR = "#6366F1"


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_line_chart(aggregated: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Generate a line chart for a series indexed by period.

    Parameters
    ----------
    aggregated : pandas.DataFrame
        A DataFrame indexed by a period label (e.g. month) with a single
        numeric column.
    title : str, optional
        Chart title.  If ``None``, a default title is derived from
        the column name.

    Returns
    -------
    plotly.graph_objects.Figure
        Interactive line chart.
    """
    if aggregated.empty:
        return _empty_figure()
    numeric_col = aggregated.columns[0]
    df = aggregated.reset_index().rename(columns={aggregated.index.name or "index": "Period"})
    fig = px.line(df, x="Period", y=numeric_col, markers=True)
    fig.update_traces(line_color=PRIMARY_COLOR)
    fig.update_layout(
        title=title or f"{str(numeric_col).title()} over time",
        xaxis_title="Period",
        yaxis_title=str(numeric_col).title(),
    )
    return fig


def create_category_pie_chart(
    series: pd.Series,
    title: str | None = None,
    colors: Optional[Dict[str, str]] = None,
) -> go.Figure:
    """Generate a pie chart showing spending by category.

    Parameters
    ----------
    series : pandas.Series
        Series indexed by category with summed values.
    title : str, optional
        Title for the chart.
    colors : dict, optional
        Category to hex color mapping; unmapped categories use Plotly defaults.
    """
    if series.empty:
        return _empty_figure()
    df = series.reset_index()
    df.columns = ["Category", "Value"]
    fig = px.pie(
        df,
        names="Category",
        values="Value",
        color="Category",
        color_discrete_map=colors or {},
    )
    fig.update_traces(textinfo="label+percent")
    fig.update_layout(title=title or "Spending by category")
    return fig


def create_category_bar_chart(series: pd.Series, title: str | None = None) -> go.Figure:
    """Bar chart of a series indexed by label (category or weekday)."""
    if series.empty:
        return _empty_figure()
    df = series.reset_index()
    df.columns = ["Label", "Value"]
    fig = px.bar(df, x="Label", y="Value")
    fig.update_traces(marker_color=PRIMARY_COLOR)
    fig.update_layout(title=title or "Breakdown", xaxis_title="", yaxis_title="Amount")
    return fig


def create_grouped_bar_chart(
    frame: pd.DataFrame,
    columns: Sequence[str],
    title: str | None = None,
) -> go.Figure:
    """Grouped bars for several numeric columns per period (e.g. income vs expenses)."""
    present = [c for c in columns if c in frame.columns]
    if frame.empty or not present:
        return _empty_figure()
    df = frame.reset_index().rename(columns={frame.index.name or "index": "Period"})
    df["Period"] = df["Period"].astype(str)
    long_df = df.melt(id_vars="Period", value_vars=present, var_name="Series", value_name="Amount")
    fig = px.bar(long_df, x="Period", y="Amount", color="Series", barmode="group")
    fig.update_layout(title=title or "Comparison", xaxis_title="Period", yaxis_title="Amount")
    return fig


def create_comparison_line_chart(
    frame: pd.DataFrame,
    columns: Sequence[str] = ("current", "previous"),
    title: str | None = None,
) -> go.Figure:
    """One line per column across the index, for year-over-year comparison."""
    present = [c for c in columns if c in frame.columns]
    if frame.empty or not present:
        return _empty_figure()
    df = frame.reset_index().rename(columns={frame.index.name or "index": "Period"})
    long_df = df.melt(id_vars="Period", value_vars=present, var_name="Series", value_name="Amount")
    long_df["Series"] = long_df["Series"].str.title()
    fig = px.line(long_df, x="Period", y="Amount", color="Series", markers=True)
    fig.update_layout(title=title or "Year over year", xaxis_title="Period", yaxis_title="Amount")
    return fig


def create_budget_progress_chart(rows: Iterable[dict], title: str | None = None) -> go.Figure:
    """Horizontal bars of display percent per budget, colored by status.

    Each row needs ``category``, ``percent`` and ``status`` keys.
    """
    df = pd.DataFrame(list(rows))
    if df.empty:
        return _empty_figure()
    fig = go.Figure(
        go.Bar(
            x=df["percent"],
            y=df["category"],
            orientation="h",
            marker_color=[STATUS_COLORS.get(getattr(s, "value", s), PRIMARY_COLOR) for s in df["status"]],
            text=[f"{p}%" for p in df["percent"]],
            textposition="auto",
        )
    )
    fig.update_layout(
        title=title or "Budget utilisation",
        xaxis=dict(range=[0, 100], title="Percent of limit"),
        yaxis=dict(autorange="reversed"),
    )
    return fig
