from typing import Dict, Iterable, List, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .finance import build_scenario_series
from .utils import BASE_COST_PER_HOUR, MONTHS, ScenarioConfig

BASELINE_LABEL = 'Without Spells'
PALETTE = [
    'rgb(75, 192, 192)',
    'rgb(255, 99, 132)',
    'rgb(255, 159, 64)',
    'rgb(153, 102, 255)',
    'rgb(54, 162, 235)',
]


def scenario_series_by_label(scenarios: Iterable[ScenarioConfig], historical_hours: Sequence[float],
                             predicted_hours: float,
                             base_rate: float = BASE_COST_PER_HOUR) -> Dict[str, List[float]]:
    out = {}
    for c in scenarios:
        label = f"With {c.spell.label} ({MONTHS[c.month]})"
        if label in out:
            # same spell and month chosen twice
            label = f"{label} #{c.id}"
        out[label] = build_scenario_series(historical_hours, predicted_hours, c.spell, c.month, base_rate)
    return out


def cost_table(baseline: Sequence[float], scenario_series: Dict[str, List[float]] = None) -> pd.DataFrame:
    """One row per month, one column per cost line, baseline first."""
    df = pd.DataFrame({'Month': list(MONTHS), BASELINE_LABEL: list(baseline)})
    for label, series in (scenario_series or {}).items():
        df[label] = list(series)
    return df


def cost_chart(df: pd.DataFrame, title: str = 'Monthly Journey Cost') -> go.Figure:
    lines = [c for c in df.columns if c != 'Month']
    fig = px.line(df, x='Month', y=lines, markers=True, title=title,
                  color_discrete_sequence=PALETTE)
    fig.update_traces(line_width=2, marker_size=8, hovertemplate='%{y} Gold Coins')
    fig.update_layout(
        hovermode='x unified',
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='left', x=0, title_text=''),
        xaxis_title='Month',
        yaxis_title='Gold Coins Spent',
    )
    fig.update_yaxes(rangemode='tozero')
    return fig
