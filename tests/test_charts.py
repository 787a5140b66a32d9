"""
Test Suite: chart data and figure
"""

from journey.charts import BASELINE_LABEL, PALETTE, cost_chart, cost_table, scenario_series_by_label
from journey.finance import build_baseline_series
from journey.spells import BOTH_SPELLS, TIRE_SPELL
from journey.utils import MONTHS, ScenarioConfig


class TestCharts:

    def test_series_labels(self, history, predicted):
        scenarios = [
            ScenarioConfig(id=1, spell=TIRE_SPELL, month=6),
            ScenarioConfig(id=2, spell=BOTH_SPELLS, month=8),
            ScenarioConfig(id=3, spell=TIRE_SPELL, month=6),
        ]
        series = scenario_series_by_label(scenarios, history, predicted)
        assert list(series) == [
            'With Tire Spell (July)',
            'With Both Spells (September)',
            'With Tire Spell (July) #3',
        ]
        assert all(len(s) == 12 for s in series.values())

    def test_table_baseline_only(self, history, predicted):
        df = cost_table(build_baseline_series(history, predicted))
        assert list(df.columns) == ['Month', BASELINE_LABEL]
        assert list(df['Month']) == list(MONTHS)
        assert df[BASELINE_LABEL].sum() == 75700

    def test_chart_has_one_line_per_series(self, history, predicted):
        scenarios = [ScenarioConfig(id=1, spell=BOTH_SPELLS, month=6)]
        df = cost_table(build_baseline_series(history, predicted),
                        scenario_series_by_label(scenarios, history, predicted))
        fig = cost_chart(df)

        assert [t.name for t in fig.data] == [BASELINE_LABEL, 'With Both Spells (July)']
        assert fig.data[0].line.color == PALETTE[0]
        assert fig.data[1].line.color == PALETTE[1]
        assert list(fig.data[1].y) == [2300, 4800, 4300, 2900, 5000, 10800, 6350] + [6308] * 5
        assert fig.layout.yaxis.title.text == 'Gold Coins Spent'
