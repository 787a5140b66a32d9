import logging
import os
import streamlit as st
from journey.utils import CURRENCY, INITIAL_DRIVING_HOURS, MONTHS, FIRST_SPELL_MONTH
from journey.finance import build_baseline_series, journey_summary, predict_future_usage
from journey.optimize import select_best_scenario
from journey.scenarios import ScenarioBook
from journey.spells import SPELL_OPTIONS, get_spell
from journey.charts import cost_chart, cost_table, scenario_series_by_label
from journey.validation import InvalidInputError

logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO'), format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Dorothy's Magical Journey Cost Analysis", layout='centered')
st.title("Dorothy's Magical Journey Cost Analysis")

if 'book' not in st.session_state:
    st.session_state.book = ScenarioBook()
book = st.session_state.book

try:
    predicted = predict_future_usage(INITIAL_DRIVING_HOURS)
except InvalidInputError as e:
    logger.warning('Prediction failed: %s', e)
    st.error('Error: Unable to predict driving hours')
    predicted = 0

if st.button('Add New Spell Scenario'):
    book.add()

spell_keys = list(SPELL_OPTIONS)
spell_months = list(range(FIRST_SPELL_MONTH, len(MONTHS)))

for config in book.scenarios():
    with st.container(border=True):
        col1, col2 = st.columns(2)
        with col1:
            key = st.selectbox('Select Magical Spell:', spell_keys,
                               index=spell_keys.index(config.spell.key),
                               format_func=lambda k: get_spell(k).label,
                               key=f'spell_{config.id}')
            st.caption(get_spell(key).description)
        with col2:
            month = st.selectbox('Select Spell Month:', spell_months,
                                 index=spell_months.index(config.month),
                                 format_func=lambda m: MONTHS[m],
                                 key=f'month_{config.id}')
            remove = st.button('Remove Spell', key=f'remove_{config.id}')
        if remove:
            book.remove(config.id)
            st.rerun()
        book.update(config.id, get_spell(key), month)

baseline = build_baseline_series(INITIAL_DRIVING_HOURS, predicted)
try:
    scenario_series = scenario_series_by_label(book, INITIAL_DRIVING_HOURS, predicted)
    recommendation = select_best_scenario(book, INITIAL_DRIVING_HOURS, predicted)
    summary = journey_summary(book, INITIAL_DRIVING_HOURS, predicted)
except InvalidInputError as e:
    # fall back to the no-spell line only
    logger.warning('Scenario projection failed: %s', e)
    st.error('Error: Failed to project spell scenarios')
    scenario_series, recommendation = {}, None
    summary = journey_summary([], INITIAL_DRIVING_HOURS, predicted)

if recommendation is not None:
    st.subheader('Recommendation Analysis')
    if recommendation.saves_money:
        best = recommendation.best
        st.success(recommendation.message)
        st.write(f"Investment Required: {best.investment:.2f} {CURRENCY}")
        st.write(f"Return on Investment: {best.roi:.1f}%" if best.roi is not None
                 else 'Return on Investment: n/a')
    else:
        st.warning(recommendation.message)

df = cost_table(baseline, scenario_series)
st.plotly_chart(cost_chart(df), use_container_width=True)

st.subheader('Journey Cost Summary')
col1, col2, col3 = st.columns(3)
col1.metric('Cost Without Spells', f"{summary['baseline_total']:,.2f}")
col2.metric('Cost With Selected Spells', f"{summary['selected_total']:,.2f}")
col3.metric('Total Savings', f"{summary['total_savings']:,.2f}")
st.write(f"Risk Assessment: {summary['risk_assessment']}")

with st.expander('Monthly Costs'):
    st.dataframe(df, use_container_width=True)
