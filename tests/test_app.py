"""
Test Suite: Streamlit page
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = Path(__file__).resolve().parent.parent / 'app.py'


class TestPage:

    @pytest.fixture
    def page(self):
        at = AppTest.from_file(str(APP), default_timeout=30)
        at.run()
        return at

    def test_renders_without_scenarios(self, page):
        assert not page.exception
        assert not page.success
        assert 'Recommendation Analysis' not in [h.value for h in page.subheader]

    def test_no_spell_scenario_shows_warning(self, page):
        page.button[0].click().run()
        assert not page.exception
        assert 'None of the current scenarios provide cost savings.' in [w.value for w in page.warning]

    def test_switching_spell_updates_recommendation(self, page):
        page.button[0].click().run()
        page.selectbox(key='spell_1').select_index(3).run()

        assert not page.exception
        assert page.success[0].value.startswith('Recommended: Both Spells in July')
        texts = [m.value for m in page.markdown]
        assert 'Investment Required: 42.00 gold coins' in texts
        assert 'Return on Investment: 18357.1%' in texts
