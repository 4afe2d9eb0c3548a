"""
E2E smoke: drives the Streamlit script headlessly with AppTest and checks that
controls flow through the session (resample vs reset, snap, language).
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from playground.utils.config import PlaygroundConfig
from playground.utils.dataset import Dataset
from playground.utils.glossary import t
from playground.utils.ols import fit
from playground.utils.random_source import NumpyRandomSource
from playground.utils.session import PlaygroundSession

APP = Path(__file__).resolve().parents[2] / "playground" / "streamlit_app.py"


def run_app() -> AppTest:
    at = AppTest.from_file(str(APP), default_timeout=30)
    at.run()
    assert not at.exception, f"App raised: {at.exception}"
    return at


@pytest.mark.order(1)
def test_app_renders_with_default_state():
    at = run_app()
    s = at.session_state["playground"]
    assert s.dataset.n == at.session_state["n"]
    assert s.true_line is not None
    assert len(at.metric) == 4


@pytest.mark.order(2)
def test_snap_to_ols_turns_error_to_minimum():
    at = run_app()
    at.button(key="snap").click().run()
    assert not at.exception
    s = at.session_state["playground"]
    assert s.candidate == (s.ols.a_hat, s.ols.b_hat)
    snap = s.snapshot()
    assert snap.sse == pytest.approx(snap.sse_min)
    assert snap.hue == pytest.approx(120.0)


@pytest.mark.order(3)
def test_changing_n_resamples_but_keeps_true_line():
    at = run_app()
    line = at.session_state["playground"].true_line
    at.slider(key="n").set_value(10).run()
    assert not at.exception
    s = at.session_state["playground"]
    assert s.dataset.n == 10
    assert s.true_line == line


@pytest.mark.order(4)
def test_reset_draws_a_new_true_line():
    at = run_app()
    line = at.session_state["playground"].true_line
    at.button(key="reset").click().run()
    assert not at.exception
    assert at.session_state["playground"].true_line != line


@pytest.mark.order(5)
def test_language_switch():
    at = run_app()
    at.selectbox(key="lang").set_value("en").run()
    assert not at.exception
    assert at.title[0].value == "OLS Playground"


SAMPLE_PAGE = APP.parent / "pages" / "01_Sample_Data.py"


@pytest.mark.order(6)
def test_sample_page_without_session_asks_for_main_page():
    at = AppTest.from_file(str(SAMPLE_PAGE), default_timeout=30)
    at.session_state["lang"] = "en"
    at.run()
    assert not at.exception
    assert at.info[0].value == t("en", "open_main_first")


@pytest.mark.order(7)
def test_sample_page_lists_samples_and_flags_constant_x():
    s = PlaygroundSession(PlaygroundConfig(), rng=NumpyRandomSource(8), n=15)
    at = AppTest.from_file(str(SAMPLE_PAGE), default_timeout=30)
    at.session_state["lang"] = "en"
    at.session_state["playground"] = s
    at.run()
    assert not at.exception
    assert len(at.dataframe) == 1
    assert len(at.dataframe[0].value) == 15
    assert len(at.warning) == 0

    s.dataset = Dataset.from_points([(0.1, 0.1), (0.1, 0.2), (0.1, 0.7)])
    s.ols = fit(s.dataset)
    at.run()
    assert not at.exception
    assert at.warning[0].value == t("en", "degenerate_warning")
