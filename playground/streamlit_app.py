import streamlit as st

from playground.utils.charts import clamp, playground_chart
from playground.utils.config import INIT_MODES, PlaygroundConfig, load_config
from playground.utils.errors import ConfigError, PlaygroundError
from playground.utils.glossary import LANG_NAMES, METRIC_TOOLTIPS, t
from playground.utils.session import PlaygroundSession

st.set_page_config(page_title="OLS Playground", layout="wide")


@st.cache_resource(show_spinner=False)
def get_config() -> PlaygroundConfig:
    return load_config()


try:
    CFG = get_config()
except ConfigError as e:
    st.error(f"Invalid configuration: {e}")
    st.stop()


def nice(x: float, digits: int = 3) -> str:
    return str(round(float(x), digits))


# ---- Session wiring ----
# Widgets own their values in st.session_state; callbacks push them into the
# PlaygroundSession and pull the resulting candidate line back into the a/b sliders.
def _push_candidate(s: PlaygroundSession) -> None:
    a, b = s.candidate
    st.session_state["a"] = clamp(a, *CFG.a_slider)
    st.session_state["b"] = clamp(b, *CFG.b_slider)


def get_session() -> PlaygroundSession:
    if "playground" not in st.session_state:
        s = PlaygroundSession(
            CFG,
            n=clamp(CFG.default_n, *CFG.n_ui_range),
            noise_std=clamp(CFG.default_noise, *CFG.noise_range),
        )
        st.session_state["playground"] = s
        st.session_state["n"] = s.n
        st.session_state["noise"] = s.noise_std
        st.session_state["init_mode"] = s.init_mode
        _push_candidate(s)
    return st.session_state["playground"]


def on_resample():
    s = st.session_state["playground"]
    s.resample(n=st.session_state["n"], noise_std=st.session_state["noise"])
    _push_candidate(s)


def on_reset():
    s = st.session_state["playground"]
    s.reset()
    _push_candidate(s)


def on_init_mode():
    s = st.session_state["playground"]
    s.set_init_mode(st.session_state["init_mode"])
    _push_candidate(s)


def on_snap():
    s = st.session_state["playground"]
    s.snap_to_ols()
    _push_candidate(s)


def on_candidate():
    st.session_state["playground"].set_candidate(st.session_state["a"], st.session_state["b"])


try:
    session = get_session()
except PlaygroundError as e:
    st.warning(f"Could not build a dataset: {e}")
    st.stop()
st.session_state.setdefault("lang", CFG.default_lang)
st.session_state.setdefault("show_residuals", True)
st.session_state.setdefault("show_true_line", False)
st.session_state.setdefault("fixed_axes", False)

# ---- Header ----
with st.sidebar:
    lang = st.selectbox(
        t(st.session_state["lang"], "lang_label"),
        list(LANG_NAMES),
        format_func=lambda k: LANG_NAMES[k],
        key="lang",
    )
    st.caption(f"Config: `{CFG.source or 'defaults'}`")

st.title(t(lang, "title"))
st.write(t(lang, "header_desc"))
st.latex(r"\mathrm{SSE} = \sum_{i=1}^{n} \left(y_i - (a + b x_i)\right)^2")

chart_col, side_col = st.columns([2, 1])

# ---- Right column: true line, model, errors, settings ----
with side_col:
    with st.container(border=True):
        st.subheader(t(lang, "panel_true_line"))
        st.latex(r"y = a_0 + b_0 x")
        a0, b0 = session.true_line
        st.code(f"a0 = {nice(a0)}\nb0 = {nice(b0)}", language=None)
        st.button(t(lang, "reset"), key="reset", on_click=on_reset)

    with st.container(border=True):
        st.subheader(t(lang, "panel_model"))
        st.latex(r"y = a + b x")
        c1, c2 = st.columns(2)
        with c1:
            st.caption(t(lang, "card_current_line"))
            st.code(f"a = {nice(session.candidate.a)}\nb = {nice(session.candidate.b)}", language=None)
        with c2:
            st.caption(t(lang, "card_ols_line"))
            st.code(f"â = {nice(session.ols.a_hat)}\nb̂ = {nice(session.ols.b_hat)}", language=None)
        st.caption(t(lang, "color_coding_explanation"))

        st.markdown(f"**{t(lang, 'panel_params')}**")
        st.slider(t(lang, "label_intercept"), *map(float, CFG.a_slider), step=0.01, key="a", on_change=on_candidate)
        st.slider(t(lang, "label_slope"), *map(float, CFG.b_slider), step=0.01, key="b", on_change=on_candidate)
        st.button(t(lang, "snap_ols"), key="snap", on_click=on_snap, type="primary")

    snap = session.snapshot()
    with st.container(border=True):
        st.subheader(t(lang, "panel_errors"))
        m1, m2 = st.columns(2)
        m1.metric(t(lang, "sse_now"), nice(snap.sse, 4), help=METRIC_TOOLTIPS["SSE"])
        m2.metric(t(lang, "sse_min"), nice(snap.sse_min, 4), help=METRIC_TOOLTIPS["OLS"])
        m3, m4 = st.columns(2)
        m3.metric(t(lang, "mse_now"), nice(snap.mse, 4), help=METRIC_TOOLTIPS["MSE"])
        m4.metric(t(lang, "mse_min"), nice(snap.mse_min, 4))

    with st.container(border=True):
        st.subheader(t(lang, "panel_settings"))
        show_residuals = st.checkbox(
            t(lang, "show_residuals"), key="show_residuals", help=METRIC_TOOLTIPS["Residual"],
        )
        show_true_line = st.checkbox(
            t(lang, "show_true_line"), key="show_true_line", help=METRIC_TOOLTIPS["True line"],
        )
        fixed_axes = st.checkbox(
            t(lang, "fixed_axes"), key="fixed_axes",
            help=f"x: {list(CFG.fixed_x_domain)}, y: {list(CFG.fixed_y_domain)}",
        )
        st.slider(
            t(lang, "label_noise"), *map(float, CFG.noise_range), step=0.01,
            key="noise", on_change=on_resample,
        )
        st.slider(
            t(lang, "label_points"), *map(int, CFG.n_ui_range), step=1,
            key="n", on_change=on_resample,
        )
        st.radio(
            t(lang, "init_mode_label"),
            list(INIT_MODES),
            format_func=lambda m: t(lang, f"init_mode_{m}"),
            key="init_mode",
            on_change=on_init_mode,
            horizontal=True,
        )

# ---- Chart ----
with chart_col:
    st.subheader(t(lang, "chart_title"))
    chart = playground_chart(
        session.dataset,
        session.candidate.a,
        session.candidate.b,
        line_color=snap.color,
        true_line=session.true_line if show_true_line else None,
        show_residuals=show_residuals,
        fixed_axes=fixed_axes,
        fixed_x=CFG.fixed_x_domain,
        fixed_y=CFG.fixed_y_domain,
    )
    st.altair_chart(chart, use_container_width=True)

st.caption(t(lang, "about_the_app"))
