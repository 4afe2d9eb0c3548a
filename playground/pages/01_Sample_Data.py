import streamlit as st

from playground.utils.glossary import t
from playground.utils.metrics import residuals

st.set_page_config(page_title="Sample Data", layout="wide")

lang = st.session_state.get("lang", "ja")
st.title(t(lang, "panel_table"))

if "playground" not in st.session_state:
    st.info(t(lang, "open_main_first"))
    st.stop()

session = st.session_state["playground"]
ds = session.dataset
if ds is None or ds.n == 0:
    st.info(t(lang, "no_data"))
    st.stop()

a, b = session.candidate
df = ds.to_frame()
df["y_hat"] = a + b * df["x"]
df["resid"] = residuals(ds, a, b)
df.index = range(1, len(df) + 1)
df.index.name = "#"

st.caption(f"n = {ds.n}  ·  a = {a:.3f}, b = {b:.3f}")
st.dataframe(
    df.round(4).rename(columns={"y_hat": t(lang, "col_fitted"), "resid": t(lang, "col_resid")}),
    use_container_width=True,
)

# ---- Summary ----
with st.expander(t(lang, "summary"), expanded=False):
    c1, c2, c3 = st.columns(3)
    c1.metric("mean(x)", f"{df['x'].mean():.4f}")
    c2.metric("mean(y)", f"{df['y'].mean():.4f}")
    c3.metric("R² (OLS)", f"{session.ols.r2:.3f}")
    if session.ols.degenerate:
        st.warning(t(lang, "degenerate_warning"))
