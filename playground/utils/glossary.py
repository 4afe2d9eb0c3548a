# Centralized UI strings (ja/en) and help text used across the app.

TRANSLATIONS = {
    "ja": {
        "title": "OLS（最小二乗法）探求アプリ",
        "lang_label": "Language",
        "header_desc": "真の直線にノイズを加えたデータに対して、モデル式のパラメーター a, b を調整して、2乗誤差 SSE を最小化してみましょう。",
        "chart_title": "散布図と直線",
        "panel_params": "パラメーター",
        "panel_errors": "2乗誤差（SSE）",
        "panel_model": "モデル式",
        "panel_table": "サンプルデータ",
        "panel_settings": "設定",
        "panel_true_line": "真の直線",
        "label_points": "データ数 n",
        "label_noise": "ノイズ強度 σ",
        "label_intercept": "切片 a",
        "label_slope": "傾き b",
        "sse_now": "現在の SSE",
        "sse_min": "最小 SSE (OLS)",
        "mse_now": "現在の MSE",
        "mse_min": "最小 MSE (OLS)",
        "card_current_line": "現在の線",
        "card_ols_line": "OLS（最小）",
        "color_coding_explanation": "直線の色は、OLSの直線に近いほど緑に、遠いほど赤くなっていきます。",
        "about_the_app": "Altair で散布図と直線を重ねて描画しています。",
        "snap_ols": "OLS にスナップ",
        "reset": "リセット (a0, b0)",
        "show_true_line": "真の直線を表示",
        "fixed_axes": "軸範囲を固定",
        "show_residuals": "残差（各点から予測線までの縦線）を表示",
        "init_mode_label": "初期化モード",
        "init_mode_ols": "OLS で 初期化",
        "init_mode_zero": "ゼロ で 初期化",
        "col_fitted": "予測値",
        "col_resid": "残差",
        "no_data": "データがありません。",
        "open_main_first": "先にメインページを開いてデータを生成してください。",
        "summary": "要約",
        "degenerate_warning": "すべての x が同じ値のため、OLS の傾きは 0 として表示しています。",
    },
    "en": {
        "title": "OLS Playground",
        "lang_label": "言語",
        "header_desc": "Given noisy samples from a hidden true line, adjust the model parameters a, b to minimize the sum of squared errors SSE.",
        "chart_title": "Scatter & Line",
        "panel_params": "Parameters",
        "panel_errors": "Squared Errors (SSE)",
        "panel_model": "Model",
        "panel_table": "Data",
        "panel_settings": "Settings",
        "panel_true_line": "True line",
        "label_points": "points n",
        "label_noise": "noise σ",
        "label_intercept": "intercept a",
        "label_slope": "slope b",
        "sse_now": "Current SSE",
        "sse_min": "Minimum SSE (OLS)",
        "mse_now": "Current MSE",
        "mse_min": "Minimum MSE (OLS)",
        "card_current_line": "Current line",
        "card_ols_line": "OLS (minimum)",
        "color_coding_explanation": "The color of the line becomes greener the closer it is to the OLS line, and redder the farther it is from the OLS line.",
        "about_the_app": "Altair is used to draw the scatter plot and lines.",
        "snap_ols": "Snap to OLS",
        "reset": "Reset (a0, b0)",
        "show_true_line": "Show true line",
        "fixed_axes": "Fix axes",
        "show_residuals": "Show residuals",
        "init_mode_label": "Initialization",
        "init_mode_ols": "Init with OLS",
        "init_mode_zero": "Init with zero",
        "col_fitted": "fitted",
        "col_resid": "residual",
        "no_data": "No data.",
        "open_main_first": "Open the main page first to generate a dataset.",
        "summary": "Summary",
        "degenerate_warning": "All x values are identical: the OLS slope is reported as 0.",
    },
}

LANG_NAMES = {"ja": "日本語", "en": "English"}

METRIC_TOOLTIPS = {
    "SSE": "Sum of squared errors: Σ (yᵢ − (a + b·xᵢ))².",
    "MSE": "Mean squared error = SSE / n.",
    "OLS": "Ordinary least squares: the line with the smallest possible SSE for this data.",
    "Residual": "Vertical distance yᵢ − ŷᵢ from a sample to the candidate line.",
    "True line": "The hidden line y = a0 + b0·x used to generate the noisy samples.",
}


def t(lang: str, key: str) -> str:
    return TRANSLATIONS.get(lang, {}).get(key) or TRANSLATIONS["en"].get(key) or key
