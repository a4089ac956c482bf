"""
Music Track Profitability Predictor - project ROI, break-even and fair price
for a track investment over 36 months.
"""

import logging
import streamlit as st
import plotly.graph_objects as go
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables (TRACK_PROJECTOR_SETTINGS may point at a settings file)
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path, override=True)

from src.config import settings
from src.models import ProjectionResult
from src.pricer import assessment_color, assessment_label, country_name, list_markets, market_tier
from src.track_projection import compute
from src.validation import ValidationError, build_request

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Track Profitability Predictor", page_icon="🎵", layout="wide", initial_sidebar_state="collapsed")

SCENARIO_OPTIONS = {
    "declining": "Decreasing Streams",
    "stable": "Stable Performance",
    "modest_growth": "Small Upside (1.25x peak)",
    "high_growth": "Big Upside (2.5x peak)",
}

DEFAULT_MARKETS = ["US", "DE", "GB"]
TABLE_MONTHS = 12

# CSS
st.markdown("""
<style>
#MainMenu, footer, header, .stDeployButton {visibility: hidden; display: none;}
.stApp {background-color: #000000;}
.main .block-container {padding-top: 2rem; padding-bottom: 2rem; max-width: 1100px;}
.page-title {font-size: 34px; font-weight: 700; color: #ffffff; margin-bottom: 4px;}
.page-subtitle {font-size: 14px; color: #8e8e93; margin-bottom: 20px;}
.stat-card {background-color: #1c1c1e; border-radius: 12px; padding: 16px; margin-bottom: 12px;}
.stat-label {font-size: 13px; color: #8e8e93; margin-bottom: 8px;}
.stat-value {font-size: 28px; font-weight: 600; color: #ffffff;}
.stat-change-positive {font-size: 13px; color: #34c759; margin-top: 4px;}
.stat-change-negative {font-size: 13px; color: #ff3b30; margin-top: 4px;}
.stat-change-neutral {font-size: 13px; color: #8e8e93; margin-top: 4px;}
.section-header {font-size: 20px; font-weight: 600; color: #ffffff; margin-top: 24px; margin-bottom: 12px;}
.pill {display: inline-block; padding: 4px 12px; border-radius: 999px; font-size: 13px; font-weight: 700; color: #000000;}
.stButton > button {background-color: #2c2c2e; color: #ffffff; border: none; border-radius: 8px; font-weight: 500;}
.stButton > button:hover {background-color: #3c3c3e;}
</style>
""", unsafe_allow_html=True)


def format_number(num):
    if num is None or num == 0:
        return "0"
    if abs(num) >= 1_000_000:
        return f"{num/1_000_000:.1f}M"
    if abs(num) >= 1_000:
        return f"{num/1_000:.1f}K"
    return f"{num:,.0f}"


def create_revenue_chart(result: ProjectionResult, height=320):
    """Cumulative revenue against the investment line."""
    df = result.to_dataframe()
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        name='Cumulative Revenue',
        x=df["month"],
        y=df["cumulative_revenue"],
        mode='lines',
        line=dict(color='#8b5cf6', width=2),
        fill='tozeroy',
        fillcolor='rgba(139, 92, 246, 0.15)',
        hovertemplate='Month %{x}<br>%{y:,.0f} DKK<extra></extra>'
    ))
    fig.add_trace(go.Scatter(
        name='Investment',
        x=df["month"],
        y=df["investment"],
        mode='lines',
        line=dict(color='#ef4444', width=2, dash='dash'),
        hovertemplate='Investment: %{y:,.0f} DKK<extra></extra>'
    ))
    fig.update_layout(
        height=height,
        margin=dict(l=0, r=0, t=30, b=30),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0, font=dict(color='#ffffff', size=11)),
        xaxis=dict(showgrid=False, showline=False, tickfont=dict(color='#8e8e93', size=10), title=dict(text='Month', font=dict(color='#8e8e93'))),
        yaxis=dict(showgrid=True, gridcolor='rgba(142,142,147,0.2)', showline=False, tickfont=dict(color='#8e8e93', size=10), tickformat=',.0f'),
        hovermode='x unified',
        hoverlabel=dict(bgcolor='#1c1c1e', font_size=12, font_color='#ffffff')
    )
    return fig


def create_platform_chart(result: ProjectionResult, height=300):
    """Pie chart of revenue by platform."""
    df = result.platform_dataframe()
    colors = ["#1DB954", "#ff0000", "#fc3c44", "#00f2ea", "#ff9900", "#8e8e93"]
    fig = go.Figure(go.Pie(
        labels=df["platform"],
        values=df["revenue"],
        marker=dict(colors=colors[:len(df)]),
        textinfo='label+percent',
        hovertemplate='%{label}: %{value:,.0f} DKK<extra></extra>'
    ))
    fig.update_layout(
        height=height,
        margin=dict(l=0, r=0, t=10, b=10),
        paper_bgcolor='rgba(0,0,0,0)',
        showlegend=False,
        font=dict(color='#ffffff')
    )
    return fig


def stat_card(label: str, value: str, note: str = "", note_class: str = "stat-change-neutral"):
    note_html = f'<div class="{note_class}">{note}</div>' if note else ""
    st.markdown(f'''<div class="stat-card">
        <div class="stat-label">{label}</div>
        <div class="stat-value">{value}</div>
        {note_html}
    </div>''', unsafe_allow_html=True)


def render_form():
    """Render the input form. Returns the submitted values or None."""
    st.markdown('<div class="section-header">Track Details</div>', unsafe_allow_html=True)
    markets = list_markets()
    engine_settings = settings.engine

    with st.form("track_form"):
        song_title = st.text_input("Song Title", placeholder="Enter song title")
        investment = st.number_input("Investment Amount (DKK)", min_value=0.0, value=50000.0, step=1000.0)
        genres = list(engine_settings.genre_multipliers)
        genre = st.selectbox("Genre", options=genres, index=0)
        daily_streams = st.number_input("Daily Spotify Streams", min_value=0, value=10000, step=500)
        selected_markets = st.multiselect(
            "Main Markets",
            options=list(markets),
            default=[m for m in DEFAULT_MARKETS if m in markets],
            format_func=lambda code: f"{code} - {country_name(code)} ({engine_settings.country_rates.get(code, engine_settings.default_market_rate):.3f})",
        )
        scenario = st.selectbox(
            "Growth Scenario",
            options=list(SCENARIO_OPTIONS),
            index=1,
            format_func=lambda key: SCENARIO_OPTIONS[key],
        )
        submitted = st.form_submit_button("Calculate Profitability", use_container_width=True)

    if selected_markets:
        tier = market_tier(selected_markets)
        st.markdown(f'<span class="pill" style="background-color: {tier.color}">{tier.label}</span>', unsafe_allow_html=True)

    if not submitted:
        return None
    return dict(
        investment=investment,
        genre=genre,
        daily_streams=daily_streams,
        markets=selected_markets,
        scenario=scenario,
        song_title=song_title,
    )


def render_results(result: ProjectionResult):
    """Render the projection results."""
    title = result.request.song_title or "Key Predictions"
    st.markdown(f'<div class="section-header">{title}</div>', unsafe_allow_html=True)

    col1, col2, col3 = st.columns(3)
    with col1:
        color = assessment_color(result.price_assessment)
        st.markdown(f'''<div class="stat-card">
            <div class="stat-label">Price Assessment</div>
            <span class="pill" style="background-color: {color}">{assessment_label(result.price_assessment)}</span>
        </div>''', unsafe_allow_html=True)
    with col2:
        stat_card("Suggested Price (2.5-3yr)", f"{result.suggested_price:,} DKK")
    with col3:
        if result.is_profitable:
            stat_card("Profitability", "Profitable", note_class="stat-change-positive", note="Investment recovered within 36 months")
        else:
            stat_card("Profitability", "Not Profitable", note_class="stat-change-negative", note="Investment not recovered within 36 months")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        break_even = f"{result.break_even_month} months" if result.break_even_month else "Over 36 months"
        stat_card("Break-even Time", break_even)
    with col2:
        if result.final_roi is None:
            stat_card("36-Month ROI", "N/A", note="No investment")
        else:
            roi_class = "stat-change-positive" if result.final_roi > 0 else "stat-change-negative"
            stat_card("36-Month ROI", f"{result.final_roi:.1f}%", note=f"Revenue: {format_number(result.final_revenue)} DKK", note_class=roi_class)
    with col3:
        stat_card("Spotify Rate (Avg)", f"{result.rates.effective_reference_rate:.4f}", note=f"Genre x{result.rates.genre_multiplier:.2f}")
    with col4:
        stat_card("Total Revenue/Stream", f"{result.rates.blended_rate:.4f}", note=f"{format_number(result.total_streams)} streams")

    st.markdown('<div class="section-header">Revenue Timeline</div>', unsafe_allow_html=True)
    st.plotly_chart(create_revenue_chart(result), use_container_width=True, config={'displayModeBar': False})

    st.markdown('<div class="section-header">Platform Revenue Distribution</div>', unsafe_allow_html=True)
    st.plotly_chart(create_platform_chart(result), use_container_width=True, config={'displayModeBar': False})

    st.markdown('<div class="section-header">Monthly Breakdown (First Year)</div>', unsafe_allow_html=True)
    df = result.to_dataframe().head(TABLE_MONTHS)
    df = df[["month", "streams", "revenue", "cumulative_revenue", "profit"]]
    df.columns = ["Month", "Streams", "Revenue", "Cumulative", "Profit"]
    st.dataframe(df, use_container_width=True, hide_index=True)


def main():
    st.markdown('<div class="page-title">Music Track Profitability Predictor</div>', unsafe_allow_html=True)
    st.markdown('<div class="page-subtitle">Predict ROI, break-even timeline, and profitability for music investments</div>', unsafe_allow_html=True)

    if "projection" not in st.session_state:
        st.session_state.projection = None

    form_col, result_col = st.columns([1, 2])
    with form_col:
        values = render_form()
        if values is not None:
            try:
                request = build_request(**values)
            except ValidationError as e:
                st.error(str(e))
                st.session_state.projection = None
            else:
                st.session_state.projection = compute(request)

    with result_col:
        if st.session_state.projection is not None:
            render_results(st.session_state.projection)


if __name__ == "__main__":
    main()
