import logging

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from pva_predictor.config import APPLICATION_INFO, CELL_INFO, INPUT_DOMAINS, setup_logging
from pva_predictor.engine import ScaffoldPredictor
from pva_predictor.interpret import display_label, radar_profile, score_rating
from pva_predictor.models import InputDomainError


# --- Page Configuration ---
st.set_page_config(
    page_title="PVA Electrospinning Predictor",
    page_icon="🧬",
    layout="wide",
    initial_sidebar_state="expanded"
)

setup_logging()
logger = logging.getLogger(__name__)

# For a gradient background:
st.markdown("""
<style>
    .stApp {
        background: linear-gradient(to right, #E8F0FE, #D4E4FA);
    }
</style>
""", unsafe_allow_html=True)

# --- Custom CSS ---
st.markdown("""
    <style>
    :root {
        --primary-purple: #6B46C1;
        --accent-blue: #3182CE;
        --light-gray: #F7FAFC;
        --text-dark: #2D3748;
        --white: #FFFFFF;
    }

    .page-header {
        text-align: center;
        padding: 2rem 0;
        margin-bottom: 2rem;
        background: linear-gradient(135deg, var(--primary-purple), var(--accent-blue));
        color: var(--white);
        border-radius: 12px;
    }

    .header-title {
        font-size: 2rem;
        font-weight: 700;
        margin-bottom: 0.5rem;
    }

    .header-subtitle {
        font-size: 1.1rem;
        opacity: 0.9;
    }

    .metric-card {
        background: var(--white);
        border-radius: 12px;
        padding: 1.5rem;
        box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
        margin-bottom: 1rem;
        border-left: 4px solid var(--primary-purple);
    }

    .metric-title {
        color: var(--text-dark);
        font-size: 1.1rem;
        font-weight: 600;
        margin-bottom: 0.5rem;
    }

    .metric-value {
        font-size: 1.5rem;
        font-weight: 700;
        color: var(--primary-purple);
        margin-bottom: 0.5rem;
    }

    .metric-assessment {
        padding: 0.5rem 1rem;
        border-radius: 6px;
        font-size: 0.9rem;
        font-weight: 500;
    }

    .assessment-excellent {
        background-color: #C6F6D5;
        color: #22543D;
    }

    .assessment-good {
        background-color: #FEFCBF;
        color: #744210;
    }

    .assessment-fair {
        background-color: #FEEBC8;
        color: #7B341E;
    }

    .section-title {
        color: var(--text-dark);
        font-size: 1.5rem;
        font-weight: 600;
        margin: 2rem 0 1rem 0;
        padding-bottom: 0.5rem;
        border-bottom: 2px solid var(--light-gray);
    }
    </style>
    """, unsafe_allow_html=True)


ARCHITECTURE_CARDS = [
    ('fiber_diameter', 'Fiber Diameter', 'nm', '{:.0f}'),
    ('porosity', 'Porosity', '%', '{:.1f}'),
    ('pore_size', 'Pore Size', 'μm', '{:.1f}'),
    ('tensile_strength', 'Tensile Strength', 'MPa', '{:.1f}'),
    ('youngs_modulus', "Young's Modulus", 'MPa', '{:.0f}'),
    ('water_absorption', 'Water Absorption', '%', '{:.0f}'),
    ('contact_angle', 'Contact Angle', '°', '{:.1f}'),
    ('degradation_rate', 'Degradation Rate', '%/week', '{:.1f}'),
    ('swelling_ratio', 'Swelling Ratio', '%', '{:.1f}'),
]

BIOLOGY_CARDS = [
    ('cell_viability', 'Cell Viability', '%', '{:.1f}'),
    ('proliferation_time', 'Doubling Time', 'h', '{:.1f}'),
    ('gag_content', 'GAG Content', 'μg/mg', '{:.1f}'),
    ('col2_expression', 'Collagen II Expression', 'fold', '{:.2f}'),
    ('aggrecan_expression', 'Aggrecan Expression', 'fold', '{:.2f}'),
    ('col1_col2_ratio', 'Collagen I/II Ratio', '', '{:.2f}'),
]


def metric_card(title, value, assessment=None, rating=None):
    assessment_html = ""
    if assessment:
        assessment_html = f'<div class="metric-assessment assessment-{(rating or "good").lower()}">{assessment}</div>'
    return f"""
        <div class="metric-card">
            <div class="metric-title">{title}</div>
            <div class="metric-value">{value}</div>
            {assessment_html}
        </div>
    """


def render_cards(record, cards, n_cols=3):
    cols = st.columns(n_cols)
    for idx, (attr, title, unit, fmt) in enumerate(cards):
        with cols[idx % n_cols]:
            value = fmt.format(getattr(record, attr))
            st.markdown(metric_card(title, f"{value} {unit}".strip()), unsafe_allow_html=True)


def render_score_cards(scores, info, n_cols=3):
    cols = st.columns(n_cols)
    for idx, (name, score) in enumerate(scores.items()):
        rating = score_rating(score)
        details = info[name]
        with cols[idx % n_cols]:
            st.markdown(
                metric_card(details['label'], f"{score:.0f}", rating, rating),
                unsafe_allow_html=True,
            )
            st.progress(int(round(score)))
            if 'requirements' in details:
                st.caption(" • ".join(details['requirements']))
            else:
                st.caption(f"Optimal: {details['optimal']} • {details['application']} • {details['notes']}")


def plot_mw_trend(df, column, title, y_label, color):
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df['mw_kda'], y=df[column], mode='lines+markers',
                             line=dict(color=color, width=2), name=title))
    fig.update_layout(title=title, xaxis_title='Molecular Weight (kDa)', yaxis_title=y_label,
                      template='plotly_white', height=320)
    return fig


def plot_mechanical_trend(df):
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df['mw_kda'], y=df['tensile_strength'], mode='lines+markers',
                             line=dict(color='#ef4444'), name='Tensile Strength (MPa)'))
    fig.add_trace(go.Scatter(x=df['mw_kda'], y=df['youngs_modulus'], mode='lines+markers',
                             line=dict(color='#8b5cf6'), name="Young's Modulus (MPa)", yaxis='y2'))
    fig.update_layout(title='Mechanical Properties vs MW', xaxis_title='Molecular Weight (kDa)',
                      yaxis=dict(title='Tensile Strength (MPa)'),
                      yaxis2=dict(title="Young's Modulus (MPa)", overlaying='y', side='right'),
                      template='plotly_white', height=320)
    return fig


def plot_tradeoff(df):
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df['pore_size'], y=df['tensile_strength'], mode='markers+text',
        text=[f"{mw:.0f}k" for mw in df['mw_kda']], textposition='top center',
        marker=dict(size=np.where(df['current'], 16, 8),
                    color=np.where(df['current'], '#ef4444', '#8b5cf6')),
        name='MW Range',
    ))
    fig.update_layout(title='Trade-off: Tensile Strength vs Pore Size', xaxis_title='Pore Size (μm)',
                      yaxis_title='Tensile Strength (MPa)', template='plotly_white', height=320)
    return fig


def plot_radar(df):
    fig = go.Figure(go.Scatterpolar(r=df['value'], theta=df['property'], fill='toself',
                                    line=dict(color='#8b5cf6'), name='Properties'))
    fig.update_layout(polar=dict(radialaxis=dict(range=[0, 100])), height=320, showlegend=False)
    return fig


def plot_scores_bar(labels, values, color, title):
    fig = go.Figure(go.Bar(x=labels, y=values, marker_color=color))
    fig.update_layout(title=title, yaxis=dict(range=[0, 100]), template='plotly_white', height=320)
    return fig


def plot_degradation_profile(df):
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.fill_between(df['week'], df['mass_remaining'], alpha=0.4, color='#ef4444', label='Mass Remaining')
    ax.fill_between(df['week'], df['mechanical_retention'], alpha=0.4, color='#3b82f6', label='Mechanical Retention')
    ax.fill_between(df['week'], df['cell_infiltration'], alpha=0.4, color='#10b981', label='Cell Infiltration')

    ax.set_xlabel('Week')
    ax.set_ylabel('%')
    ax.set_title('Biodegradation Temporal Profile')
    ax.set_xlim(0, df['week'].max())
    ax.set_ylim(0, 105)
    ax.grid(True)
    ax.legend()

    return fig


def sidebar_inputs():
    st.sidebar.title("Processing Parameters")
    st.sidebar.caption("Adjust electrospinning conditions")
    values = {}
    for name, domain in INPUT_DOMAINS.items():
        values[name] = st.sidebar.slider(
            domain['label'],
            min_value=domain['min'],
            max_value=domain['max'],
            value=domain['default'],
            step=domain['step'],
            key=name,
        )
    return values


def predictor_tab(prediction, summary):
    arch = prediction.architecture
    if summary['concentration_warning']:
        st.warning(summary['concentration_warning'])

    st.markdown('<div class="section-title">Predicted Scaffold Properties</div>', unsafe_allow_html=True)
    st.caption("Stage 1: Process-to-Architecture")
    st.info(f"Morphology: {summary['morphology']}")
    render_cards(arch, ARCHITECTURE_CARDS)

    st.markdown('<div class="section-title">Clinical Application Suitability</div>', unsafe_allow_html=True)
    render_score_cards(prediction.application_scores, APPLICATION_INFO)


def biomedical_tab(prediction, summary):
    biology = prediction.biology
    lineage = biology.msc_lineage

    st.markdown('<div class="section-title">Stage 2: Architecture-to-Biology Predictions</div>',
                unsafe_allow_html=True)
    render_cards(biology, BIOLOGY_CARDS)

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(plot_scores_bar(
            ['Neurogenic', 'Chondrogenic', 'Osteogenic'],
            [lineage.neurogenic_score, lineage.chondrogenic_score, lineage.osteogenic_score],
            '#8b5cf6', 'MSC Differentiation Potential',
        ))
        st.write(
            f"Current stiffness ({prediction.architecture.youngs_modulus:.0f} MPa) promotes "
            f"**{summary['msc_lineage']}** differentiation"
        )
    with col2:
        st.markdown(metric_card("Burst Release (24 h)", f"{biology.burst_release:.1f} %"), unsafe_allow_html=True)
        st.markdown(metric_card("Sustained Release", f"{biology.sustained_duration:.1f} days"),
                    unsafe_allow_html=True)
        st.info(summary['drug_release'])

    cells = prediction.cell_scores
    st.plotly_chart(plot_scores_bar(
        [CELL_INFO[name]['label'] for name in cells], list(cells.values()),
        '#10b981', 'Cell Compatibility',
    ))

    fig = plot_degradation_profile(prediction.degradation_profile)
    st.pyplot(fig)
    plt.close(fig)

    st.markdown('<div class="section-title">Cell Type Recommendations</div>', unsafe_allow_html=True)
    render_score_cards(cells, CELL_INFO)


def analysis_tab(prediction):
    df = prediction.mw_comparison
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(plot_mw_trend(df, 'fiber_diameter', 'Fiber Diameter vs MW', 'Fiber Diameter (nm)',
                                      '#3b82f6'))
        st.plotly_chart(plot_mechanical_trend(df))
        st.plotly_chart(plot_tradeoff(prediction.tradeoff))
    with col2:
        st.plotly_chart(plot_mw_trend(df, 'porosity', 'Porosity vs MW', 'Porosity (%)', '#10b981'))
        st.plotly_chart(plot_mw_trend(df, 'degradation_rate', 'Degradation Rate vs MW',
                                      'Degradation Rate (%/week)', '#f59e0b'))
        st.plotly_chart(plot_radar(radar_profile(prediction.architecture)))

    with st.expander("MW comparison table"):
        st.dataframe(df.round(1).rename(columns=display_label))


def cascade_tab(prediction, summary):
    arch = prediction.architecture
    biology = prediction.biology
    st.info(
        "PVA molecular weight acts as a foundational constraint: it defines the processing "
        "landscape and dictates scaffold architecture, dynamics, and biological function."
    )
    window = arch.concentration_window
    levels = pd.DataFrame([
        ("1. MW Selection", f"{prediction.inputs.molecular_weight / 1000:.0f}k Da"),
        ("2. Spinnable Window", f"{window.min_concentration:g}-{window.max_concentration:g} wt%"),
        ("3. Jet Stability", "In window" if window.in_window else "Outside window"),
        ("4. Nanofiber Morphology", f"{arch.fiber_diameter:.0f} nm, {summary['morphology']}"),
        ("5. Scaffold Architecture", f"{arch.porosity:.1f}% porosity, {arch.pore_size:.1f} μm pores"),
        ("6. Dynamic Behavior", f"{arch.degradation_rate:.1f} %/week degradation"),
        ("7. Cellular Response", f"{biology.cell_viability:.1f}% viability, {summary['msc_lineage']}"),
        ("8. Biomedical Function",
         f"Best application: {summary['best_application']} ({summary['best_application_rating']}); "
         f"best cell type: {summary['best_cell']} ({summary['best_cell_rating']})"),
    ], columns=["Level", "Current Value"])
    st.table(levels)


def about_tab():
    st.markdown("""
        **Stage 1: Process-to-Architecture.** Predicts fiber diameter, porosity, pore size,
        tensile strength, Young's modulus, water absorption, contact angle, degradation rate
        and swelling ratio from molecular weight (30k-200k Da), concentration (5-20 wt%),
        voltage (10-25 kV), flow rate (0.5-3.0 mL/h) and distance (10-25 cm).

        **Stage 2: Architecture-to-Biology.** Predicts cell viability, proliferation,
        GAG content, collagen II and aggrecan expression, MSC lineage and drug release kinetics.

        Predictions are empirical formulas calibrated by hand to literature reference points.
        They are for research and educational purposes; experimental validation is required.

        **References**
        - Türkoğlu et al. (2024) PVA-Based Electrospun Materials Review. *Int. J. Mol. Sci.* 25.
        - Teixeira et al. (2019) PVA scaffolds for tissue engineering. *Polymers*.
        - Roldán et al. (2024) ML prediction of fiber diameter. *Sci. Rep.*
        - Chinnappan et al. (2022) Electrospinning process parameters effects. *Polymers* 14.
    """)


# --- Main App ---
def main_app():
    st.markdown("""
        <div class="page-header">
            <div class="header-title">PVA Electrospinning Predictor</div>
            <div class="header-subtitle">Biomedical Scaffold Property and Outcome Estimates</div>
        </div>
    """, unsafe_allow_html=True)

    values = sidebar_inputs()
    predictor = ScaffoldPredictor()
    try:
        prediction = predictor.predict(**values)
    except InputDomainError as e:
        logger.error(f"Prediction failed: {e}", exc_info=True)
        st.error(str(e))
        return
    summary = predictor.interpret(prediction)

    tab1, tab2, tab3, tab4, tab5 = st.tabs(["Predictor", "Biomedical", "Analysis", "MW Cascade", "About"])
    with tab1:
        predictor_tab(prediction, summary)
    with tab2:
        biomedical_tab(prediction, summary)
    with tab3:
        analysis_tab(prediction)
    with tab4:
        cascade_tab(prediction, summary)
    with tab5:
        about_tab()


# --- Run App ---
main_app()
