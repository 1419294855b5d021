# frontend/components/evaluation_panel.py
from datetime import datetime

import streamlit as st
import plotly.graph_objects as go

APPROVED = "Aprobado"


def render_score_gauge(score: int):
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        number={"suffix": "%"},
        gauge={
            "axis": {"range": [0, 100]},
            "bar": {"color": "deepskyblue"},
            "steps": [
                {"range": [0, 60], "color": "rgba(255, 193, 7, 0.25)"},
                {"range": [60, 100], "color": "rgba(16, 185, 129, 0.25)"},
            ],
        },
    ))
    fig.update_layout(height=220, margin=dict(l=20, r=20, t=30, b=10))
    st.plotly_chart(fig, use_container_width=True)


def render_evaluation(evaluation: dict):
    st.subheader("Evaluacion")
    if not evaluation:
        st.info("La evaluacion aparecera despues de la primera respuesta del tutor.")
        st.progress(0)
        return

    status = evaluation.get("status")
    if status == APPROVED:
        st.success(f"**Estado:** {status}")
    else:
        st.warning(f"**Estado:** {status or 'En proceso'}")

    render_score_gauge(evaluation.get("score", 0))

    st.markdown("**Conceptos debiles**")
    weak = evaluation.get("weakConcepts") or []
    if weak:
        for concept in weak:
            st.markdown(f"• {concept}")
    else:
        st.caption("Sin conceptos debiles detectados.")

    st.markdown("**Siguientes pasos**")
    actions = evaluation.get("nextActions") or []
    if actions:
        for i, action in enumerate(actions, start=1):
            st.markdown(f"{i}. {action}")
    else:
        st.caption("Sin acciones sugeridas.")

    if evaluation.get("summary"):
        st.markdown("**Resumen**")
        st.write(evaluation["summary"])

    updated_at = evaluation.get("updatedAt")
    if updated_at:
        st.caption(f"Actualizado {datetime.fromtimestamp(updated_at / 1000).strftime('%H:%M')}")
