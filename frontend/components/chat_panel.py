# frontend/components/chat_panel.py
import streamlit as st
from datetime import datetime
import pandas as pd


def format_time(ts: int) -> str:
    if not ts:
        return ""
    return datetime.fromtimestamp(ts / 1000).strftime("%H:%M")


def transcript_frame(messages: list) -> pd.DataFrame:
    rows = [
        {
            "Hora": format_time(m.get("ts")),
            "Rol": "Alumno" if m["role"] == "user" else "Tutor",
            "Mensaje": m["content"],
        }
        for m in messages
    ]
    return pd.DataFrame(rows, columns=["Hora", "Rol", "Mensaje"])


def render_transcript(messages: list, is_sending: bool = False):
    if not messages:
        st.info("Todavia no hay mensajes. Inicia la conversacion o escribi la respuesta del alumno.")

    for m in messages:
        with st.chat_message(m["role"]):
            st.markdown(m["content"])
            st.caption(format_time(m.get("ts")))

    if is_sending:
        with st.chat_message("assistant"):
            st.markdown("_El tutor esta escribiendo..._")


def render_export(messages: list):
    if not messages:
        return
    csv = transcript_frame(messages).to_csv(index=False)
    st.download_button(
        label="Exportar conversacion (CSV)",
        data=csv,
        file_name=f"tutorneo_chat_{datetime.now().strftime('%Y%m%d_%H%M')}.csv",
        mime="text/csv",
        use_container_width=True
    )
