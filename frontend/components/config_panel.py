# frontend/components/config_panel.py
import streamlit as st

TASK_FIELDS = [
    ("topic", "Tema"),
    ("objective", "Objetivo"),
    ("subject", "Materia"),
    ("grade", "Grado"),
    ("durationMin", "Duracion (min)"),
]

STUDENT_FIELDS = [
    ("name", "Nombre"),
    ("age", "Edad"),
    ("course", "Curso"),
    ("strengths", "Fortalezas"),
    ("challenges", "Dificultades"),
]


def _draft_form(form_key: str, fields: list, saved: dict):
    """Edit a copy of `saved`. Returns the new dict when applied, else None."""
    widget_keys = {name: f"{form_key}_{name}" for name, _ in fields}

    with st.form(form_key):
        draft = {
            name: st.text_input(label, value=saved.get(name, ""), key=widget_keys[name])
            for name, label in fields
        }
        col_apply, col_discard = st.columns(2)
        applied = col_apply.form_submit_button("Aplicar", type="primary", use_container_width=True)
        discarded = col_discard.form_submit_button("Descartar", use_container_width=True)

    if discarded:
        for key in widget_keys.values():
            st.session_state.pop(key, None)
        st.rerun()
    if applied:
        return {**saved, **draft}
    return None


def render_task_form(task: dict):
    st.markdown("**Tarea**")
    return _draft_form("task_form", TASK_FIELDS, task)


def render_student_form(student: dict):
    st.markdown("**Perfil del alumno**")
    return _draft_form("student_form", STUDENT_FIELDS, student)


def render_prompt_form(prompt: str):
    st.markdown("**Prompt del sistema**")
    with st.form("prompt_form"):
        text = st.text_area("Instrucciones para el tutor", value=prompt, height=180,
                            label_visibility="collapsed")
        if st.form_submit_button("Guardar prompt", use_container_width=True):
            return text
    return None
