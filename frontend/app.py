# frontend/app.py
import streamlit as st
from pathlib import Path
import sys

# Add project root to path
CURRENT_DIR = Path(__file__).parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from frontend.utils.api_client import APIClient, TutorAPIError
from frontend.utils.conversation import apply_turn_result, begin_turn, live_api_refusal, reset_conversation
from frontend.utils.local_state import LocalStateCell
from frontend.utils import defaults
from frontend.components.config_panel import render_prompt_form, render_student_form, render_task_form
from frontend.components.chat_panel import render_export, render_transcript
from frontend.components.evaluation_panel import render_evaluation

st.set_page_config(page_title="TutorNeo", layout="wide", initial_sidebar_state="expanded")


@st.cache_resource
def get_cells():
    return {
        "task_config": LocalStateCell(defaults.TASK_KEY, defaults.DEFAULT_TASK),
        "student": LocalStateCell(defaults.STUDENT_KEY, defaults.DEFAULT_STUDENT),
        "system_prompt": LocalStateCell(defaults.PROMPT_KEY, defaults.DEFAULT_PROMPT),
        "messages": LocalStateCell(defaults.MESSAGES_KEY, []),
        "evaluation": LocalStateCell(defaults.EVALUATION_KEY, None),
        "preferences": LocalStateCell(defaults.PREFERENCES_KEY, defaults.DEFAULT_PREFERENCES),
    }


CELLS = get_cells()


def persist(name: str, value):
    st.session_state[name] = value
    CELLS[name].save(value)


# ========================
# Session State Init (load every key once)
# ========================
if "hydrated" not in st.session_state:
    for name, cell in CELLS.items():
        st.session_state[name] = cell.load()
    st.session_state.hydrated = True
if "is_sending" not in st.session_state:
    st.session_state.is_sending = False
if "api_error" not in st.session_state:
    st.session_state.api_error = ""

prefs = {**defaults.DEFAULT_PREFERENCES, **(st.session_state.preferences or {})}

if prefs["theme"] == "dark":
    st.markdown(
        "<style>.stApp { background-color: #0f172a; color: #e2e8f0; }</style>",
        unsafe_allow_html=True,
    )

st.title("TutorNeo")
st.markdown("**Neo Sistema Educativo | revision conversacional de tareas**")

# ========================
# Sidebar
# ========================
with st.sidebar:
    st.header("Preferencias")
    use_live = st.toggle("Usar API en vivo", value=prefs["useLiveApi"])
    api_key = st.text_input("OpenAI API key", value=prefs["apiKey"], type="password",
                            help="Solo se usa si el servidor no tiene una configurada.")
    model = st.text_input("Modelo", value=prefs["model"])
    theme = st.radio("Tema", ["light", "dark"], index=0 if prefs["theme"] == "light" else 1, horizontal=True)

    updated = {**prefs, "useLiveApi": use_live, "apiKey": api_key, "model": model, "theme": theme}
    if updated != prefs:
        persist("preferences", updated)
        st.rerun()


def run_turn(history: list, start: bool = False):
    st.session_state.api_error = ""
    st.session_state.is_sending = True
    try:
        with st.spinner("El tutor esta pensando..."):
            data = APIClient.chat(
                history,
                st.session_state.system_prompt,
                prefs,
                task_config=st.session_state.task_config,
                student=st.session_state.student,
                start=start,
            )
        messages, evaluation = apply_turn_result(history, st.session_state.evaluation, data)
        persist("messages", messages)
        persist("evaluation", evaluation)
    except TutorAPIError as e:
        st.session_state.api_error = str(e)
    finally:
        st.session_state.is_sending = False


# ========================
# Main Panels
# ========================
col_config, col_chat, col_eval = st.columns([1, 2, 1])

with col_config:
    st.subheader("Configuracion")
    new_task = render_task_form(st.session_state.task_config)
    if new_task is not None:
        persist("task_config", new_task)
        st.rerun()

    new_student = render_student_form(st.session_state.student)
    if new_student is not None:
        persist("student", new_student)
        st.rerun()

    with st.expander("Prompt del sistema", expanded=False):
        new_prompt = render_prompt_form(st.session_state.system_prompt)
        if new_prompt is not None:
            persist("system_prompt", new_prompt)
            st.rerun()

with col_chat:
    st.subheader("Conversacion")
    b_start, b_reset = st.columns(2)
    if b_start.button("Iniciar conversacion", type="primary", use_container_width=True,
                      disabled=st.session_state.is_sending):
        refusal = live_api_refusal(prefs, starting=True)
        if refusal:
            st.session_state.api_error = refusal
        else:
            run_turn(st.session_state.messages, start=True)
        st.rerun()
    if b_reset.button("Reset chat", use_container_width=True):
        messages, evaluation = reset_conversation()
        persist("messages", messages)
        persist("evaluation", evaluation)
        st.session_state.api_error = ""
        st.rerun()

    render_transcript(st.session_state.messages, st.session_state.is_sending)

    if st.session_state.api_error:
        st.error(st.session_state.api_error)

    text = st.chat_input("Escribi la respuesta del alumno...", disabled=st.session_state.is_sending)
    if text:
        refusal = live_api_refusal(prefs)
        if refusal:
            st.session_state.api_error = refusal
        else:
            history = begin_turn(st.session_state.messages, text)
            if history is not None:
                persist("messages", history)
                run_turn(history)
        st.rerun()

    render_export(st.session_state.messages)

with col_eval:
    render_evaluation(st.session_state.evaluation)
