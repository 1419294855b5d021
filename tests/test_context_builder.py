"""Tests for the per-turn model input."""

from backend.app.agents.agent_prompts.tutor_prompt import FORMAT_INSTRUCTIONS, START_INSTRUCTION
from backend.app.core.context_builder import build_context, build_model_input
from backend.app.schemas.chat_schemas import IncomingMessage, StudentProfile, TaskConfig


def test_context_lists_fields_with_placeholders():
    context = build_context(TaskConfig(topic="Ciclo del agua", durationMin="10"), StudentProfile(name="Sofia R."))
    assert context.split("\n") == [
        "Contexto de tarea:",
        "- Tema: Ciclo del agua",
        "- Objetivo: N/D",
        "- Materia: N/D",
        "- Grado: N/D",
        "- Duracion estimada: 10 min",
        "Perfil del alumno:",
        "- Nombre: Sofia R.",
        "- Edad: N/D",
        "- Curso: N/D",
        "- Fortalezas: N/D",
        "- Dificultades: N/D",
    ]


def test_absent_config_renders_only_headers():
    assert build_context() == "Contexto de tarea:\nPerfil del alumno:"


def test_absent_student_keeps_task_lines():
    context = build_context(TaskConfig(topic="Ciclo del agua"))
    assert context.endswith("- Duracion estimada: N/D min\nPerfil del alumno:")


def test_present_but_empty_objects_get_placeholders():
    assert build_context(TaskConfig(), StudentProfile()).count("N/D") == 10


def test_empty_string_is_not_replaced():
    assert "- Tema: \n" in build_context(TaskConfig(topic=""))


def test_segment_order_with_prompt_and_start():
    history = [
        IncomingMessage(role="assistant", content="¿Qué es la evaporación?"),
        IncomingMessage(role="user", content="Cuando el agua se calienta"),
    ]
    segments = build_model_input(history, system_prompt="  Sos un tutor.  ", start=True)

    assert [s["content"] for s in segments[:4]] == [
        "Sos un tutor.",
        build_context(),
        START_INSTRUCTION,
        FORMAT_INSTRUCTIONS,
    ]
    assert all(s["role"] == "system" for s in segments[:4])
    assert segments[4:] == [
        {"role": "assistant", "content": "¿Qué es la evaporación?"},
        {"role": "user", "content": "Cuando el agua se calienta"},
    ]


def test_blank_prompt_and_no_start_are_skipped():
    segments = build_model_input([], system_prompt="   ")
    assert [s["content"] for s in segments] == [build_context(), FORMAT_INSTRUCTIONS]


def test_output_is_deterministic():
    args = dict(system_prompt="P", task=TaskConfig(topic="T"), student=StudentProfile(age="10"), start=True)
    assert build_model_input(**args) == build_model_input(**args)
