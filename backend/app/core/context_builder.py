# backend/app/core/context_builder.py
from typing import Dict, List, Optional, Sequence

from backend.app.agents.agent_prompts.tutor_prompt import (
    FORMAT_INSTRUCTIONS,
    MISSING_FIELD,
    START_INSTRUCTION,
)
from backend.app.schemas.chat_schemas import IncomingMessage, StudentProfile, TaskConfig


def _field(value: Optional[str]) -> str:
    # Only absent values get the sentinel; an empty string is passed through
    return MISSING_FIELD if value is None else value


def build_context(task: Optional[TaskConfig] = None, student: Optional[StudentProfile] = None) -> str:
    # An absent object contributes only its header
    lines = ["Contexto de tarea:"]
    if task is not None:
        lines.append(f"- Tema: {_field(task.topic)}")
        lines.append(f"- Objetivo: {_field(task.objective)}")
        lines.append(f"- Materia: {_field(task.subject)}")
        lines.append(f"- Grado: {_field(task.grade)}")
        lines.append(f"- Duracion estimada: {_field(task.durationMin)} min")

    lines.append("Perfil del alumno:")
    if student is not None:
        lines.append(f"- Nombre: {_field(student.name)}")
        lines.append(f"- Edad: {_field(student.age)}")
        lines.append(f"- Curso: {_field(student.course)}")
        lines.append(f"- Fortalezas: {_field(student.strengths)}")
        lines.append(f"- Dificultades: {_field(student.challenges)}")
    return "\n".join(lines)


def build_model_input(
    messages: Sequence[IncomingMessage] = (),
    system_prompt: Optional[str] = None,
    task: Optional[TaskConfig] = None,
    student: Optional[StudentProfile] = None,
    start: bool = False,
) -> List[Dict[str, str]]:
    """
    Assemble the ordered input segments for one tutor turn.

    Order is fixed: teacher prompt (if any), task/student context,
    optional start instruction, format rules, then the conversation
    history reduced to role + content.
    """
    segments: List[Dict[str, str]] = []

    prompt = (system_prompt or "").strip()
    if prompt:
        segments.append({"role": "system", "content": prompt})

    segments.append({"role": "system", "content": build_context(task, student)})

    if start:
        segments.append({"role": "system", "content": START_INSTRUCTION})

    segments.append({"role": "system", "content": FORMAT_INSTRUCTIONS})

    segments.extend({"role": m.role, "content": m.content} for m in messages)
    return segments
