"""Tests for the transcript export table."""

from frontend.components.chat_panel import transcript_frame


def test_transcript_frame_labels_roles():
    frame = transcript_frame([
        {"role": "assistant", "content": "¿Qué es la evaporación?", "ts": 0},
        {"role": "user", "content": "El agua se vuelve vapor", "ts": 0},
    ])
    assert list(frame.columns) == ["Hora", "Rol", "Mensaje"]
    assert frame["Rol"].tolist() == ["Tutor", "Alumno"]
    assert frame["Mensaje"].tolist()[1] == "El agua se vuelve vapor"


def test_empty_transcript_keeps_columns():
    assert list(transcript_frame([]).columns) == ["Hora", "Rol", "Mensaje"]
