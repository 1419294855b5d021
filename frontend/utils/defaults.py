# frontend/utils/defaults.py
# Keys and starting values for every persisted piece of UI state

TASK_KEY = "tutorneo.taskConfig"
STUDENT_KEY = "tutorneo.studentProfile"
PROMPT_KEY = "tutorneo.systemPrompt"
MESSAGES_KEY = "tutorneo.messages"
EVALUATION_KEY = "tutorneo.evaluation"
PREFERENCES_KEY = "tutorneo.preferences"

DEFAULT_TASK = {
    "topic": "Ciclo del agua",
    "objective": "Comprender evaporacion, condensacion y precipitacion con ejemplos reales",
    "subject": "Ciencias Naturales",
    "grade": "5to grado",
    "durationMin": "10",
}

DEFAULT_STUDENT = {
    "name": "Sofia R.",
    "age": "10",
    "course": "5to A",
    "strengths": "Relaciona ejemplos cotidianos",
    "challenges": "Vocabulario tecnico",
}

DEFAULT_PROMPT = """Eres TutorNeo, un tutor conversacional para primaria.
Tu objetivo es validar comprensión real, no memorizacion.
Haz preguntas abiertas, pide ejemplos concretos y razonamiento.
Cuando haya errores, guia con pistas y contraejemplos.
Evita dar la respuesta completa en la primera respuesta.
Cierra con un mini resumen y un siguiente paso."""

DEFAULT_PREFERENCES = {
    "useLiveApi": True,
    "apiKey": "",
    "model": "gpt-4.1-mini",
    "theme": "light",
}
