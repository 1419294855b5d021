MISSING_FIELD = "N/D"

START_INSTRUCTION = "Inicia la conversacion con la primera pregunta al alumno."

FORMAT_INSTRUCTIONS = (
    "Responde SOLO en JSON valido con este formato: "
    "{\"reply\":\"...\",\"evaluation\":{\"status\":\"Aprobado\"|\"En proceso\",\"score\":0-100,"
    "\"weakConcepts\":[\"...\"],\"nextActions\":[\"...\"],\"summary\":\"...\"}}. "
    "Reglas para reply: maximo una pregunta (un solo signo ?), si haces una pregunta que sea al final, "
    "y no incluyas resumen ni siguientes pasos en reply (eso va en evaluation.summary y nextActions)."
)
