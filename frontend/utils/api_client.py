# frontend/utils/api_client.py
import logging
import os
from typing import Any, Dict, List, Optional

import requests

BASE_URL = os.getenv("TUTORNEO_API_URL", "http://127.0.0.1:5010")  # Make sure backend runs on this port

logger = logging.getLogger(__name__)


class TutorAPIError(Exception):
    """A chat turn failed; the message is what the UI shows."""


class APIClient:
    @staticmethod
    def chat(
        messages: List[Dict[str, Any]],
        system_prompt: str,
        preferences: Dict[str, Any],
        task_config: Optional[Dict[str, Any]] = None,
        student: Optional[Dict[str, Any]] = None,
        start: bool = False,
    ) -> Dict[str, Any]:
        payload = {
            # ids and timestamps stay on the client
            "messages": [{"role": m["role"], "content": m["content"]} for m in messages],
            "systemPrompt": system_prompt,
            "model": preferences.get("model"),
            "apiKey": preferences.get("apiKey"),
            "taskConfig": task_config,
            "student": student,
            "start": start,
        }
        try:
            resp = requests.post(f"{BASE_URL}/api/chat", json=payload, timeout=120)
        except requests.RequestException as e:
            logger.error(f"Chat request failed: {e}")
            raise TutorAPIError("No se pudo contactar la API") from e

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not resp.ok:
            error = body.get("error") if isinstance(body, dict) else None
            raise TutorAPIError(error or "Error en la API")
        if not isinstance(body, dict):
            logger.error(f"Unexpected chat response body (status={resp.status_code})")
            raise TutorAPIError("Respuesta invalida de la API")
        return body
