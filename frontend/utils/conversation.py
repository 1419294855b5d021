# frontend/utils/conversation.py
import random
import time
from typing import Any, Dict, List, Optional, Tuple

NO_REPLY_TEXT = "Sin respuesta"

Message = Dict[str, Any]
Evaluation = Dict[str, Any]


def now_ms() -> int:
    return int(time.time() * 1000)


def make_id() -> str:
    return f"{now_ms()}-{random.getrandbits(48):x}"


def make_message(role: str, content: str) -> Message:
    return {"id": make_id(), "role": role, "content": content, "ts": now_ms()}


def begin_turn(messages: List[Message], text: str) -> Optional[List[Message]]:
    """Append the student's message. Returns None for blank input (nothing to send)."""
    content = (text or "").strip()
    if not content:
        return None
    return [*messages, make_message("user", content)]


def apply_turn_result(
    messages: List[Message],
    evaluation: Optional[Evaluation],
    result: Dict[str, Any],
) -> Tuple[List[Message], Optional[Evaluation]]:
    """
    Fold one /api/chat response into the conversation.

    The assistant reply is always appended. The evaluation is replaced
    wholesale when the response carries one; otherwise the previous record
    stays as it was.
    """
    reply = result.get("text") or NO_REPLY_TEXT
    next_messages = [*messages, make_message("assistant", reply)]

    new_evaluation = result.get("evaluation")
    if new_evaluation:
        return next_messages, {**new_evaluation, "updatedAt": now_ms()}
    return next_messages, evaluation


def reset_conversation() -> Tuple[List[Message], Optional[Evaluation]]:
    return [], None


def live_api_refusal(preferences: Dict[str, Any], starting: bool = False) -> Optional[str]:
    """Message to show when the live API is switched off, else None."""
    if preferences.get("useLiveApi", True):
        return None
    verb = "iniciar" if starting else "responder"
    return f"La API en vivo esta desactivada. Activala para {verb}."
