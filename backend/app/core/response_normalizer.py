# backend/app/core/response_normalizer.py
import json
import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from backend.app.schemas.chat_schemas import EvaluationRecord, EvaluationStatus

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def extract_json(text: str) -> Optional[Dict[str, Any]]:
    """
    Pull the JSON object the model was asked to emit out of free text.

    Takes everything from the first "{" to the last "}". Braces inside the
    surrounding prose are not accounted for, so this can mis-extract.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None

    candidate = text[start:end + 1]
    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def enforce_single_question(reply: str) -> str:
    first = reply.find("?")
    if first == -1:
        return reply.strip()
    second = reply.find("?", first + 1)
    if second == -1:
        return reply.strip()
    return reply[:first + 1].strip()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _normalize_score(value: Any) -> int:
    # bool is an int subclass but not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    try:
        number = float(value)
    except OverflowError:
        # integers too large for a float read as Infinity
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, min(100, _round_half_up(number)))


def _text_items(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def normalize_evaluation(value: Any) -> Optional[EvaluationRecord]:
    if not isinstance(value, dict):
        return None

    status = (
        EvaluationStatus.APPROVED
        if value.get("status") == EvaluationStatus.APPROVED.value
        else EvaluationStatus.IN_PROGRESS
    )
    summary = value.get("summary")

    return EvaluationRecord(
        status=status,
        score=_normalize_score(value.get("score")),
        weakConcepts=_text_items(value.get("weakConcepts")),
        nextActions=_text_items(value.get("nextActions")),
        summary=summary if isinstance(summary, str) else None,
    )


def normalize_tutor_output(raw: str) -> Tuple[str, Optional[EvaluationRecord]]:
    """Turn raw model text into (reply, evaluation). Never raises on bad output."""
    parsed = extract_json(raw)
    if parsed is None:
        logger.warning("Model output had no parseable JSON object; using raw text as reply")

    raw_reply = parsed.get("reply") if parsed else None
    reply = enforce_single_question(raw_reply if isinstance(raw_reply, str) else raw)

    evaluation = normalize_evaluation(parsed.get("evaluation") if parsed else None)
    return reply, evaluation
