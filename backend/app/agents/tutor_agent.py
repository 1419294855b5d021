# backend/app/agents/tutor_agent.py
import logging
from typing import Any, Dict, Optional, Sequence

from backend.app.agents.base_agent import BaseAgent
from backend.app.core.context_builder import build_model_input
from backend.app.core.llm_client import LLMClient
from backend.app.core.response_normalizer import normalize_tutor_output
from backend.app.schemas.chat_schemas import IncomingMessage, StudentProfile, TaskConfig

logger = logging.getLogger(__name__)


class TutorAgent(BaseAgent):
    """
    Conversational homework tutor.
    Builds the turn input, asks the LLM for a reply + evaluation JSON,
    and normalizes whatever comes back.
    """

    def __init__(self, llm: LLMClient, name: str = "tutor"):
        super().__init__(name)
        self.llm = llm

    async def run_turn(
        self,
        messages: Sequence[IncomingMessage] = (),
        system_prompt: Optional[str] = None,
        task: Optional[TaskConfig] = None,
        student: Optional[StudentProfile] = None,
        start: bool = False,
    ) -> Dict[str, Any]:
        segments = build_model_input(
            messages=messages,
            system_prompt=system_prompt,
            task=task,
            student=student,
            start=start,
        )

        raw = await self.llm.respond(segments)
        reply, evaluation = normalize_tutor_output(raw)

        logger.info(
            f"Tutor turn done: segments={len(segments)} reply_chars={len(reply)} "
            f"evaluation={'yes' if evaluation else 'no'}"
        )
        return {"text": reply, "evaluation": evaluation}

    async def run(self, goal: str, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handles goals:
         - tutor_turn: goal_params with messages, system_prompt,
           task_config, student and start
        """
        gp = context.get("goal_params") or {}
        if goal != "tutor_turn":
            raise ValueError(f"TutorAgent cannot handle goal {goal}")

        return await self.run_turn(
            messages=gp.get("messages", []),
            system_prompt=gp.get("system_prompt"),
            task=gp.get("task_config"),
            student=gp.get("student"),
            start=bool(gp.get("start", False)),
        )
