# backend/app/routers/chat.py
import logging
from typing import Callable

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backend.app.agents.tutor_agent import TutorAgent
from backend.app.config.settings import Settings, get_settings, resolve_api_key, resolve_model
from backend.app.core.llm_client import MISSING_KEY_MESSAGE, LLMClient, UpstreamModelError
from backend.app.schemas.chat_schemas import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

UPSTREAM_FALLBACK_MESSAGE = "OpenAI request failed"

LLMFactory = Callable[..., LLMClient]


def get_llm_factory() -> LLMFactory:
    return LLMClient


@router.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    settings: Settings = Depends(get_settings),
    llm_factory: LLMFactory = Depends(get_llm_factory),
):
    """
    One tutor turn:
    - 400 when no credential is configured or supplied (no upstream call)
    - 500 with the provider message when the model call fails
    - otherwise {text, evaluation}
    """
    api_key = resolve_api_key(settings, request.apiKey)
    model = resolve_model(settings, request.model)

    if not api_key:
        logger.warning("Chat turn rejected: no OpenAI credential available")
        return JSONResponse(status_code=400, content={"error": MISSING_KEY_MESSAGE})

    llm = llm_factory(api_key=api_key, model=model, timeout=settings.openai_timeout)

    agent = TutorAgent(llm)
    try:
        result = await agent.run_turn(
            messages=request.messages,
            system_prompt=request.systemPrompt,
            task=request.taskConfig,
            student=request.student,
            start=request.start,
        )
    except UpstreamModelError as e:
        return JSONResponse(status_code=500, content={"error": str(e)})
    except Exception as e:
        logger.error(f"Chat turn failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e) or UPSTREAM_FALLBACK_MESSAGE})

    evaluation = result["evaluation"]
    return JSONResponse(
        content={
            "text": result["text"],
            "evaluation": evaluation.to_wire() if evaluation else None,
        }
    )
