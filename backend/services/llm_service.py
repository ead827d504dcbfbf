import asyncio
import json
import logging
import re

from openai import AsyncOpenAI, OpenAIError

from config import (
    OPENAI_API_KEY,
    OPENAI_CHAT_MODEL,
    OPENAI_TRANSCRIBE_MODEL,
    TRANSCRIBE_LANGUAGE,
)
from exceptions import LLMServiceError
from utils.constant import ERROR_MESSAGES

logger = logging.getLogger(__name__)

# No automatic retries: a failed call is reported (or falls back) immediately.
client = AsyncOpenAI(api_key=OPENAI_API_KEY, max_retries=0)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


async def create_chat_completion(
    messages,
    max_tokens=1000,
    temperature=0.7,
    response_format=None,
    timeout=None,
) -> str:
    """Single chat completion, returning the assistant text.

    With `timeout` set, the call is abandoned after that many seconds and
    asyncio.TimeoutError propagates to the caller.
    """
    kwargs = {
        "model": OPENAI_CHAT_MODEL,
        "messages": messages,
        "max_tokens": max_tokens,
        "temperature": temperature,
    }
    if response_format:
        kwargs["response_format"] = response_format

    call = client.chat.completions.create(**kwargs)
    if timeout is not None:
        response = await asyncio.wait_for(call, timeout=timeout)
    else:
        response = await call

    content = response.choices[0].message.content or ""
    logger.info("✅ OpenAI response received (%d characters)", len(content))
    return content


async def transcribe_audio(filename: str, content: bytes, content_type: str) -> str:
    transcription = await client.audio.transcriptions.create(
        file=(filename, content, content_type),
        model=OPENAI_TRANSCRIBE_MODEL,
        language=TRANSCRIBE_LANGUAGE,
        response_format="text",
    )
    # response_format="text" comes back as a bare string
    if isinstance(transcription, str):
        return transcription.strip()
    return transcription.text.strip()


def provider_status(exc: Exception):
    return getattr(exc, "status_code", None)


def classify_llm_error(exc: OpenAIError) -> LLMServiceError:
    """429 -> busy, other 4xx -> bad request, everything else -> 500."""
    status = provider_status(exc)
    if status == 429:
        return LLMServiceError(429, ERROR_MESSAGES["ai_busy"], status)
    if status is not None and 400 <= status < 500:
        return LLMServiceError(400, ERROR_MESSAGES["ai_bad_request"], status)
    return LLMServiceError(500, ERROR_MESSAGES["ai_unavailable"], status)


def parse_json_content(content: str) -> dict:
    """Parse a JSON object out of a model reply, tolerating ```json fences.

    Raises ValueError when the reply is not a JSON object.
    """
    cleaned = _CODE_FENCE.sub("", (content or "").strip())
    data = json.loads(cleaned or "{}")
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object from the model")
    return data
