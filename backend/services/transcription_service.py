import logging
from typing import Optional

from fastapi import UploadFile
from openai import OpenAIError

from config import ALLOWED_AUDIO_TYPES, MAX_AUDIO_FILE_SIZE
from exceptions import AudioValidationError, LLMServiceError
from services.llm_service import provider_status, transcribe_audio
from utils.constant import ERROR_MESSAGES

logger = logging.getLogger(__name__)


def normalize_content_type(content_type: Optional[str]) -> str:
    # MediaRecorder blobs arrive as e.g. "audio/webm;codecs=opus"
    return (content_type or "").split(";")[0].strip().lower()


async def read_validated_audio(audio: Optional[UploadFile]) -> bytes:
    """Return the upload's bytes, or raise AudioValidationError (400/413/415)."""
    if audio is None:
        raise AudioValidationError(400, ERROR_MESSAGES["audio_missing"])

    declared_size = getattr(audio, "size", None)
    if declared_size is not None and declared_size > MAX_AUDIO_FILE_SIZE:
        logger.warning("⚠️ File too large: %s bytes", declared_size)
        raise AudioValidationError(413, ERROR_MESSAGES["audio_too_large"])

    content_type = normalize_content_type(audio.content_type)
    if content_type not in ALLOWED_AUDIO_TYPES:
        logger.warning("⚠️ Invalid file type: %s", audio.content_type)
        raise AudioValidationError(415, ERROR_MESSAGES["audio_unsupported"])

    content = await audio.read()
    if len(content) > MAX_AUDIO_FILE_SIZE:
        logger.warning("⚠️ File too large: %s bytes", len(content))
        raise AudioValidationError(413, ERROR_MESSAGES["audio_too_large"])
    if not content:
        raise AudioValidationError(400, ERROR_MESSAGES["audio_empty"])

    logger.info(
        "📊 Audio file: name=%s size=%.2fMB type=%s",
        audio.filename, len(content) / 1024 / 1024, content_type,
    )
    return content


async def transcribe_upload(audio: Optional[UploadFile]) -> str:
    content = await read_validated_audio(audio)
    logger.info("🎤 Whisper transcription started")

    try:
        text = await transcribe_audio(
            audio.filename or "audio.webm",
            content,
            normalize_content_type(audio.content_type),
        )
    except OpenAIError as e:
        logger.error("💥 Whisper API error: %s", e)
        status = provider_status(e)
        if status == 429:
            raise LLMServiceError(429, ERROR_MESSAGES["transcribe_busy"], status) from e
        if status == 400:
            raise LLMServiceError(400, ERROR_MESSAGES["transcribe_bad_file"], status) from e
        raise LLMServiceError(500, ERROR_MESSAGES["transcribe_failed"], status) from e

    logger.info("✅ Whisper result: %s", text[:100] + ("..." if len(text) > 100 else ""))
    return text
