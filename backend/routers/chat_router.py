from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from middlewares.rate_limit import rate_limit
from schemas.coach_schemas import ChatRequestSchema
from services.chat_service import get_coach_reply
from services.transcription_service import transcribe_upload

router = APIRouter(tags=["Chat"])


@router.post("/chat", dependencies=[Depends(rate_limit("chat"))])
async def post_chat(payload: ChatRequestSchema):
    reply = await get_coach_reply(payload)
    # Same envelope as the provider so the browser can read choices[0].message.content
    return {"choices": [{"message": {"content": reply}}]}


@router.post("/chat/transcribe", dependencies=[Depends(rate_limit("transcribe"))])
async def post_transcribe(audio: Optional[UploadFile] = File(None)):
    text = await transcribe_upload(audio)
    return {"text": text}
