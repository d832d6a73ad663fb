"""
Translation routes: /api/encode, /api/decode
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from morse.core.translator import Translator
from morse.server.deps import get_translator


router = APIRouter(prefix="/api", tags=["translate"])


class TranslateRequest(BaseModel):
    text: str


@router.post("/encode")
async def encode(req: TranslateRequest, translator: Translator = Depends(get_translator)):
    """Encode text to Morse."""
    return {"input": req.text, "output": translator.encode(req.text)}


@router.post("/decode")
async def decode(req: TranslateRequest, translator: Translator = Depends(get_translator)):
    """Decode Morse to text."""
    return {"input": req.text, "output": translator.decode(req.text)}
