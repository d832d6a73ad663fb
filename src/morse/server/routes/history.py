"""
History routes: /api/history
"""

from fastapi import APIRouter, Depends

from morse.core.translator import Translator
from morse.server.deps import get_translator


router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("")
async def list_history(translator: Translator = Depends(get_translator)):
    """List translations in call order."""
    return {"history": [t.to_dict() for t in translator.list_history()]}


@router.delete("")
async def clear_history(translator: Translator = Depends(get_translator)):
    """Clear the translation log."""
    return {"cleared": translator.clear_history()}
