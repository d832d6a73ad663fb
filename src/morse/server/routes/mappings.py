"""
Symbol table routes: /api/mappings
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from morse.core.errors import MorseError, ProtectedMapping
from morse.core.symbols import normalize_char
from morse.core.translator import Translator
from morse.server.deps import get_translator


router = APIRouter(prefix="/api/mappings", tags=["mappings"])


class PutMappingRequest(BaseModel):
    char: str = Field(min_length=1, max_length=1)
    sequence: str


@router.get("")
async def list_mappings(
    limit: int | None = Query(default=None, ge=0),
    translator: Translator = Depends(get_translator),
):
    """List mappings sorted by character."""
    entries = translator.list_mappings()
    shown = entries if limit is None else entries[:limit]
    return {
        "mappings": [{"char": c, "sequence": s} for c, s in shown],
        "total": len(entries),
    }


@router.post("")
async def put_mapping(req: PutMappingRequest, translator: Translator = Depends(get_translator)):
    """Add or update a mapping."""
    try:
        translator.put_mapping(req.char, req.sequence)
    except ProtectedMapping as e:
        raise HTTPException(status_code=409, detail=str(e))
    except MorseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"char": normalize_char(req.char), "sequence": req.sequence}


@router.delete("")
async def remove_mapping(
    char: str = Query(min_length=1, max_length=1),
    translator: Translator = Depends(get_translator),
):
    """Remove a mapping. The space mapping is never removed."""
    return {"char": normalize_char(char), "removed": translator.remove_mapping(char)}
