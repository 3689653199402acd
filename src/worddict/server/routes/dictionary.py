"""
Dictionary routes: /api/dictionary, /api/suggestions
"""

from typing import Literal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from worddict.core.errors import BrokenError, ReadIOError, WriteIOError, DuplicatedError
from worddict.server.deps import get_dictionary, open_dictionary


router = APIRouter(prefix="/api", tags=["dictionary"])


class AddEntryRequest(BaseModel):
    left: str
    right: str


def _entry_or_404(left: str):
    dictionary = get_dictionary()
    index = dictionary.find_key(left)
    if index is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return dictionary.get_item(index)


@router.get("/dictionary")
async def list_entries():
    """List every entry in table order."""
    dictionary = get_dictionary()
    return {
        "path": str(dictionary.path),
        "count": dictionary.count(),
        "entries": [e.to_dict() for e in dictionary.entries()],
    }


@router.get("/dictionary/entries/{left:path}")
async def get_entry(left: str):
    """Get one entry by its left term."""
    return _entry_or_404(left).to_dict()


@router.post("/dictionary/entries")
async def add_entry(req: AddEntryRequest):
    """Add a pair, or extend the history of an existing left term."""
    dictionary = get_dictionary()
    try:
        created = dictionary.add_edit(req.left, req.right)
    except DuplicatedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except WriteIOError as e:
        raise HTTPException(status_code=500, detail=str(e))

    entry = dictionary.get_item(dictionary.find_key(req.left))
    return {"created": created, "entry": entry.to_dict()}


@router.delete("/dictionary/entries/{left:path}")
async def delete_entry(left: str):
    """Delete an entry by its left term."""
    entry = _entry_or_404(left)
    try:
        get_dictionary().delete(entry.index)
    except WriteIOError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"deleted": entry.left}


@router.get("/dictionary/lookup")
async def lookup(
    term: str,
    side: Literal["left", "right"] = "left",
    exact: bool = False,
    start: int = 0,
):
    """Search either side, exactly or by substring, starting at `start`."""
    dictionary = get_dictionary()

    if side == "left" and not exact:
        indices = dictionary.find_left(term, start) or []
    else:
        find = {
            ("left", True): dictionary.find_left_exact,
            ("right", True): dictionary.find_right_exact,
            ("right", False): dictionary.find_right,
        }[(side, exact)]
        index = find(term, start)
        indices = [] if index is None else [index]

    return {
        "indices": indices,
        "entries": [dictionary.get_item(i).to_dict() for i in indices],
    }


@router.post("/dictionary/reload")
async def reload():
    """Re-read the dictionary file from disk."""
    try:
        dictionary = open_dictionary(get_dictionary().path)
    except BrokenError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ReadIOError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"count": dictionary.count()}


@router.get("/suggestions")
async def suggestions(name: str):
    """Left terms containing `name`, each with its translation history."""
    return get_dictionary().find_pairs(name)
