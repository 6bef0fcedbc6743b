"""FastAPI web application for wpclife."""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, HTTPException, Depends, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from wpclife.database.database import get_db, init_db
from wpclife.database.repository import HouseholdRepository
from wpclife.database.family_repository import FamilyRepository
from wpclife.engine.dispatcher import ScheduleDispatcher, resolve_family_id
from wpclife.engine.pipeline import process_schedule_text
from wpclife.engine.quick_add import parse_quick_add, guess_category
from wpclife.models.constants import QUICK_ADD_DEFAULT_STORE
from wpclife.models.household import GroceryItem
from wpclife.models.household_factory import create_grocery_item_base

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Create database tables on startup."""
    init_db()
    yield


# Initialize FastAPI app
app = FastAPI(
    title="wpclife API",
    description="Household chores, reminders, medications and groceries from plain text",
    version=APP_VERSION,
    lifespan=lifespan,
)


# Request models
class ScheduleRequest(BaseModel):
    """Request for AI scheduling."""
    text: Optional[str] = Field(None, description="Free-form text describing things to do")
    family_id: Optional[str] = Field(None, alias="familyId", description="Target family")
    timezone: Optional[str] = Field(None, description="Caller's IANA timezone, e.g. 'America/New_York'")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class QuickAddRequest(BaseModel):
    """Request for grocery quick-add."""
    text: str = Field("", description="Quick-add line: name [quantity] [@store]")
    family_id: Optional[str] = Field(None, alias="familyId", description="Target family")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


# Response models
class ScheduleResponse(BaseModel):
    """Response for AI scheduling."""
    message: str
    items: List[Dict[str, Any]] = Field(default_factory=list, description="Echo of every classified item")
    choresCreated: int = 0
    remindersCreated: int = 0
    groceriesCreated: int = 0
    medicationsCreated: int = 0


class GroceryItemResponse(BaseModel):
    """Response for a single grocery item."""
    item: GroceryItem


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": APP_VERSION}


# Sync handler: the provider call and DB writes block, so run on the threadpool.
@app.post("/ai/schedule", response_model=ScheduleResponse)
def ai_schedule(request: ScheduleRequest, db: Session = Depends(get_db)):
    """Turn free-form text into chores, reminders, groceries and medications.

    Always returns 200 for recoverable failures; the outcome is in `message`.
    """
    dispatcher = ScheduleDispatcher(HouseholdRepository(db), FamilyRepository(db))
    try:
        result = process_schedule_text(
            request.text,
            request.family_id,
            request.timezone,
            dispatcher,
        )
    except Exception as e:
        logger.error(f"Error processing schedule text: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to process schedule text")
    return ScheduleResponse(**result.to_response())


@app.post("/groceries/quick-add", response_model=GroceryItemResponse, status_code=status.HTTP_201_CREATED)
def quick_add_grocery(request: QuickAddRequest, db: Session = Depends(get_db)):
    """Add a grocery item from a quick-add line like 'Milk 2L @Publix'."""
    parsed = parse_quick_add(request.text)
    if parsed is None:
        raise HTTPException(status_code=400, detail="Please enter at least an item name.")

    family_id = resolve_family_id(FamilyRepository(db), request.family_id)
    if not family_id:
        raise HTTPException(status_code=400, detail="No family available. Please choose a family.")

    item = create_grocery_item_base(
        family_id=family_id,
        name=parsed.name,
        category=guess_category(parsed.name),
        store=parsed.store or QUICK_ADD_DEFAULT_STORE,
        quantity=parsed.quantity or None,
    )
    try:
        created = HouseholdRepository(db).create_grocery_item(item)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to add grocery item: {type(e).__name__}")
    return GroceryItemResponse(item=created)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
