from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from mondo.database import get_db
from mondo.schemas.contact import ContactCreate, ContactResponse
from mondo.services.contact_service import create_submission

router = APIRouter(tags=["Contact"])


@router.post("/contact", response_model=ContactResponse, status_code=status.HTTP_200_OK)
async def submit_contact_form(payload: ContactCreate, db: AsyncSession = Depends(get_db)) -> ContactResponse:
    """Store a contact form submission."""
    submission = await create_submission(db, payload)
    return ContactResponse(success=True, id=submission.id)
