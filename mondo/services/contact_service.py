import logging

from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession

from mondo.models.contact import ContactSubmission
from mondo.models.post import utcnow
from mondo.schemas.contact import ContactCreate
from mondo.utils.db_errors import store_failure

logger = logging.getLogger(__name__)


async def create_submission(db: AsyncSession, data: ContactCreate) -> ContactSubmission:
    """Persist a contact form submission and return the stored row."""
    submission = ContactSubmission(
        name=data.name,
        organization=data.organization or None,
        email=str(data.email),
        subject=data.subject or None,
        message=data.message or None,
        send_copy=data.send_copy,
        created_at=utcnow(),
    )
    db.add(submission)
    try:
        await db.commit()
        await db.refresh(submission)
    except (sa_exc.SQLAlchemyError, OSError) as e:
        await db.rollback()
        raise store_failure(e, "create_contact_submission") from e

    logger.info("Contact form submission saved: %d", submission.id)
    return submission
