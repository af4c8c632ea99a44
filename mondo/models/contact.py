from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from mondo.database import Base
from mondo.models.post import utcnow


class ContactSubmission(Base):
    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    organization = Column(String(255), nullable=True)
    email = Column(String(320), nullable=False)
    subject = Column(String(255), nullable=True)
    message = Column(Text, nullable=True)
    send_copy = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
