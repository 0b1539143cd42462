"""SQLAlchemy models for the Event Management API."""

from sqlalchemy import Column, Integer, String, Date, Text

from .database import Base


class Event(Base):
    """A scheduled occurrence: title, description, location, date."""

    __tablename__ = "events"
    # SQLite would otherwise hand a deleted row's id to the next insert
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    location = Column(String(255), nullable=False, index=True)  # exact-match lookups
    event_date = Column(Date, nullable=False, index=True)       # upcoming lookups

    def __repr__(self):
        return f"<Event(id={self.id}, title='{self.title}', date={self.event_date})>"
