# app/data/models/base.py
from datetime import datetime, timezone

from bson import ObjectId
from sqlalchemy import Column, String, DateTime


def new_object_id() -> str:
    return str(ObjectId())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IdentityMixin:
    """24-znakowe hex id (format ObjectId) + znaczniki czasu."""

    id = Column(String(24), primary_key=True, default=new_object_id)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
