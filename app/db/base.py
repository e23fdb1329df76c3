from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from app.core.db import Base


class BaseModel(Base):
    __abstract__ = True

    id = Column(String(36), primary_key=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
