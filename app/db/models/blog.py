from sqlalchemy import Column, Text

from app.db.base import BaseModel


class Blog(BaseModel):
    __tablename__ = "blogs"

    title = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    content = Column(Text, nullable=False, default="")
