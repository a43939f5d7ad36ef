from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from thingful.database.connection import Base


class User(Base):
    __tablename__ = "thingful_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    nick_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # bcrypt digest only, never the plaintext
    password: Mapped[str] = mapped_column(String(100), nullable=False)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
