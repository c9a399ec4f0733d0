from enum import Enum
from sqlalchemy import String, Enum as SAEnum, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column
from ..db.base import Base


class RoleEnum(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[RoleEnum] = mapped_column(
        SAEnum(RoleEnum, name="role"),
        nullable=False,
        default=RoleEnum.USER,
    )

    # not consulted yet; reserved for disabling accounts
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    @property
    def is_admin(self) -> bool:
        return self.role == RoleEnum.ADMIN
