from dataclasses import dataclass, asdict

from ..models.user import User


@dataclass
class LoginResponse:
    token: str
    role: str
    username: str
    userId: int

    @classmethod
    def from_user(cls, token: str, user: User) -> "LoginResponse":
        return cls(
            token=token,
            role=user.role.value,
            username=user.username,
            userId=user.id,
        )

    def to_dict(self) -> dict:
        return asdict(self)
