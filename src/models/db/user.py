import datetime
import enum

from src.models.db.base import BaseRecordModel


class UserStatusEnum(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"
    SUSPENDED = "SUSPENDED"


class User(BaseRecordModel):
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    role_name: str | None = None
    department: str | None = None
    status: UserStatusEnum = UserStatusEnum.ACTIVE
    avatar: str | None = None
    avatar_id: str | None = None
    last_login: datetime.datetime | None = None


def build_avatar_url(first_name: str, last_name: str, background: str = "004d73") -> str:
    return f"https://ui-avatars.com/api/?name={first_name}+{last_name}&background={background}&color=fff"
