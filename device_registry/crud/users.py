from __future__ import annotations

from sqlalchemy.orm import Session

from ..models.user import User, UserRole


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def create_user(db: Session, payload: dict) -> User:
    """Create and persist a user record from a payload dict.

    Credentials are stored as given; hashing belongs to the auth layer.
    """

    data = payload.copy()
    for key in ("full_name", "email", "phone", "address"):
        if isinstance(data.get(key), str):
            data[key] = data[key].strip()
    if not data.get("email"):
        raise ValueError("email is required for users")
    if not data.get("phone"):
        raise ValueError("phone is required for users")
    role = data.get("role") or UserRole.USER
    data["role"] = UserRole(role).value

    user = User(**data)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
