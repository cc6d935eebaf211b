"""Session-backed identity of the caller.

The session only stores who signed in; services receive that identity as an
explicit ``ActingUser`` argument and load the user row themselves.
"""
from dataclasses import dataclass
from typing import Optional

from flask import session

SESSION_USER_KEY = "user_id"
SESSION_EMAIL_KEY = "email"


@dataclass(frozen=True)
class ActingUser:
    id: int
    email: str


def current_acting_user() -> Optional[ActingUser]:
    user_id = session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    return ActingUser(id=user_id, email=session.get(SESSION_EMAIL_KEY, ""))


def sign_in(user) -> ActingUser:
    session.clear()
    session.permanent = True
    session[SESSION_USER_KEY] = user.id
    session[SESSION_EMAIL_KEY] = user.email
    return ActingUser(id=user.id, email=user.email)


def refresh_identity(user) -> None:
    if session.get(SESSION_USER_KEY) == user.id:
        session[SESSION_EMAIL_KEY] = user.email


def sign_out() -> None:
    session.clear()
