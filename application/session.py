"""Session Context - the signed-in user, passed explicitly to services"""
import logging
from typing import Callable, List, Optional

from domain.auth import User
from domain.exceptions import AuthRequired

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[User]], None]


class SessionContext:
    """Holds the current user of one client session.

    Listeners registered with subscribe() are called once with the current
    user and again on every change.
    """

    def __init__(self, user: Optional[User] = None, session_id: Optional[str] = None):
        self._user = user
        self._session_id = session_id
        self._listeners: List[SessionListener] = []

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def require_user(self) -> User:
        if self._user is None:
            raise AuthRequired()
        return self._user

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener and return a function that removes it"""
        self._listeners.append(listener)
        listener(self._user)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_user(self, user: Optional[User], session_id: Optional[str] = None) -> None:
        self._user = user
        self._session_id = session_id if user is not None else None
        for listener in list(self._listeners):
            try:
                listener(user)
            except Exception:
                logger.exception("Session listener failed")

    def clear(self) -> None:
        self.set_user(None)
