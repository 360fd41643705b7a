import time
import uuid
from typing import Callable, Dict

from ..config import settings
from ..schemas.profile import MeasurementProfile, UserProfile


class SessionNotFound(KeyError):
    pass


class SessionStore:
    """In-memory profiles keyed by session id. Nothing outlives the process.

    A session is dropped once it is older than its token lifetime; expired
    entries are purged whenever a session is created or looked up.
    """

    def __init__(self, ttl_seconds: int | None = None, clock: Callable[[], float] = time.time) -> None:
        self._profiles: Dict[str, UserProfile] = {}
        self._created: Dict[str, float] = {}
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds if self._ttl_seconds is not None else settings.jwt_ttl_seconds

    def _purge(self) -> None:
        cutoff = self._clock() - self.ttl_seconds
        for session_id in [s for s, created in self._created.items() if created <= cutoff]:
            self._profiles.pop(session_id, None)
            self._created.pop(session_id, None)

    def create(self) -> tuple[str, UserProfile]:
        self._purge()
        session_id = uuid.uuid4().hex
        profile = UserProfile(measurements=MeasurementProfile(unit=settings.default_unit))
        self._profiles[session_id] = profile
        self._created[session_id] = self._clock()
        return session_id, profile

    def get(self, session_id: str) -> UserProfile:
        self._purge()
        try:
            return self._profiles[session_id]
        except KeyError:
            raise SessionNotFound(session_id)

    def replace(self, session_id: str, profile: UserProfile) -> UserProfile:
        if session_id not in self._profiles:
            raise SessionNotFound(session_id)
        self._profiles[session_id] = profile
        return profile

    def snapshot(self, session_id: str) -> UserProfile:
        return self.get(session_id).model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._profiles)


sessions = SessionStore()
