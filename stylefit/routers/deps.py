from fastapi import Depends, HTTPException, status

from ..security import current_session_id
from ..services.sessions import SessionNotFound, sessions
from ..schemas.profile import UserProfile


async def session_profile(session_id: str = Depends(current_session_id)) -> tuple[str, UserProfile]:
    try:
        return session_id, sessions.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown session")
