from fastapi import Request

from roomrates.logic.session import CalendarSession, CatalogMissingError


def get_session(request: Request) -> CalendarSession:
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise CatalogMissingError("Application started without a calendar session")
    return session
