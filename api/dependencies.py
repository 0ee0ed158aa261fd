"""API Dependencies - services and authentication"""
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from typing import Optional

from api.schemas import TokenData
from application.services import (
    AuthService, BookingService, CatalogService, FavoriteService, SearchHistoryService, SearchService
)
from application.session import SessionContext
from infrastructure.identity import InMemoryIdentityProvider
from infrastructure.repositories.in_memory_repositories import InMemoryDocumentStore, InMemoryHotelCatalog
from infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)

# Initialize gateways
catalog = InMemoryHotelCatalog()
document_store = InMemoryDocumentStore()
identity_provider = InMemoryIdentityProvider()


# Dependency injection
def get_search_history_service() -> SearchHistoryService:
    return SearchHistoryService(document_store)

def get_search_service() -> SearchService:
    return SearchService(catalog, get_search_history_service())

def get_catalog_service() -> CatalogService:
    return CatalogService(catalog)

def get_booking_service() -> BookingService:
    return BookingService(document_store)

def get_favorite_service() -> FavoriteService:
    return FavoriteService(document_store)

def get_auth_service() -> AuthService:
    return AuthService(identity_provider, document_store)


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

async def get_optional_session(
    token: Optional[str] = Depends(oauth2_scheme),
    auth_service: AuthService = Depends(get_auth_service)
) -> SessionContext:
    """Session for the bearer token, anonymous when no token is sent"""
    if not token:
        return SessionContext()
    try:
        payload = decode_access_token(token)
        token_data = TokenData(uid=payload.get("sub"), session_id=payload.get("sid"))
    except JWTError:
        raise _credentials_exception()
    if token_data.uid is None or token_data.session_id is None:
        raise _credentials_exception()

    session = await auth_service.resolve_session(token_data.uid, token_data.session_id)
    if not session.is_authenticated:
        raise _credentials_exception()
    return session

async def get_current_session(session: SessionContext = Depends(get_optional_session)) -> SessionContext:
    if not session.is_authenticated:
        raise _credentials_exception()
    return session
