"""Domain Gateway Interfaces - external persistence and identity collaborators"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from domain.auth import AuthResult, ExternalProfile, User


class DocumentStore(ABC):
    """Gateway interface for the document store.

    Implementations raise PersistenceError on transport failures and
    NotFound when updating a missing document.
    """

    @abstractmethod
    async def create_document(self, collection: str, fields: Dict[str, Any],
                              timestamp_field: Optional[str] = None) -> str:
        """Insert a document and return its server-assigned id"""
        pass

    @abstractmethod
    async def set_document(self, collection: str, document_id: str, fields: Dict[str, Any],
                           timestamp_field: Optional[str] = None) -> None:
        """Create or replace a document under a known id"""
        pass

    @abstractmethod
    async def update_document(self, collection: str, document_id: str,
                              partial_fields: Dict[str, Any]) -> None:
        """Merge fields into an existing document"""
        pass

    @abstractmethod
    async def get_document(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a document, or None if absent"""
        pass

    @abstractmethod
    async def query_documents(self, collection: str, filters: Dict[str, Any],
                              order_by: Optional[str] = None,
                              descending: bool = False) -> List[Dict[str, Any]]:
        """Documents whose fields equal every filter value, each with an "id" key"""
        pass

    @abstractmethod
    async def delete_document(self, collection: str, document_id: str) -> bool:
        """Delete a document"""
        pass


class IdentityProvider(ABC):
    """Gateway interface for the identity provider.

    Operations report failures through AuthResult instead of raising.
    """

    @abstractmethod
    async def register(self, email: str, password: str, display_name: str) -> AuthResult:
        pass

    @abstractmethod
    async def login(self, email: str, password: str) -> AuthResult:
        pass

    @abstractmethod
    async def login_with_external_provider(self, profile: ExternalProfile) -> AuthResult:
        pass

    @abstractmethod
    async def logout(self, session_id: str) -> AuthResult:
        pass

    @abstractmethod
    async def get_user(self, uid: str) -> Optional[User]:
        pass

    @abstractmethod
    async def is_session_active(self, session_id: str) -> bool:
        pass

    @abstractmethod
    async def update_display_name(self, uid: str, display_name: str) -> AuthResult:
        pass
