"""In-Memory Repository and Gateway Implementations"""
import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

from domain.repositories import HotelCatalog
from domain.gateways import DocumentStore
from domain.entities import Hotel, HotelDetails, Review
from domain.exceptions import NotFound
from domain.pricing import room_types_for
from infrastructure.repositories.catalog_data import HOTELS, REVIEW_TEMPLATES


class InMemoryHotelCatalog(HotelCatalog):
    """In-memory implementation of HotelCatalog over a static hotel list"""

    def __init__(self, hotels: Optional[List[Hotel]] = None):
        self._hotels: List[Hotel] = list(HOTELS if hotels is None else hotels)

    def find_all(self) -> List[Hotel]:
        """Return every hotel in catalog order"""
        return list(self._hotels)

    def find_by_id(self, hotel_id: str) -> Optional[Hotel]:
        """Find hotel by ID"""
        for hotel in self._hotels:
            if hotel.id == hotel_id:
                return hotel
        return None

    def reviews_for(self, hotel: Hotel) -> List[Review]:
        return [
            Review(
                id=f"{hotel.id}-review-{index + 1}",
                user_name=user_name,
                rating=rating,
                comment=comment,
                date=review_date,
            )
            for index, (user_name, rating, comment, review_date) in enumerate(REVIEW_TEMPLATES)
        ]

    def details_for(self, hotel_id: str) -> Optional[HotelDetails]:
        """Hotel with room types and reviews derived on every read"""
        hotel = self.find_by_id(hotel_id)
        if not hotel:
            return None
        return HotelDetails(
            **hotel.model_dump(),
            rooms=room_types_for(hotel),
            reviews=self.reviews_for(hotel),
        )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryDocumentStore(DocumentStore):
    """In-memory implementation of DocumentStore.

    Documents are stored and returned as deep copies. Server timestamps are
    strictly increasing so ordering by them follows write order.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._clock = clock
        self._last_timestamp: Optional[datetime] = None

    def _collection(self, name: str) -> Dict[str, Dict[str, Any]]:
        return self._collections.setdefault(name, {})

    def _server_timestamp(self) -> datetime:
        now = self._clock()
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    def _stamp(self, fields: Dict[str, Any], timestamp_field: Optional[str]) -> Dict[str, Any]:
        document = copy.deepcopy(fields)
        if timestamp_field:
            document[timestamp_field] = self._server_timestamp()
        return document

    async def create_document(self, collection: str, fields: Dict[str, Any],
                              timestamp_field: Optional[str] = None) -> str:
        document_id = uuid4().hex
        self._collection(collection)[document_id] = self._stamp(fields, timestamp_field)
        return document_id

    async def set_document(self, collection: str, document_id: str, fields: Dict[str, Any],
                           timestamp_field: Optional[str] = None) -> None:
        self._collection(collection)[document_id] = self._stamp(fields, timestamp_field)

    async def update_document(self, collection: str, document_id: str,
                              partial_fields: Dict[str, Any]) -> None:
        documents = self._collection(collection)
        if document_id not in documents:
            raise NotFound(f"No document {document_id} in {collection}")
        documents[document_id].update(copy.deepcopy(partial_fields))

    async def get_document(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        document = self._collection(collection).get(document_id)
        return copy.deepcopy(document) if document is not None else None

    async def query_documents(self, collection: str, filters: Dict[str, Any],
                              order_by: Optional[str] = None,
                              descending: bool = False) -> List[Dict[str, Any]]:
        results = []
        for document_id, document in self._collection(collection).items():
            if all(document.get(field) == value for field, value in filters.items()):
                results.append({"id": document_id, **copy.deepcopy(document)})

        if order_by:
            # Documents missing the field sort last
            present = [d for d in results if d.get(order_by) is not None]
            missing = [d for d in results if d.get(order_by) is None]
            present.sort(key=lambda d: d[order_by], reverse=descending)
            results = present + missing
        return results

    async def delete_document(self, collection: str, document_id: str) -> bool:
        documents = self._collection(collection)
        if document_id in documents:
            del documents[document_id]
            return True
        return False
