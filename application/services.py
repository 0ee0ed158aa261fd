"""Application Services - Business use cases"""
import logging
from datetime import date
from typing import List, Optional, Union

from application.session import SessionContext
from domain import pricing
from domain.auth import AuthResult, ExternalProfile, User
from domain.entities import (
    Booking, Favorite, Hotel, HotelDetails, HotelSnapshot, RoomType, RoomTypeSnapshot, SearchHistory
)
from domain.enums import BookingStatus, Collection
from domain.exceptions import InvalidCriteria, NotFound, PersistenceError
from domain.gateways import DocumentStore, IdentityProvider
from domain.repositories import HotelCatalog
from domain.value_objects import SearchCriteria, StayDate

logger = logging.getLogger(__name__)


class SearchHistoryService:
    """Service for a user's logged searches"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def record_search(self, session: SessionContext, criteria: SearchCriteria) -> SearchHistory:
        """Append the criteria to the signed-in user's history"""
        user = session.require_user()
        entry = SearchHistory(
            user_id=user.uid,
            location=criteria.location,
            check_in=criteria.check_in,
            check_out=criteria.check_out,
            guests=criteria.guests
        )
        entry.history_id = await self.store.create_document(
            Collection.SEARCH_HISTORY.value, entry.to_document(), timestamp_field="searched_at"
        )
        return entry

    async def list_history(self, session: SessionContext) -> List[SearchHistory]:
        """Newest searches first"""
        user = session.require_user()
        documents = await self.store.query_documents(
            Collection.SEARCH_HISTORY.value, {"user_id": user.uid},
            order_by="searched_at", descending=True
        )
        return [SearchHistory.from_document(doc.pop("id"), doc) for doc in documents]

    async def delete_history(self, session: SessionContext, history_id: str) -> None:
        user = session.require_user()
        document = await self.store.get_document(Collection.SEARCH_HISTORY.value, history_id)
        if not document or document.get("user_id") != user.uid:
            raise NotFound("Search history entry not found")
        await self.store.delete_document(Collection.SEARCH_HISTORY.value, history_id)


class SearchService:
    """Service for hotel search over the catalog"""

    def __init__(self, catalog: HotelCatalog, history_service: Optional[SearchHistoryService] = None):
        self.catalog = catalog
        self.history_service = history_service

    def search(self, criteria: Union[SearchCriteria, dict, None] = None) -> List[Hotel]:
        """Filter the catalog, preserving catalog order"""
        if criteria is None:
            criteria = SearchCriteria()
        elif isinstance(criteria, dict):
            criteria = SearchCriteria.from_params(**criteria)
        elif not isinstance(criteria, SearchCriteria):
            raise InvalidCriteria(f"Search criteria must be a mapping, not {type(criteria).__name__}")

        location = criteria.location.lower()
        results = []
        for hotel in self.catalog.find_all():
            if location and location not in hotel.city.lower() and location not in hotel.country.lower():
                continue
            if criteria.min_price is not None and hotel.price < criteria.min_price:
                continue
            if criteria.max_price is not None and hotel.price > criteria.max_price:
                continue
            if criteria.min_rating is not None and hotel.rating < criteria.min_rating:
                continue
            results.append(hotel)
        return results

    async def search_and_record(self, criteria: SearchCriteria, session: Optional[SessionContext] = None) -> List[Hotel]:
        """Search, then log the criteria for a signed-in user"""
        hotels = self.search(criteria)
        if session is not None and session.is_authenticated and self.history_service:
            try:
                await self.history_service.record_search(session, criteria)
            except PersistenceError as e:
                logger.warning("Could not record search history: %s", e.message)
        return hotels


class CatalogService:
    """Service for hotel details and pricing"""

    def __init__(self, catalog: HotelCatalog):
        self.catalog = catalog

    def get_hotel(self, hotel_id: str) -> Hotel:
        hotel = self.catalog.find_by_id(hotel_id)
        if not hotel:
            raise NotFound(f"Hotel {hotel_id} not found")
        return hotel

    def get_hotel_details(self, hotel_id: str) -> HotelDetails:
        details = self.catalog.details_for(hotel_id)
        if not details:
            raise NotFound(f"Hotel {hotel_id} not found")
        return details

    def get_room_types(self, hotel_id: str) -> List[RoomType]:
        return pricing.room_types_for(self.get_hotel(hotel_id))

    def get_room_type(self, hotel_id: str, room_type_id: str) -> RoomType:
        room_type = pricing.find_room_type(self.get_hotel(hotel_id), room_type_id)
        if not room_type:
            raise NotFound(f"Room type {room_type_id} not found")
        return room_type

    def quote(self, hotel_id: str, check_in: date, check_out: date,
              room_type_id: Optional[str] = None) -> pricing.PriceQuote:
        """Price a stay"""
        hotel = self.get_hotel(hotel_id)
        room_type = self.get_room_type(hotel_id, room_type_id) if room_type_id else None
        return pricing.quote(hotel, room_type, check_in, check_out)


class BookingService:
    """Service for the booking lifecycle"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create_booking(
        self,
        session: SessionContext,
        hotel_id: str,
        hotel_snapshot: HotelSnapshot,
        room_type_snapshot: Optional[RoomTypeSnapshot],
        check_in: StayDate,
        check_out: StayDate,
        guests: int
    ) -> Booking:
        """Create a confirmed booking priced from the snapshots.

        Dates and datetimes are both accepted; a stay shorter than a day is
        charged one night.
        """
        user = session.require_user()

        # Validates the range before anything is written
        nights = pricing.nights(check_in, check_out)
        rate = room_type_snapshot if room_type_snapshot else hotel_snapshot
        total_price = pricing.total_cost(rate.price, nights)

        booking = Booking.create(
            user_id=user.uid,
            hotel_id=hotel_id,
            hotel_data=hotel_snapshot,
            room_type=room_type_snapshot,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            total_price=total_price,
            currency=rate.currency
        )

        booking_id = await self.store.create_document(
            Collection.BOOKINGS.value, booking.to_document(), timestamp_field="created_at"
        )
        logger.info("Booking %s created for user %s at %s (%d nights)", booking_id, user.uid, hotel_id, nights)
        return await self.get_booking(session, booking_id)

    async def list_bookings(self, session: SessionContext) -> List[Booking]:
        """The user's bookings, newest first"""
        user = session.require_user()
        documents = await self.store.query_documents(
            Collection.BOOKINGS.value, {"user_id": user.uid},
            order_by="created_at", descending=True
        )
        return [Booking.from_document(doc.pop("id"), doc) for doc in documents]

    async def get_booking(self, session: SessionContext, booking_id: str) -> Booking:
        user = session.require_user()
        document = await self.store.get_document(Collection.BOOKINGS.value, booking_id)
        if not document:
            raise NotFound("Booking not found")
        booking = Booking.from_document(booking_id, document)
        if not booking.is_owned_by(user.uid):
            raise NotFound("Booking not found")
        return booking

    async def cancel_booking(self, session: SessionContext, booking_id: str) -> Booking:
        """Cancel a booking whatever its current status"""
        booking = await self.get_booking(session, booking_id)
        previous = booking.cancel()
        if previous != BookingStatus.CONFIRMED:
            logger.warning("Booking %s cancelled from status %s", booking_id, previous.value)

        await self.store.update_document(
            Collection.BOOKINGS.value, booking_id, {"status": booking.status.value}
        )
        logger.info("Booking %s cancelled", booking_id)
        return booking


class FavoriteService:
    """Service for a user's favorite hotels"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def add_favorite(self, session: SessionContext, hotel: Hotel) -> Favorite:
        user = session.require_user()
        favorite = Favorite.create(user.uid, hotel)
        favorite.favorite_id = await self.store.create_document(
            Collection.FAVORITES.value, favorite.to_document(), timestamp_field="added_at"
        )
        document = await self.store.get_document(Collection.FAVORITES.value, favorite.favorite_id)
        favorite.added_at = document.get("added_at") if document else None
        return favorite

    async def list_favorites(self, session: SessionContext) -> List[Favorite]:
        """Most recently added first"""
        user = session.require_user()
        documents = await self.store.query_documents(
            Collection.FAVORITES.value, {"user_id": user.uid},
            order_by="added_at", descending=True
        )
        return [Favorite.from_document(doc.pop("id"), doc) for doc in documents]

    async def remove_favorite(self, session: SessionContext, favorite_id: str) -> None:
        user = session.require_user()
        document = await self.store.get_document(Collection.FAVORITES.value, favorite_id)
        if not document or document.get("user_id") != user.uid:
            raise NotFound("Favorite not found")
        await self.store.delete_document(Collection.FAVORITES.value, favorite_id)


class AuthService:
    """Service for sign-in flows and the user profile"""

    def __init__(self, identity: IdentityProvider, store: DocumentStore):
        self.identity = identity
        self.store = store

    async def _save_user_document(self, user: User) -> None:
        await self.store.set_document(
            Collection.USERS.value, user.uid,
            {"uid": user.uid, "email": user.email, "display_name": user.display_name},
            timestamp_field="created_at"
        )

    async def _with_profile(self, result: AuthResult) -> AuthResult:
        document = await self.store.get_document(Collection.USERS.value, result.user.uid)
        if document:
            result.user.created_at = document.get("created_at")
        return result

    async def _sign_in(self, session: Optional[SessionContext], result: AuthResult) -> AuthResult:
        if session is not None:
            session.set_user(result.user, result.session_id)
        return result

    async def register(self, email: str, password: str, display_name: str,
                       session: Optional[SessionContext] = None) -> AuthResult:
        result = await self.identity.register(email, password, display_name)
        if not result.success:
            logger.info("Registration rejected: %s", result.error)
            return result
        try:
            await self._save_user_document(result.user)
        except PersistenceError as e:
            logger.error("Could not save profile for %s: %s", result.user.uid, e.message)
            return AuthResult.failed(e.message)
        return await self._sign_in(session, await self._with_profile(result))

    async def login(self, email: str, password: str,
                    session: Optional[SessionContext] = None) -> AuthResult:
        result = await self.identity.login(email, password)
        if not result.success:
            logger.info("Login failed for %s", email)
            return result
        return await self._sign_in(session, await self._with_profile(result))

    async def login_with_external_provider(self, profile: ExternalProfile,
                                           session: Optional[SessionContext] = None) -> AuthResult:
        result = await self.identity.login_with_external_provider(profile)
        if not result.success:
            return result
        try:
            existing = await self.store.get_document(Collection.USERS.value, result.user.uid)
            if not existing:
                await self._save_user_document(result.user)
        except PersistenceError as e:
            logger.error("Could not save profile for %s: %s", result.user.uid, e.message)
            return AuthResult.failed(e.message)
        return await self._sign_in(session, await self._with_profile(result))

    async def logout(self, session: SessionContext) -> AuthResult:
        if not session.session_id:
            return AuthResult.failed("No active session")
        result = await self.identity.logout(session.session_id)
        if result.success:
            session.clear()
        return result

    async def resolve_session(self, uid: str, session_id: str) -> SessionContext:
        """Session for a token subject, anonymous if the user or session is gone"""
        if not await self.identity.is_session_active(session_id):
            return SessionContext()
        user = await self.identity.get_user(uid)
        if user is None:
            return SessionContext()
        return SessionContext(user=user, session_id=session_id)

    async def get_profile(self, session: SessionContext) -> User:
        user = session.require_user()
        document = await self.store.get_document(Collection.USERS.value, user.uid)
        if document:
            return user.model_copy(update={
                "display_name": document.get("display_name", user.display_name),
                "created_at": document.get("created_at")
            })
        return user

    async def update_profile(self, session: SessionContext, display_name: str) -> User:
        user = session.require_user()
        result = await self.identity.update_display_name(user.uid, display_name)
        if not result.success:
            raise NotFound(result.error or "User not found")
        try:
            await self.store.update_document(
                Collection.USERS.value, user.uid, {"display_name": display_name}
            )
        except NotFound:
            await self._save_user_document(result.user)
        session.set_user(result.user, session.session_id)
        return await self.get_profile(session)
