"""Domain Entities - Catalog and Aggregates"""
from pydantic import BaseModel, Field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, List

from domain.enums import BookingStatus, RoomTier
from domain.exceptions import InvalidRange
from domain.value_objects import StayDate, nights_between

SNAPSHOT_SCHEMA_VERSION = 1


# ==================== CATALOG ====================

class Hotel(BaseModel):
    """Hotel reference data, created at catalog load and never mutated"""
    id: str
    name: str
    description: str
    address: str
    city: str
    country: str
    rating: float = Field(ge=0, le=5)
    review_count: int = Field(ge=0)
    price: Decimal = Field(gt=0)
    currency: str
    images: List[str] = []
    amenities: List[str] = []
    latitude: float
    longitude: float

    class Config:
        frozen = True
        from_attributes = True


class RoomType(BaseModel):
    """Room type derived from a hotel's base price"""
    id: str
    tier: RoomTier
    name: str
    description: str
    price: Decimal = Field(gt=0)
    currency: str
    capacity: int = Field(ge=1)
    amenities: List[str] = []
    images: List[str] = []

    class Config:
        frozen = True


class Review(BaseModel):
    """Guest review of a hotel"""
    id: str
    user_name: str
    rating: float = Field(ge=0, le=5)
    comment: str
    date: str

    class Config:
        frozen = True


class HotelDetails(Hotel):
    """Hotel together with its derived rooms and reviews"""
    rooms: List[RoomType] = []
    reviews: List[Review] = []


# ==================== SNAPSHOTS ====================

class HotelSnapshot(BaseModel):
    """Copy of a hotel embedded by value in bookings and favorites"""
    schema_version: int = SNAPSHOT_SCHEMA_VERSION
    hotel_id: str
    name: str
    description: str = ""
    address: str = ""
    city: str
    country: str
    rating: float
    review_count: int = 0
    price: Decimal
    currency: str
    images: List[str] = []
    amenities: List[str] = []
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    class Config:
        frozen = True

    @classmethod
    def from_hotel(cls, hotel: Hotel) -> "HotelSnapshot":
        return cls(hotel_id=hotel.id, **hotel.model_dump(exclude={"id", "rooms", "reviews"}))


class RoomTypeSnapshot(BaseModel):
    """Copy of the chosen room type embedded by value in a booking"""
    schema_version: int = SNAPSHOT_SCHEMA_VERSION
    room_type_id: str
    tier: RoomTier
    name: str
    description: str = ""
    price: Decimal
    currency: str
    capacity: int
    amenities: List[str] = []
    images: List[str] = []

    class Config:
        frozen = True

    @classmethod
    def from_room_type(cls, room_type: RoomType) -> "RoomTypeSnapshot":
        return cls(room_type_id=room_type.id, **room_type.model_dump(exclude={"id"}))


# ==================== BOOKING AGGREGATE ====================

class Booking(BaseModel):
    """Booking Aggregate Root Entity"""

    # Identity, assigned by the document store
    booking_id: Optional[str] = None

    # Ownership and references
    user_id: str
    hotel_id: str

    # Snapshots
    hotel_data: HotelSnapshot
    room_type: Optional[RoomTypeSnapshot] = None

    # Stay, as dates or as datetimes for stays shorter than a day
    check_in: StayDate
    check_out: StayDate
    guests: int

    # Pricing
    total_price: Decimal
    currency: str

    status: BookingStatus = BookingStatus.CONFIRMED

    # Server-assigned
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def create(
        user_id: str,
        hotel_id: str,
        hotel_data: HotelSnapshot,
        room_type: Optional[RoomTypeSnapshot],
        check_in: StayDate,
        check_out: StayDate,
        guests: int,
        total_price: Decimal,
        currency: str
    ) -> "Booking":
        """Create new booking with validation"""
        Booking._validate_stay(check_in, check_out)
        Booking._validate_guests(guests)

        # Status is always confirmed on creation
        return Booking(
            user_id=user_id,
            hotel_id=hotel_id,
            hotel_data=hotel_data,
            room_type=room_type,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            total_price=total_price,
            currency=currency,
            status=BookingStatus.CONFIRMED
        )

    # ==================== STATE TRANSITION METHODS ====================
    def cancel(self) -> BookingStatus:
        """Mark booking as cancelled and return the previous status.

        No current-state check is made: a cancelled or completed booking
        is overwritten to cancelled as well.
        """
        previous = self.status
        self.status = BookingStatus.CANCELLED
        return previous

    # ==================== QUERY METHODS ====================
    @property
    def nights(self) -> int:
        return nights_between(self.check_in, self.check_out)

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    # ==================== PERSISTENCE MAPPING ====================
    def to_document(self) -> dict:
        """Fields written to the document store; id and created_at are server-assigned"""
        return self.model_dump(mode="json", exclude={"booking_id", "created_at"})

    @classmethod
    def from_document(cls, document_id: str, data: dict) -> "Booking":
        return cls(booking_id=document_id, **data)

    # ==================== VALIDATION HELPERS ====================
    @staticmethod
    def _validate_stay(check_in: StayDate, check_out: StayDate) -> None:
        nights_between(check_in, check_out)

    @staticmethod
    def _validate_guests(guests: int) -> None:
        if guests < 1:
            raise InvalidRange("At least one guest is required")


# ==================== USER RECORDS ====================

class Favorite(BaseModel):
    """Hotel saved by a user"""
    favorite_id: Optional[str] = None
    user_id: str
    hotel_id: str
    hotel_data: HotelSnapshot
    added_at: Optional[datetime] = None

    @staticmethod
    def create(user_id: str, hotel: Hotel) -> "Favorite":
        return Favorite(
            user_id=user_id,
            hotel_id=hotel.id,
            hotel_data=HotelSnapshot.from_hotel(hotel)
        )

    def to_document(self) -> dict:
        return self.model_dump(mode="json", exclude={"favorite_id", "added_at"})

    @classmethod
    def from_document(cls, document_id: str, data: dict) -> "Favorite":
        return cls(favorite_id=document_id, **data)


class SearchHistory(BaseModel):
    """Logged search criteria of a signed-in user"""
    history_id: Optional[str] = None
    user_id: str
    location: str = ""
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    guests: int = 1
    searched_at: Optional[datetime] = None

    def to_document(self) -> dict:
        return self.model_dump(mode="json", exclude={"history_id", "searched_at"})

    @classmethod
    def from_document(cls, document_id: str, data: dict) -> "SearchHistory":
        return cls(history_id=document_id, **data)
