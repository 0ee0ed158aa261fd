"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from domain.entities import HotelSnapshot, RoomTypeSnapshot
from domain.value_objects import StayDate


# ============================================================================
# HOTEL SCHEMAS
# ============================================================================

class HotelResponse(BaseModel):
    """Hotel response DTO"""
    id: str
    name: str
    description: str
    address: str
    city: str
    country: str
    rating: float
    review_count: int
    price: Decimal
    currency: str
    images: List[str]
    amenities: List[str]
    latitude: float
    longitude: float


class RoomTypeResponse(BaseModel):
    """Room type response DTO"""
    id: str
    tier: str
    name: str
    description: str
    price: Decimal
    currency: str
    capacity: int
    amenities: List[str]
    images: List[str]


class ReviewResponse(BaseModel):
    """Review response DTO"""
    id: str
    user_name: str
    rating: float
    comment: str
    date: str


class HotelDetailsResponse(HotelResponse):
    """Hotel details response DTO"""
    rooms: List[RoomTypeResponse]
    reviews: List[ReviewResponse]


class PriceQuoteResponse(BaseModel):
    """Price quote response DTO"""
    hotel_id: str
    room_type_id: Optional[str] = None
    nights: int
    price_per_night: Decimal
    total_price: Decimal
    currency: str


# ============================================================================
# BOOKING SCHEMAS
# ============================================================================

class CreateBookingRequest(BaseModel):
    """Create booking request DTO

    Prices are not accepted from the client; they are computed from the
    catalog.
    """
    hotel_id: str
    room_type_id: Optional[str] = None
    check_in: date
    check_out: date
    guests: int = 1


class BookingResponse(BaseModel):
    """Booking response DTO"""
    booking_id: str
    user_id: str
    hotel_id: str
    hotel_data: HotelSnapshot
    room_type: Optional[RoomTypeSnapshot] = None
    check_in: StayDate
    check_out: StayDate
    nights: int
    guests: int
    total_price: Decimal
    currency: str
    status: str
    created_at: Optional[datetime] = None


class CancelBookingResponse(BaseModel):
    """Cancel booking response DTO"""
    success: bool = True
    booking_id: str
    status: str


# ============================================================================
# FAVORITE & SEARCH HISTORY SCHEMAS
# ============================================================================

class AddFavoriteRequest(BaseModel):
    """Add favorite request DTO"""
    hotel_id: str


class FavoriteResponse(BaseModel):
    """Favorite response DTO"""
    favorite_id: str
    user_id: str
    hotel_id: str
    hotel_data: HotelSnapshot
    added_at: Optional[datetime] = None


class SearchHistoryResponse(BaseModel):
    """Search history response DTO"""
    history_id: str
    location: str
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    guests: int
    searched_at: Optional[datetime] = None


class SuccessResponse(BaseModel):
    """Generic success response DTO"""
    success: bool = True
    message: Optional[str] = None


# ============================================================================
# AUTH SCHEMAS
# ============================================================================

class RegisterRequest(BaseModel):
    """Register request DTO"""
    email: str
    password: str
    display_name: str = Field(min_length=1)


class ExternalLoginRequest(BaseModel):
    """External provider login request DTO"""
    provider: str = "google"
    subject: str
    email: str
    display_name: Optional[str] = None


class UpdateProfileRequest(BaseModel):
    """Update profile request DTO"""
    display_name: str = Field(min_length=1, max_length=100)


class UserResponse(BaseModel):
    """User response DTO"""
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    created_at: Optional[datetime] = None


class Token(BaseModel):
    """Token response DTO"""
    access_token: str
    token_type: str
    user: Optional[UserResponse] = None


class TokenData(BaseModel):
    """Token payload DTO"""
    uid: Optional[str] = None
    session_id: Optional[str] = None
