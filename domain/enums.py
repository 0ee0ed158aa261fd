"""Domain Enums"""
from enum import Enum


class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class RoomTier(str, Enum):
    STANDARD = "standard"
    DELUXE = "deluxe"
    SUITE = "suite"


class Collection(str, Enum):
    """Document store collections"""
    BOOKINGS = "bookings"
    FAVORITES = "favorites"
    SEARCH_HISTORY = "searchHistory"
    USERS = "users"
