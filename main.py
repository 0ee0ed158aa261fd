import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Depends
from datetime import date
from typing import List, Optional
from fastapi.security import OAuth2PasswordRequestForm

from api.schemas import (
    # Hotels
    HotelResponse, HotelDetailsResponse, RoomTypeResponse, ReviewResponse, PriceQuoteResponse,
    # Bookings
    CreateBookingRequest, BookingResponse, CancelBookingResponse,
    # Favorites & history
    AddFavoriteRequest, FavoriteResponse, SearchHistoryResponse, SuccessResponse,
    # Auth
    RegisterRequest, ExternalLoginRequest, UpdateProfileRequest, Token, UserResponse
)
from api.dependencies import (
    get_auth_service, get_booking_service, get_catalog_service, get_favorite_service,
    get_search_history_service, get_search_service, get_current_session, get_optional_session
)
from api.errors import register_exception_handlers
from application.services import (
    AuthService, BookingService, CatalogService, FavoriteService, SearchHistoryService, SearchService
)
from application.session import SessionContext
from domain.auth import AuthResult, ExternalProfile
from domain.entities import HotelSnapshot, RoomTypeSnapshot
from domain.enums import BookingStatus, RoomTier
from domain.value_objects import SearchCriteria
from infrastructure.config import get_settings
from infrastructure.logging_setup import setup_logging
from infrastructure.security import create_access_token

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    settings = get_settings()
    result = await get_auth_service().register(
        settings.demo_user_email, settings.demo_user_password, settings.demo_user_display_name
    )
    if result.success:
        logger.info("Seeded demo user %s", settings.demo_user_email)
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Hotel search and booking API",
    version=settings.app_version,
    lifespan=lifespan
)
register_exception_handlers(app)

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

@app.get("/api/enums/booking-status", tags=["Enum Reference"])
async def get_booking_statuses():
    """Get all BookingStatus enum values"""
    return {
        "values": [item.value for item in BookingStatus],
        "description": "Booking status values: confirmed, cancelled, completed"
    }

@app.get("/api/enums/room-tier", tags=["Enum Reference"])
async def get_room_tiers():
    """Get all RoomTier enum values"""
    return {
        "values": [item.value for item in RoomTier],
        "description": "Room tier values: standard, deluxe, suite"
    }

# ============================================================================
# AUTH ENDPOINTS
# ============================================================================

def _token_response(result: AuthResult) -> Token:
    access_token = create_access_token(data={"sub": result.user.uid, "sid": result.session_id})
    return Token(access_token=access_token, token_type="bearer", user=_user_to_response(result.user))

@app.post("/api/auth/register", response_model=Token, status_code=201, tags=["Auth"])
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Create an account and sign in"""
    result = await service.register(request.email, request.password, request.display_name)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)
    return _token_response(result)

@app.post("/token", response_model=Token, tags=["Auth"])
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthService = Depends(get_auth_service)
):
    """Sign in with email (as username) and password"""
    result = await service.login(form_data.username, form_data.password)
    if not result.success:
        raise HTTPException(
            status_code=401,
            detail=result.error,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _token_response(result)

@app.post("/api/auth/external", response_model=Token, tags=["Auth"])
async def login_with_external_provider(
    request: ExternalLoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Sign in with an identity asserted by an external provider"""
    profile = ExternalProfile(
        provider=request.provider,
        subject=request.subject,
        email=request.email,
        display_name=request.display_name
    )
    result = await service.login_with_external_provider(profile)
    if not result.success:
        raise HTTPException(status_code=401, detail=result.error)
    return _token_response(result)

@app.post("/api/auth/logout", response_model=SuccessResponse, tags=["Auth"])
async def logout(
    session: SessionContext = Depends(get_current_session),
    service: AuthService = Depends(get_auth_service)
):
    """End the current session; its token stops working"""
    result = await service.logout(session)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)
    return SuccessResponse(message="Logged out")

@app.get("/users/me", response_model=UserResponse, tags=["Auth"])
async def read_users_me(
    session: SessionContext = Depends(get_current_session),
    service: AuthService = Depends(get_auth_service)
):
    return _user_to_response(await service.get_profile(session))

@app.put("/users/me", response_model=UserResponse, tags=["Auth"])
async def update_users_me(
    request: UpdateProfileRequest,
    session: SessionContext = Depends(get_current_session),
    service: AuthService = Depends(get_auth_service)
):
    """Update the display name"""
    return _user_to_response(await service.update_profile(session, request.display_name))

# ============================================================================
# HOTEL ENDPOINTS
# ============================================================================

@app.get("/api/hotels", response_model=List[HotelResponse], tags=["Hotels"])
async def search_hotels(
    location: str = "",
    check_in: Optional[str] = None,
    check_out: Optional[str] = None,
    guests: Optional[str] = None,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    min_rating: Optional[str] = None,
    service: SearchService = Depends(get_search_service),
    session: SessionContext = Depends(get_optional_session)
):
    """Search hotels; signed-in searches are saved to the search history"""
    # Raw strings are validated by SearchCriteria so bad input is a 400
    raw = {
        "location": location,
        "check_in": check_in,
        "check_out": check_out,
        "guests": guests,
        "min_price": min_price,
        "max_price": max_price,
        "min_rating": min_rating,
    }
    criteria = SearchCriteria.from_params(**{k: v for k, v in raw.items() if v not in (None, "")})
    hotels = await service.search_and_record(criteria, session)
    return [_hotel_to_response(h) for h in hotels]

@app.get("/api/hotels/{hotel_id}", response_model=HotelDetailsResponse, tags=["Hotels"])
async def get_hotel(
    hotel_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Get hotel with room types and reviews"""
    details = service.get_hotel_details(hotel_id)
    return HotelDetailsResponse(
        **_hotel_to_response(details).model_dump(),
        rooms=[_room_type_to_response(r) for r in details.rooms],
        reviews=[ReviewResponse(**r.model_dump()) for r in details.reviews]
    )

@app.get("/api/hotels/{hotel_id}/rooms", response_model=List[RoomTypeResponse], tags=["Hotels"])
async def get_hotel_rooms(
    hotel_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Get the room types of a hotel"""
    return [_room_type_to_response(r) for r in service.get_room_types(hotel_id)]

@app.get("/api/hotels/{hotel_id}/quote", response_model=PriceQuoteResponse, tags=["Hotels"])
async def quote_stay(
    hotel_id: str,
    check_in: date,
    check_out: date,
    room_type_id: Optional[str] = None,
    service: CatalogService = Depends(get_catalog_service)
):
    """Price a stay at a hotel"""
    price_quote = service.quote(hotel_id, check_in, check_out, room_type_id)
    return PriceQuoteResponse(**price_quote.model_dump())

# ============================================================================
# BOOKING ENDPOINTS
# ============================================================================

@app.post("/api/bookings", response_model=BookingResponse, status_code=201, tags=["Bookings"])
async def create_booking(
    request: CreateBookingRequest,
    service: BookingService = Depends(get_booking_service),
    catalog_service: CatalogService = Depends(get_catalog_service),
    session: SessionContext = Depends(get_current_session)
):
    """Create a confirmed booking; the price is computed from the catalog"""
    hotel = catalog_service.get_hotel(request.hotel_id)
    room_type_snapshot = None
    if request.room_type_id:
        room_type = catalog_service.get_room_type(request.hotel_id, request.room_type_id)
        room_type_snapshot = RoomTypeSnapshot.from_room_type(room_type)

    booking = await service.create_booking(
        session=session,
        hotel_id=hotel.id,
        hotel_snapshot=HotelSnapshot.from_hotel(hotel),
        room_type_snapshot=room_type_snapshot,
        check_in=request.check_in,
        check_out=request.check_out,
        guests=request.guests
    )
    return _booking_to_response(booking)

@app.get("/api/bookings", response_model=List[BookingResponse], tags=["Bookings"])
async def list_bookings(
    service: BookingService = Depends(get_booking_service),
    session: SessionContext = Depends(get_current_session)
):
    """Get the signed-in user's bookings, newest first"""
    bookings = await service.list_bookings(session)
    return [_booking_to_response(b) for b in bookings]

@app.get("/api/bookings/{booking_id}", response_model=BookingResponse, tags=["Bookings"])
async def get_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
    session: SessionContext = Depends(get_current_session)
):
    """Get booking by ID"""
    return _booking_to_response(await service.get_booking(session, booking_id))

@app.post("/api/bookings/{booking_id}/cancel", response_model=CancelBookingResponse, tags=["Bookings"])
async def cancel_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
    session: SessionContext = Depends(get_current_session)
):
    """Cancel booking"""
    booking = await service.cancel_booking(session, booking_id)
    return CancelBookingResponse(booking_id=booking.booking_id, status=booking.status.value)

# ============================================================================
# FAVORITE & SEARCH HISTORY ENDPOINTS
# ============================================================================

@app.post("/api/favorites", response_model=FavoriteResponse, status_code=201, tags=["Favorites"])
async def add_favorite(
    request: AddFavoriteRequest,
    service: FavoriteService = Depends(get_favorite_service),
    catalog_service: CatalogService = Depends(get_catalog_service),
    session: SessionContext = Depends(get_current_session)
):
    """Save a hotel to favorites"""
    hotel = catalog_service.get_hotel(request.hotel_id)
    favorite = await service.add_favorite(session, hotel)
    return FavoriteResponse(**favorite.model_dump())

@app.get("/api/favorites", response_model=List[FavoriteResponse], tags=["Favorites"])
async def list_favorites(
    service: FavoriteService = Depends(get_favorite_service),
    session: SessionContext = Depends(get_current_session)
):
    favorites = await service.list_favorites(session)
    return [FavoriteResponse(**f.model_dump()) for f in favorites]

@app.delete("/api/favorites/{favorite_id}", response_model=SuccessResponse, tags=["Favorites"])
async def remove_favorite(
    favorite_id: str,
    service: FavoriteService = Depends(get_favorite_service),
    session: SessionContext = Depends(get_current_session)
):
    await service.remove_favorite(session, favorite_id)
    return SuccessResponse(message="Favorite removed")

@app.get("/api/search-history", response_model=List[SearchHistoryResponse], tags=["Search History"])
async def list_search_history(
    service: SearchHistoryService = Depends(get_search_history_service),
    session: SessionContext = Depends(get_current_session)
):
    """Get the signed-in user's searches, newest first"""
    history = await service.list_history(session)
    return [SearchHistoryResponse(**h.model_dump()) for h in history]

@app.delete("/api/search-history/{history_id}", response_model=SuccessResponse, tags=["Search History"])
async def delete_search_history(
    history_id: str,
    service: SearchHistoryService = Depends(get_search_history_service),
    session: SessionContext = Depends(get_current_session)
):
    await service.delete_history(session, history_id)
    return SuccessResponse(message="Search history entry removed")

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _user_to_response(user) -> UserResponse:
    """Convert User entity to UserResponse"""
    return UserResponse(
        uid=user.uid,
        email=user.email,
        display_name=user.display_name,
        created_at=user.created_at
    )

def _hotel_to_response(hotel) -> HotelResponse:
    """Convert Hotel entity to HotelResponse"""
    return HotelResponse(
        id=hotel.id,
        name=hotel.name,
        description=hotel.description,
        address=hotel.address,
        city=hotel.city,
        country=hotel.country,
        rating=hotel.rating,
        review_count=hotel.review_count,
        price=hotel.price,
        currency=hotel.currency,
        images=list(hotel.images),
        amenities=list(hotel.amenities),
        latitude=hotel.latitude,
        longitude=hotel.longitude
    )

def _room_type_to_response(room_type) -> RoomTypeResponse:
    """Convert RoomType entity to RoomTypeResponse"""
    return RoomTypeResponse(
        id=room_type.id,
        tier=room_type.tier.value,
        name=room_type.name,
        description=room_type.description,
        price=room_type.price,
        currency=room_type.currency,
        capacity=room_type.capacity,
        amenities=list(room_type.amenities),
        images=list(room_type.images)
    )

def _booking_to_response(booking) -> BookingResponse:
    """Convert Booking entity to BookingResponse"""
    return BookingResponse(
        booking_id=booking.booking_id,
        user_id=booking.user_id,
        hotel_id=booking.hotel_id,
        hotel_data=booking.hotel_data,
        room_type=booking.room_type,
        check_in=booking.check_in,
        check_out=booking.check_out,
        nights=booking.nights,
        guests=booking.guests,
        total_price=booking.total_price,
        currency=booking.currency,
        status=booking.status.value,
        created_at=booking.created_at
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
