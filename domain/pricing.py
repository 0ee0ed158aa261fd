"""Domain Pricing - room tiers, nights and stay cost"""
from decimal import Decimal
from typing import List, NamedTuple, Optional

from pydantic import BaseModel

from domain.entities import Hotel, RoomType
from domain.enums import RoomTier
from domain.exceptions import InvalidRange
from domain.value_objects import StayDate, nights_between


class TierSpec(NamedTuple):
    tier: RoomTier
    name: str
    description: str
    multiplier: Decimal
    capacity: int
    amenities: List[str]


_BASIC_AMENITIES = ["エアコン", "テレビ", "冷蔵庫", "バスタブ"]

ROOM_TIERS: List[TierSpec] = [
    TierSpec(
        tier=RoomTier.STANDARD,
        name="スタンダードルーム",
        description="快適な滞在のための基本的な設備が整ったお部屋です。",
        multiplier=Decimal("1.0"),
        capacity=2,
        amenities=_BASIC_AMENITIES,
    ),
    TierSpec(
        tier=RoomTier.DELUXE,
        name="デラックスルーム",
        description="より広いお部屋で、追加のアメニティが提供されます。",
        multiplier=Decimal("1.3"),
        capacity=2,
        amenities=_BASIC_AMENITIES + ["ミニバー", "バスローブ"],
    ),
    TierSpec(
        tier=RoomTier.SUITE,
        name="スイートルーム",
        description="最高級の設備とサービスを備えた広々としたお部屋です。",
        multiplier=Decimal("2.0"),
        capacity=4,
        amenities=_BASIC_AMENITIES + ["ミニバー", "バスローブ", "リビングエリア", "キッチン"],
    ),
]


def room_types_for(hotel: Hotel) -> List[RoomType]:
    """Derive the standard, deluxe and suite room types of a hotel"""
    rooms = []
    for index, spec in enumerate(ROOM_TIERS):
        image = hotel.images[index] if index < len(hotel.images) else None
        if image is None and hotel.images:
            image = hotel.images[0]
        rooms.append(RoomType(
            id=f"{hotel.id}-room-{index + 1}",
            tier=spec.tier,
            name=spec.name,
            description=spec.description,
            price=hotel.price * spec.multiplier,
            currency=hotel.currency,
            capacity=spec.capacity,
            amenities=list(spec.amenities),
            images=[image] if image else [],
        ))
    return rooms


def find_room_type(hotel: Hotel, room_type_id: str) -> Optional[RoomType]:
    for room in room_types_for(hotel):
        if room.id == room_type_id:
            return room
    return None


def nights(check_in: StayDate, check_out: StayDate) -> int:
    """Whole nights between two dates, rounding partial days up.

    Raises InvalidRange when check-out is not strictly after check-in.
    """
    return nights_between(check_in, check_out)


def total_cost(price_per_night: Decimal, nights: int) -> Decimal:
    """Unrounded stay cost; rounding belongs to display"""
    if nights < 1:
        raise InvalidRange("A stay must be at least one night")
    return price_per_night * nights


class PriceQuote(BaseModel):
    """Priced stay for a hotel and optional room type"""
    hotel_id: str
    room_type_id: Optional[str] = None
    nights: int
    price_per_night: Decimal
    total_price: Decimal
    currency: str


def quote(hotel: Hotel, room_type: Optional[RoomType],
          check_in: StayDate, check_out: StayDate) -> PriceQuote:
    """Price a stay at the room type's rate, or the hotel rate without one"""
    stay_nights = nights(check_in, check_out)
    price = room_type.price if room_type else hotel.price
    currency = room_type.currency if room_type else hotel.currency
    return PriceQuote(
        hotel_id=hotel.id,
        room_type_id=room_type.id if room_type else None,
        nights=stay_nights,
        price_per_night=price,
        total_price=total_cost(price, stay_nights),
        currency=currency,
    )
