"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Hotel, HotelDetails, Review


class HotelCatalog(ABC):
    """Read-only repository interface for the hotel catalog"""

    @abstractmethod
    def find_all(self) -> List[Hotel]:
        """Return every hotel in catalog order"""
        pass

    @abstractmethod
    def find_by_id(self, hotel_id: str) -> Optional[Hotel]:
        """Find hotel by ID"""
        pass

    @abstractmethod
    def reviews_for(self, hotel: Hotel) -> List[Review]:
        """Reviews of a hotel"""
        pass

    @abstractmethod
    def details_for(self, hotel_id: str) -> Optional[HotelDetails]:
        """Hotel with derived rooms and reviews"""
        pass
