"""Closed catalogs used by the listing generators."""

from enum import Enum


class ListingType(str, Enum):
    SALE = "sale"
    RENT = "rent"


class PropertyStyle(str, Enum):
    COLONIAL = "Colonial"
    MODERN = "Modern"
    CONTEMPORARY = "Contemporary"
    VICTORIAN = "Victorian"
    MEDITERRANEAN = "Mediterranean"
    CRAFTSMAN = "Craftsman"
    RANCH = "Ranch"
    MID_CENTURY_MODERN = "Mid-Century Modern"
    TUDOR = "Tudor"
    CAPE_COD = "Cape Cod"
    ART_DECO = "Art Deco"
    GEORGIAN = "Georgian"
    SPANISH_REVIVAL = "Spanish Revival"
    MINIMALIST = "Minimalist"


class Amenity(str, Enum):
    HARDWOOD_FLOORS = "Hardwood floors"
    GRANITE_COUNTERTOPS = "Granite countertops"
    STAINLESS_APPLIANCES = "Stainless steel appliances"
    CENTRAL_AIR = "Central air"
    WALK_IN_CLOSETS = "Walk-in closets"
    CROWN_MOLDING = "Crown molding"
    RECESSED_LIGHTING = "Recessed lighting"
    CUSTOM_CABINETS = "Custom cabinets"
    SMART_HOME = "Smart home features"
    EFFICIENT_WINDOWS = "Energy efficient windows"
    HIGH_CEILINGS = "High ceilings"
    OPEN_FLOOR_PLAN = "Open floor plan"
    FIREPLACE = "Fireplace"
    UPDATED_FIXTURES = "Updated fixtures"
    KITCHEN_ISLAND = "Kitchen island"
    SPA_BATHROOM = "Spa-like bathroom"
    DOUBLE_VANITY = "Double vanity"
    GARDEN_TUB = "Garden tub"


class ImageCategory(str, Enum):
    HOUSE = "house"
    INTERIOR = "interior"
    KITCHEN = "kitchen"
    BEDROOM = "bedroom"
    POOL = "pool"
