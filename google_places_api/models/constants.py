"""
Wire constants for the Places API.

Every enum is a str subclass whose value is the exact string sent on the
wire, so members can be passed straight into query parameters.
"""

from enum import Enum


class WireEnum(str, Enum):
    """str enum that renders as its wire value."""

    def __str__(self) -> str:
        return self.value


class Status(WireEnum):
    """Top-level status code returned by every JSON endpoint."""

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    INVALID_REQUEST = "INVALID_REQUEST"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NOT_FOUND = "NOT_FOUND"


class RankBy(WireEnum):
    PROMINENCE = "prominence"
    DISTANCE = "distance"


class InputType(WireEnum):
    TEXT_QUERY = "textquery"
    PHONE_NUMBER = "phonenumber"


class ReviewSort(WireEnum):
    MOST_RELEVANT = "most_relevant"
    NEWEST = "newest"


class Language(WireEnum):
    """Languages supported by the Places API."""

    AF = "af"
    SQ = "sq"
    AM = "am"
    AR = "ar"
    HY = "hy"
    AZ = "az"
    EU = "eu"
    BE = "be"
    BN = "bn"
    BS = "bs"
    BG = "bg"
    MY = "my"
    CA = "ca"
    ZH = "zh"
    ZH_CN = "zh-CN"
    ZH_HK = "zh-HK"
    ZH_TW = "zh-TW"
    HR = "hr"
    CS = "cs"
    DA = "da"
    NL = "nl"
    EN = "en"
    EN_AU = "en-AU"
    EN_GB = "en-GB"
    ET = "et"
    FA = "fa"
    FI = "fi"
    FIL = "fil"
    FR = "fr"
    FR_CA = "fr-CA"
    GL = "gl"
    KA = "ka"
    DE = "de"
    EL = "el"
    GU = "gu"
    IW = "iw"
    HI = "hi"
    HU = "hu"
    IS = "is"
    ID = "id"
    IT = "it"
    JA = "ja"
    KN = "kn"
    KK = "kk"
    KM = "km"
    KO = "ko"
    KY = "ky"
    LO = "lo"
    LV = "lv"
    LT = "lt"
    MK = "mk"
    MS = "ms"
    ML = "ml"
    MR = "mr"
    MN = "mn"
    NE = "ne"
    NO = "no"
    PL = "pl"
    PT = "pt"
    PT_BR = "pt-BR"
    PT_PT = "pt-PT"
    PA = "pa"
    RO = "ro"
    RU = "ru"
    SR = "sr"
    SI = "si"
    SK = "sk"
    SL = "sl"
    ES = "es"
    ES_419 = "es-419"
    SW = "sw"
    SV = "sv"
    TA = "ta"
    TE = "te"
    TH = "th"
    TR = "tr"
    UK = "uk"
    UR = "ur"
    UZ = "uz"
    VI = "vi"
    ZU = "zu"


class PlaceType(WireEnum):
    """Place types accepted by the ``type`` search filter."""

    ACCOUNTING = "accounting"
    AIRPORT = "airport"
    AMUSEMENT_PARK = "amusement_park"
    AQUARIUM = "aquarium"
    ART_GALLERY = "art_gallery"
    ATM = "atm"
    BAKERY = "bakery"
    BANK = "bank"
    BAR = "bar"
    BEAUTY_SALON = "beauty_salon"
    BICYCLE_STORE = "bicycle_store"
    BOOK_STORE = "book_store"
    BOWLING_ALLEY = "bowling_alley"
    BUS_STATION = "bus_station"
    CAFE = "cafe"
    CAMPGROUND = "campground"
    CAR_DEALER = "car_dealer"
    CAR_RENTAL = "car_rental"
    CAR_REPAIR = "car_repair"
    CAR_WASH = "car_wash"
    CASINO = "casino"
    CEMETERY = "cemetery"
    CHURCH = "church"
    CITY_HALL = "city_hall"
    CLOTHING_STORE = "clothing_store"
    CONVENIENCE_STORE = "convenience_store"
    COURTHOUSE = "courthouse"
    DENTIST = "dentist"
    DEPARTMENT_STORE = "department_store"
    DOCTOR = "doctor"
    DRUGSTORE = "drugstore"
    ELECTRICIAN = "electrician"
    ELECTRONICS_STORE = "electronics_store"
    EMBASSY = "embassy"
    FIRE_STATION = "fire_station"
    FLORIST = "florist"
    FUNERAL_HOME = "funeral_home"
    FURNITURE_STORE = "furniture_store"
    GAS_STATION = "gas_station"
    GYM = "gym"
    HAIR_CARE = "hair_care"
    HARDWARE_STORE = "hardware_store"
    HINDU_TEMPLE = "hindu_temple"
    HOME_GOODS_STORE = "home_goods_store"
    HOSPITAL = "hospital"
    INSURANCE_AGENCY = "insurance_agency"
    JEWELRY_STORE = "jewelry_store"
    LAUNDRY = "laundry"
    LAWYER = "lawyer"
    LIBRARY = "library"
    LIGHT_RAIL_STATION = "light_rail_station"
    LIQUOR_STORE = "liquor_store"
    LOCAL_GOVERNMENT_OFFICE = "local_government_office"
    LOCKSMITH = "locksmith"
    LODGING = "lodging"
    MEAL_DELIVERY = "meal_delivery"
    MEAL_TAKEAWAY = "meal_takeaway"
    MOSQUE = "mosque"
    MOVIE_RENTAL = "movie_rental"
    MOVIE_THEATER = "movie_theater"
    MOVING_COMPANY = "moving_company"
    MUSEUM = "museum"
    NIGHT_CLUB = "night_club"
    PAINTER = "painter"
    PARK = "park"
    PARKING = "parking"
    PET_STORE = "pet_store"
    PHARMACY = "pharmacy"
    PHYSIOTHERAPIST = "physiotherapist"
    PLUMBER = "plumber"
    POLICE = "police"
    POST_OFFICE = "post_office"
    PRIMARY_SCHOOL = "primary_school"
    REAL_ESTATE_AGENCY = "real_estate_agency"
    RESTAURANT = "restaurant"
    ROOFING_CONTRACTOR = "roofing_contractor"
    RV_PARK = "rv_park"
    SCHOOL = "school"
    SECONDARY_SCHOOL = "secondary_school"
    SHOE_STORE = "shoe_store"
    SHOPPING_MALL = "shopping_mall"
    SPA = "spa"
    STADIUM = "stadium"
    STORAGE = "storage"
    STORE = "store"
    SUBWAY_STATION = "subway_station"
    SUPERMARKET = "supermarket"
    SYNAGOGUE = "synagogue"
    TAXI_STAND = "taxi_stand"
    TOURIST_ATTRACTION = "tourist_attraction"
    TRAIN_STATION = "train_station"
    TRANSIT_STATION = "transit_station"
    TRAVEL_AGENCY = "travel_agency"
    UNIVERSITY = "university"
    VETERINARY_CARE = "veterinary_care"
    ZOO = "zoo"


class PlaceSearchField(WireEnum):
    """Fields that may be requested from Find Place."""

    # Basic
    BUSINESS_STATUS = "business_status"
    FORMATTED_ADDRESS = "formatted_address"
    VIEWPORT = "geometry/viewport"
    LOCATION = "geometry/location"
    ICON = "icon"
    ICON_MASK_BASE_URI = "icon_mask_base_uri"
    ICON_BACKGROUND_COLOR = "icon_background_color"
    NAME = "name"
    PHOTO = "photos"
    PLACE_ID = "place_id"
    PLUS_CODE = "plus_code"
    TYPE = "type"
    VICINITY = "vicinity"

    # Contact
    OPENING_HOURS = "opening_hours"

    # Atmosphere
    PRICE_LEVEL = "price_level"
    RATING = "rating"
    USER_RATINGS_TOTAL = "user_ratings_total"


class PlaceDetailsField(WireEnum):
    """Fields that may be requested from Place Details."""

    # Basic
    ADDRESS_COMPONENTS = "address_components"
    ADR_ADDRESS = "adr_address"
    BUSINESS_STATUS = "business_status"
    FORMATTED_ADDRESS = "formatted_address"
    VIEWPORT = "geometry/viewport"
    LOCATION = "geometry/location"
    ICON = "icon"
    ICON_MASK_BASE_URI = "icon_mask_base_uri"
    ICON_BACKGROUND_COLOR = "icon_background_color"
    NAME = "name"
    PHOTO = "photos"
    PLACE_ID = "place_id"
    PLUS_CODE = "plus_code"
    TYPE = "type"
    URL = "url"
    UTC_OFFSET = "utc_offset"
    VICINITY = "vicinity"
    WHEELCHAIR_ACCESSIBLE_ENTRANCE = "wheelchair_accessible_entrance"

    # Contact
    FORMATTED_PHONE_NUMBER = "formatted_phone_number"
    INTERNATIONAL_PHONE_NUMBER = "international_phone_number"
    OPENING_HOURS = "opening_hours"
    CURRENT_OPENING_HOURS = "current_opening_hours"
    SECONDARY_OPENING_HOURS = "secondary_opening_hours"
    WEBSITE = "website"

    # Atmosphere
    CURBSIDE_PICKUP = "curbside_pickup"
    DELIVERY = "delivery"
    DINE_IN = "dine_in"
    EDITORIAL_SUMMARY = "editorial_summary"
    PRICE_LEVEL = "price_level"
    RATING = "rating"
    RESERVABLE = "reservable"
    REVIEWS = "reviews"
    SERVES_BEER = "serves_beer"
    SERVES_BREAKFAST = "serves_breakfast"
    SERVES_BRUNCH = "serves_brunch"
    SERVES_DINNER = "serves_dinner"
    SERVES_LUNCH = "serves_lunch"
    SERVES_VEGETARIAN_FOOD = "serves_vegetarian_food"
    SERVES_WINE = "serves_wine"
    TAKEOUT = "takeout"
    USER_RATINGS_TOTAL = "user_ratings_total"
