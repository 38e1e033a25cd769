# Defines the closed code tables shared by every Google Maps Platform API.
# Member values are the exact strings the web services send and expect.

from enum import Enum
from typing import Iterable

from api_errors import (
    InvalidAvoidCode,
    InvalidCodeError,
    InvalidElementStatusCode,
    InvalidLanguageCode,
    InvalidLocationTypeCode,
    InvalidManeuverTypeCode,
    InvalidPlaceTypeCode,
    InvalidRegionCode,
    InvalidRoadsStatusCode,
    InvalidStatusCode,
    InvalidTrafficModelCode,
    InvalidTransitModeCode,
    InvalidTransitRoutePreferenceCode,
    InvalidTravelModeCode,
    InvalidUnitSystemCode,
    InvalidVehicleTypeCode,
)


class CodeTable(str, Enum):
    """
    Base class for the code tables.
    `to_code` is the wire contract, `to_label` is for presentation only.
    """

    @classmethod
    def from_code(cls, code: str, api: str = "Platform") -> "CodeTable":
        """Parses a wire code. `api` names the API surface in the error message."""
        try:
            return cls(code)
        except InvalidCodeError as e:
            e.api = api
            raise

    @classmethod
    def _missing_(cls, value):
        raise _INVALID_CODE_ERRORS[cls](value)

    @classmethod
    def join(cls, items: Iterable["CodeTable"], separator: str = ",") -> str:
        return separator.join(cls(item).to_code() for item in items)

    @classmethod
    def to_csv(cls, items: Iterable["CodeTable"]) -> str:
        """Comma-separated codes, e.g. `bar,cafe`."""
        return cls.join(items, ",")

    @classmethod
    def to_pipes(cls, items: Iterable["CodeTable"]) -> str:
        """Pipe-separated codes, the form multi-value query parameters take."""
        return cls.join(items, "|")

    def to_code(self) -> str:
        return self.value

    def to_label(self) -> str:
        label = _LABELS.get(type(self), {}).get(self.value)
        if label is None:
            label = self.value.replace("_", " ").replace("-", " ").lower().title()
        return label

    def __str__(self) -> str:
        return self.value


class PlaceType(CodeTable):
    """Types or categories of a place, e.g. a "country" or a "shopping_mall"."""
    # Table 1: types supported in place searches and returned with results.
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
    GROCERY_OR_SUPERMARKET = "grocery_or_supermarket"
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
    PLUS_CODE = "plus_code"
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
    # Table 2: additional types returned with results.
    ADMINISTRATIVE_AREA_LEVEL_1 = "administrative_area_level_1"
    ADMINISTRATIVE_AREA_LEVEL_2 = "administrative_area_level_2"
    ADMINISTRATIVE_AREA_LEVEL_3 = "administrative_area_level_3"
    ADMINISTRATIVE_AREA_LEVEL_4 = "administrative_area_level_4"
    ADMINISTRATIVE_AREA_LEVEL_5 = "administrative_area_level_5"
    ARCHIPELAGO = "archipelago"
    COLLOQUIAL_AREA = "colloquial_area"
    CONTINENT = "continent"
    COUNTRY = "country"
    ESTABLISHMENT = "establishment"
    FINANCE = "finance"
    FLOOR = "floor"
    FOOD = "food"
    GENERAL_CONTRACTOR = "general_contractor"
    GEOCODE = "geocode"
    HEALTH = "health"
    INTERSECTION = "intersection"
    LOCALITY = "locality"
    NATURAL_FEATURE = "natural_feature"
    NEIGHBORHOOD = "neighborhood"
    PLACE_OF_WORSHIP = "place_of_worship"
    POINT_OF_INTEREST = "point_of_interest"
    POLITICAL = "political"
    POST_BOX = "post_box"
    POSTAL_CODE = "postal_code"
    POSTAL_CODE_PREFIX = "postal_code_prefix"
    POSTAL_CODE_SUFFIX = "postal_code_suffix"
    POSTAL_TOWN = "postal_town"
    PREMISE = "premise"
    ROOM = "room"
    ROUTE = "route"
    STREET_ADDRESS = "street_address"
    STREET_NUMBER = "street_number"
    SUBLOCALITY = "sublocality"
    SUBLOCALITY_LEVEL_1 = "sublocality_level_1"
    SUBLOCALITY_LEVEL_2 = "sublocality_level_2"
    SUBLOCALITY_LEVEL_3 = "sublocality_level_3"
    SUBLOCALITY_LEVEL_4 = "sublocality_level_4"
    SUBLOCALITY_LEVEL_5 = "sublocality_level_5"
    SUBPREMISE = "subpremise"
    TOWN_SQUARE = "town_square"
    # Table 3: type collections for autocomplete requests.
    ADDRESS = "address"
    REGIONS = "regions"
    CITIES = "cities"

    @classmethod
    def default(cls) -> "PlaceType":
        return cls.LOCALITY


class TravelMode(CodeTable):
    """Mode of transportation. Responses send the codes in upper case."""
    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return super()._missing_(value)

    @classmethod
    def default(cls) -> "TravelMode":
        return cls.DRIVING


class ManeuverType(CodeTable):
    """The action to take for a step, used to pick the icon to display."""
    FERRY = "ferry"
    FERRY_TRAIN = "ferry-train"
    FORK_LEFT = "fork-left"
    FORK_RIGHT = "fork-right"
    KEEP_LEFT = "keep-left"
    KEEP_RIGHT = "keep-right"
    MERGE = "merge"
    RAMP_LEFT = "ramp-left"
    RAMP_RIGHT = "ramp-right"
    ROUNDABOUT_LEFT = "roundabout-left"
    ROUNDABOUT_RIGHT = "roundabout-right"
    STRAIGHT = "straight"
    TURN_LEFT = "turn-left"
    TURN_RIGHT = "turn-right"
    TURN_SHARP_LEFT = "turn-sharp-left"
    TURN_SHARP_RIGHT = "turn-sharp-right"
    TURN_SLIGHT_LEFT = "turn-slight-left"
    TURN_SLIGHT_RIGHT = "turn-slight-right"
    UTURN_LEFT = "uturn-left"
    UTURN_RIGHT = "uturn-right"


class Status(CodeTable):
    """Top-level `status` of a Directions, Distance Matrix or Geocoding response."""
    INVALID_REQUEST = "INVALID_REQUEST"
    MAX_DIMENSIONS_EXCEEDED = "MAX_DIMENSIONS_EXCEEDED"
    MAX_ELEMENTS_EXCEEDED = "MAX_ELEMENTS_EXCEEDED"
    MAX_ROUTE_LENGTH_EXCEEDED = "MAX_ROUTE_LENGTH_EXCEEDED"
    MAX_WAYPOINTS_EXCEEDED = "MAX_WAYPOINTS_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    OK = "OK"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    ZERO_RESULTS = "ZERO_RESULTS"


class ElementStatus(CodeTable):
    """Status of a single origin/destination pairing in a distance matrix."""
    MAX_ROUTE_LENGTH_EXCEEDED = "MAX_ROUTE_LENGTH_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"


class RoadsStatus(CodeTable):
    """`error.status` of a failed Roads API response. These are the google.rpc status codes."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"
    INTERNAL = "INTERNAL"
    UNAVAILABLE = "UNAVAILABLE"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FAILED_PRECONDITION = "FAILED_PRECONDITION"
    DEADLINE_EXCEEDED = "DEADLINE_EXCEEDED"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    UNIMPLEMENTED = "UNIMPLEMENTED"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"
    ABORTED = "ABORTED"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    DATA_LOSS = "DATA_LOSS"


class VehicleType(CodeTable):
    BUS = "BUS"
    CABLE_CAR = "CABLE_CAR"
    COMMUTER_TRAIN = "COMMUTER_TRAIN"
    FERRY = "FERRY"
    FUNICULAR = "FUNICULAR"
    GONDOLA_LIFT = "GONDOLA_LIFT"
    HEAVY_RAIL = "HEAVY_RAIL"
    HIGH_SPEED_TRAIN = "HIGH_SPEED_TRAIN"
    INTERCITY_BUS = "INTERCITY_BUS"
    LONG_DISTANCE_TRAIN = "LONG_DISTANCE_TRAIN"
    METRO_RAIL = "METRO_RAIL"
    MONORAIL = "MONORAIL"
    OTHER = "OTHER"
    RAIL = "RAIL"
    SHARE_TAXI = "SHARE_TAXI"
    SUBWAY = "SUBWAY"
    TRAM = "TRAM"
    TROLLEYBUS = "TROLLEYBUS"


class UnitSystem(CodeTable):
    IMPERIAL = "imperial"
    METRIC = "metric"

    @classmethod
    def default(cls) -> "UnitSystem":
        return cls.METRIC


class TransitMode(CodeTable):
    BUS = "bus"
    RAIL = "rail"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"


class TransitRoutePreference(CodeTable):
    FEWER_TRANSFERS = "fewer_transfers"
    LESS_WALKING = "less_walking"


class TrafficModel(CodeTable):
    BEST_GUESS = "best_guess"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"

    @classmethod
    def default(cls) -> "TrafficModel":
        return cls.BEST_GUESS


class Avoid(CodeTable):
    """Features a route should avoid (the `avoid` parameter)."""
    FERRIES = "ferries"
    HIGHWAYS = "highways"
    INDOOR = "indoor"
    TOLLS = "tolls"


class LocationType(CodeTable):
    """Precision of a geocoded location."""
    APPROXIMATE = "APPROXIMATE"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    ROOFTOP = "ROOFTOP"


class Language(CodeTable):
    AFRIKAANS = "af"
    ALBANIAN = "sq"
    AMHARIC = "am"
    ARABIC = "ar"
    ARMENIAN = "hy"
    AZERBAIJANI = "az"
    BASQUE = "eu"
    BELARUSIAN = "be"
    BENGALI = "bn"
    BOSNIAN = "bs"
    BULGARIAN = "bg"
    BURMESE = "my"
    CATALAN = "ca"
    CHINESE = "zh"
    CHINESE_SIMPLIFIED = "zh-CN"
    CHINESE_HONG_KONG = "zh-HK"
    CHINESE_TRADITIONAL = "zh-TW"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ENGLISH_AUSTRALIAN = "en-AU"
    ENGLISH_GREAT_BRITAIN = "en-GB"
    ESTONIAN = "et"
    FARSI = "fa"
    FINNISH = "fi"
    FILIPINO = "fil"
    FRENCH = "fr"
    FRENCH_CANADA = "fr-CA"
    GALICIAN = "gl"
    GEORGIAN = "ka"
    GERMAN = "de"
    GREEK = "el"
    GUJARATI = "gu"
    HEBREW = "iw"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KANNADA = "kn"
    KAZAKH = "kk"
    KHMER = "km"
    KOREAN = "ko"
    KYRGYZ = "ky"
    LAO = "lo"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAY = "ms"
    MALAYALAM = "ml"
    MARATHI = "mr"
    MONGOLIAN = "mn"
    NEPALI = "ne"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt-BR"
    PORTUGUESE_PORTUGAL = "pt-PT"
    PUNJABI = "pa"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SINHALESE = "si"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SPANISH_LATIN_AMERICA = "es-419"
    SWAHILI = "sw"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    UZBEK = "uz"
    VIETNAMESE = "vi"
    ZULU = "zu"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    def to_label(self) -> str:
        label = _LABELS.get(type(self), {}).get(self.value)
        if label is None:
            label = self.name.replace("_", " ").title()
        return label


class Region(CodeTable):
    """
    Region biasing, given as a ccTLD ("country code top-level domain").
    Codes are lower case; parsing is case-insensitive. The United Kingdom is
    `uk`, not its ISO 3166-1 code `gb`.
    """
    AFGHANISTAN = "af"
    ALBANIA = "al"
    ALGERIA = "dz"
    AMERICAN_SAMOA = "as"
    ANDORRA = "ad"
    ANGOLA = "ao"
    ANGUILLA = "ai"
    ANTARCTICA = "aq"
    ANTIGUA_AND_BARBUDA = "ag"
    ARGENTINA = "ar"
    ARMENIA = "am"
    ARUBA = "aw"
    ASCENSION_ISLAND = "ac"
    AUSTRALIA = "au"
    AUSTRIA = "at"
    AZERBAIJAN = "az"
    BAHAMAS = "bs"
    BAHRAIN = "bh"
    BANGLADESH = "bd"
    BARBADOS = "bb"
    BELARUS = "by"
    BELGIUM = "be"
    BELIZE = "bz"
    BENIN = "bj"
    BERMUDA = "bm"
    BHUTAN = "bt"
    BOLIVIA = "bo"
    BOSNIA_AND_HERZEGOVINA = "ba"
    BOTSWANA = "bw"
    BOUVET_ISLAND = "bv"
    BRAZIL = "br"
    BRITISH_INDIAN_OCEAN_TERRITORY = "io"
    BRITISH_VIRGIN_ISLANDS = "vg"
    BRUNEI = "bn"
    BULGARIA = "bg"
    BURKINA_FASO = "bf"
    BURUNDI = "bi"
    CAMBODIA = "kh"
    CAMEROON = "cm"
    CANADA = "ca"
    CAPE_VERDE = "cv"
    CARIBBEAN_NETHERLANDS = "bq"
    CATALONIA = "cat"
    CAYMAN_ISLANDS = "ky"
    CENTRAL_AFRICAN_REPUBLIC = "cf"
    CHAD = "td"
    CHILE = "cl"
    CHINA = "cn"
    CHRISTMAS_ISLAND = "cx"
    COCOS_KEELING_ISLANDS = "cc"
    COLOMBIA = "co"
    COMOROS = "km"
    CONGO_BRAZZAVILLE = "cg"
    CONGO_KINSHASA = "cd"
    COOK_ISLANDS = "ck"
    COSTA_RICA = "cr"
    COTE_DIVOIRE = "ci"
    CROATIA = "hr"
    CUBA = "cu"
    CURACAO = "cw"
    CYPRUS = "cy"
    CZECHIA = "cz"
    DENMARK = "dk"
    DJIBOUTI = "dj"
    DOMINICA = "dm"
    DOMINICAN_REPUBLIC = "do"
    ECUADOR = "ec"
    EGYPT = "eg"
    EL_SALVADOR = "sv"
    EQUATORIAL_GUINEA = "gq"
    ERITREA = "er"
    ESTONIA = "ee"
    ESWATINI = "sz"
    ETHIOPIA = "et"
    EUROPEAN_UNION = "eu"
    FALKLAND_ISLANDS = "fk"
    FAROE_ISLANDS = "fo"
    FIJI = "fj"
    FINLAND = "fi"
    FRANCE = "fr"
    FRENCH_GUIANA = "gf"
    FRENCH_POLYNESIA = "pf"
    FRENCH_SOUTHERN_TERRITORIES = "tf"
    GABON = "ga"
    GAMBIA = "gm"
    GEORGIA = "ge"
    GERMANY = "de"
    GHANA = "gh"
    GIBRALTAR = "gi"
    GREECE = "gr"
    GREENLAND = "gl"
    GRENADA = "gd"
    GUADELOUPE = "gp"
    GUAM = "gu"
    GUATEMALA = "gt"
    GUERNSEY = "gg"
    GUINEA = "gn"
    GUINEA_BISSAU = "gw"
    GUYANA = "gy"
    HAITI = "ht"
    HEARD_AND_MCDONALD_ISLANDS = "hm"
    HONDURAS = "hn"
    HONG_KONG = "hk"
    HUNGARY = "hu"
    ICELAND = "is"
    INDIA = "in"
    INDONESIA = "id"
    IRAN = "ir"
    IRAQ = "iq"
    IRELAND = "ie"
    ISLE_OF_MAN = "im"
    ISRAEL = "il"
    ITALY = "it"
    JAMAICA = "jm"
    JAPAN = "jp"
    JERSEY = "je"
    JORDAN = "jo"
    KAZAKHSTAN = "kz"
    KENYA = "ke"
    KIRIBATI = "ki"
    KOSOVO = "xk"
    KUWAIT = "kw"
    KYRGYZSTAN = "kg"
    LAOS = "la"
    LATVIA = "lv"
    LEBANON = "lb"
    LESOTHO = "ls"
    LIBERIA = "lr"
    LIBYA = "ly"
    LIECHTENSTEIN = "li"
    LITHUANIA = "lt"
    LUXEMBOURG = "lu"
    MACAU = "mo"
    MADAGASCAR = "mg"
    MALAWI = "mw"
    MALAYSIA = "my"
    MALDIVES = "mv"
    MALI = "ml"
    MALTA = "mt"
    MARSHALL_ISLANDS = "mh"
    MARTINIQUE = "mq"
    MAURITANIA = "mr"
    MAURITIUS = "mu"
    MAYOTTE = "yt"
    MEXICO = "mx"
    MICRONESIA = "fm"
    MOLDOVA = "md"
    MONACO = "mc"
    MONGOLIA = "mn"
    MONTENEGRO = "me"
    MONTSERRAT = "ms"
    MOROCCO = "ma"
    MOZAMBIQUE = "mz"
    MYANMAR = "mm"
    NAMIBIA = "na"
    NAURU = "nr"
    NEPAL = "np"
    NETHERLANDS = "nl"
    NEW_CALEDONIA = "nc"
    NEW_ZEALAND = "nz"
    NICARAGUA = "ni"
    NIGER = "ne"
    NIGERIA = "ng"
    NIUE = "nu"
    NORFOLK_ISLAND = "nf"
    NORTH_KOREA = "kp"
    NORTH_MACEDONIA = "mk"
    NORTHERN_MARIANA_ISLANDS = "mp"
    NORWAY = "no"
    OMAN = "om"
    PAKISTAN = "pk"
    PALAU = "pw"
    PALESTINE = "ps"
    PANAMA = "pa"
    PAPUA_NEW_GUINEA = "pg"
    PARAGUAY = "py"
    PERU = "pe"
    PHILIPPINES = "ph"
    PITCAIRN_ISLANDS = "pn"
    POLAND = "pl"
    PORTUGAL = "pt"
    PUERTO_RICO = "pr"
    QATAR = "qa"
    REUNION = "re"
    ROMANIA = "ro"
    RUSSIA = "ru"
    RWANDA = "rw"
    SAINT_BARTHELEMY = "bl"
    SAINT_HELENA = "sh"
    SAINT_KITTS_AND_NEVIS = "kn"
    SAINT_LUCIA = "lc"
    SAINT_MARTIN = "mf"
    SAINT_PIERRE_AND_MIQUELON = "pm"
    SAINT_VINCENT_AND_THE_GRENADINES = "vc"
    SAMOA = "ws"
    SAN_MARINO = "sm"
    SAO_TOME_AND_PRINCIPE = "st"
    SAUDI_ARABIA = "sa"
    SENEGAL = "sn"
    SERBIA = "rs"
    SEYCHELLES = "sc"
    SIERRA_LEONE = "sl"
    SINGAPORE = "sg"
    SINT_MAARTEN = "sx"
    SLOVAKIA = "sk"
    SLOVENIA = "si"
    SOLOMON_ISLANDS = "sb"
    SOMALIA = "so"
    SOUTH_AFRICA = "za"
    SOUTH_GEORGIA_AND_SOUTH_SANDWICH_ISLANDS = "gs"
    SOUTH_KOREA = "kr"
    SOUTH_SUDAN = "ss"
    SPAIN = "es"
    SRI_LANKA = "lk"
    SUDAN = "sd"
    SURINAME = "sr"
    SVALBARD_AND_JAN_MAYEN = "sj"
    SWEDEN = "se"
    SWITZERLAND = "ch"
    SYRIA = "sy"
    TAIWAN = "tw"
    TAJIKISTAN = "tj"
    TANZANIA = "tz"
    THAILAND = "th"
    TIMOR_LESTE = "tl"
    TOGO = "tg"
    TOKELAU = "tk"
    TONGA = "to"
    TRINIDAD_AND_TOBAGO = "tt"
    TUNISIA = "tn"
    TURKEY = "tr"
    TURKMENISTAN = "tm"
    TURKS_AND_CAICOS_ISLANDS = "tc"
    TUVALU = "tv"
    UGANDA = "ug"
    UKRAINE = "ua"
    UNITED_ARAB_EMIRATES = "ae"
    UNITED_KINGDOM = "uk"
    UNITED_STATES = "us"
    US_VIRGIN_ISLANDS = "vi"
    URUGUAY = "uy"
    UZBEKISTAN = "uz"
    VANUATU = "vu"
    VATICAN_CITY = "va"
    VENEZUELA = "ve"
    VIETNAM = "vn"
    WALLIS_AND_FUTUNA = "wf"
    WESTERN_SAHARA = "eh"
    YEMEN = "ye"
    ZAMBIA = "zm"
    ZIMBABWE = "zw"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return super()._missing_(value)

    def to_label(self) -> str:
        label = _LABELS.get(type(self), {}).get(self.value)
        if label is None:
            label = self.name.replace("_", " ").title()
            for word in ("And", "Of", "The"):
                label = label.replace(f" {word} ", f" {word.lower()} ")
        return label


# --- Lookup tables built once at import time ---

_INVALID_CODE_ERRORS = {
    PlaceType: InvalidPlaceTypeCode,
    TravelMode: InvalidTravelModeCode,
    ManeuverType: InvalidManeuverTypeCode,
    Status: InvalidStatusCode,
    ElementStatus: InvalidElementStatusCode,
    RoadsStatus: InvalidRoadsStatusCode,
    VehicleType: InvalidVehicleTypeCode,
    UnitSystem: InvalidUnitSystemCode,
    TransitMode: InvalidTransitModeCode,
    TransitRoutePreference: InvalidTransitRoutePreferenceCode,
    TrafficModel: InvalidTrafficModelCode,
    Avoid: InvalidAvoidCode,
    LocationType: InvalidLocationTypeCode,
    Language: InvalidLanguageCode,
    Region: InvalidRegionCode,
}

# Labels that do not follow from title-casing the code, keyed by table then code.
_LABELS = {
    PlaceType: {
        "atm": "ATM",
        "cafe": "Café",
        "drugstore": "Drug Store",
        "grocery_or_supermarket": "Grocery or Supermarket",
        "place_of_worship": "Place of Worship",
        "point_of_interest": "Point of Interest",
        "rv_park": "RV Park",
    },
    ManeuverType: {
        "uturn-left": "U-Turn Left",
        "uturn-right": "U-Turn Right",
    },
    Status: {"OK": "OK"},
    ElementStatus: {"OK": "OK"},
    Language: {
        "zh-CN": "Chinese (Simplified)",
        "zh-HK": "Chinese (Hong Kong)",
        "zh-TW": "Chinese (Traditional)",
        "en-AU": "English (Australian)",
        "en-GB": "English (Great Britain)",
        "fr-CA": "French (Canada)",
        "pt-BR": "Portuguese (Brazil)",
        "pt-PT": "Portuguese (Portugal)",
        "es-419": "Spanish (Latin America)",
    },
    Region: {
        "ci": "Côte d'Ivoire",
        "cc": "Cocos (Keeling) Islands",
        "cg": "Congo (Brazzaville)",
        "cd": "Congo (Kinshasa)",
        "cw": "Curaçao",
        "gw": "Guinea-Bissau",
        "re": "Réunion",
        "bl": "Saint Barthélemy",
        "st": "São Tomé and Príncipe",
        "tl": "Timor-Leste",
        "vi": "U.S. Virgin Islands",
    },
}
