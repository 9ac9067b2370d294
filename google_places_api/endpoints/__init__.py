"""
Endpoint builders.

- text_search.py / nearby_search.py: Paginated searches (search.py base)
- find_place.py: Candidate lookup by text or phone number
- place_details.py: Full record for one place
- place_photos.py: Photo download
"""

from .search import SearchQuery
from .text_search import TextSearch
from .nearby_search import NearbySearch
from .find_place import FindPlace
from .place_details import PlaceDetails
from .place_photos import PlacePhotos
