from .geo_point import GeoPoint

from .animal import Animal, NIL_ID
from .category import Category
from .species import Species
