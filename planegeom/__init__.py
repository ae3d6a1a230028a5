from .point import Point, is_point, as_point
from .errors import GeometryError, PointTypeError, CollinearPointsError, CosineLawDomainError
from .config import GeometryConfig, get_geometry_config, set_geometry_config
from .triangle import is_valid_triangle, third_side_by_cosine_law
from .derive import shift_coordinate_2d, find_circumcenter_2d, circumradius_2d

__all__ = [
    'Point',
    'is_point',
    'as_point',
    'GeometryError',
    'PointTypeError',
    'CollinearPointsError',
    'CosineLawDomainError',
    'GeometryConfig',
    'get_geometry_config',
    'set_geometry_config',
    'is_valid_triangle',
    'third_side_by_cosine_law',
    'shift_coordinate_2d',
    'find_circumcenter_2d',
    'circumradius_2d',
]
