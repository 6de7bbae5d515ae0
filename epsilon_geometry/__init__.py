"""
epsilon-geometry - Tolerance-based 2D geometric predicates
"""
import logging

# Configure logging to print to console
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

from epsilon_geometry.geometry.constants import EPSILON
from epsilon_geometry.geometry.point import Point
from epsilon_geometry.geometry.segment import Segment
from epsilon_geometry.geometry.intersection import Along, Intersection
from epsilon_geometry.geometry.tolerance import ToleranceContext, create_context

__version__ = "1.0"

__all__ = [
    'EPSILON',
    'Point',
    'Segment',
    'Along',
    'Intersection',
    'ToleranceContext',
    'create_context',
]
