"""
Lumenray - the seed of a Python ray tracer

Currently provides:
- Immutable vector/point algebra (Vec3, Point3, Color)
- Rays with parametric point evaluation
- A gradient test image written as plain PPM or any Pillow format
"""

__version__ = "0.1.0"
__author__ = "Lumenray Team"

from .vec3 import (
    Vec3, Point3, Color, NonFiniteError, DegenerateVectorError,
    add, sub, scale, dot, cross, length, length_squared, normalize,
    point_add_vector, point_sub_point
)
from .ray import Ray, DegenerateRayError
from .image import quantize, color_to_triple, to_bytes, ppm_header, write_ppm, save_image
from .gradient import GradientSettings, GradientRenderer, pixel_color
