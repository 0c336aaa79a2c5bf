from .vec3 import Vec3

__all__ = ["Vec3"]
