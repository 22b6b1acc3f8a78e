from .accommodation import IMAGE_LIMITS, Accommodation
from .floor import Floor

__all__ = ["IMAGE_LIMITS", "Accommodation", "Floor"]
