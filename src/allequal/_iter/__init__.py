from ._eager import Seq
from ._lazy import Iter

__all__ = ["Iter", "Seq"]
