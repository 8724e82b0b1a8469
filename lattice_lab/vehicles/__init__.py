# [入口] 负责暴露类，让外部调用更简洁

# lattice_lab/vehicles/__init__.py

from .base import VehicleBase
from .config import VehicleConfig, UnicycleConfig
from .unicycle import UnicycleVehicle

__all__ = ["VehicleBase", "VehicleConfig", "UnicycleConfig", "UnicycleVehicle"]
