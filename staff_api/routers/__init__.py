"""
API routers.
"""
from . import areas, departamentos, empleados, encargados, health

RESOURCE_ROUTERS = (
    areas.router,
    departamentos.router,
    empleados.router,
    encargados.router,
)

__all__ = ["RESOURCE_ROUTERS", "health"]
