"""控制台各管理视图的服务层。"""

from .catalog import CatalogService, CatalogView
from .dashboard import DashboardService
from .disasters import DisasterService, DisasterView, validate_draft
from .map import MapData, MapService
from .system import SystemService, backup_filename

__all__ = [
    "CatalogService",
    "CatalogView",
    "DashboardService",
    "DisasterService",
    "DisasterView",
    "MapData",
    "MapService",
    "SystemService",
    "backup_filename",
    "validate_draft",
]
