from .admin_console import AdminConsole
from .csv_exporter import CsvExporter
from .dashboard_service import DashboardService
from .debounce import DebounceTimer
from .draft_form import DraftForm
from .list_controller import ListController
from .record_sorting import RecordSorter, user_sorter
from .tag_catalog import TagCatalog
from .tour_moderation import TourModerationService

__all__ = [
    "AdminConsole",
    "CsvExporter",
    "DashboardService",
    "DebounceTimer",
    "DraftForm",
    "ListController",
    "RecordSorter",
    "user_sorter",
    "TagCatalog",
    "TourModerationService",
]
