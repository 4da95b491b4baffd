from enum import Enum

from prepare_template.models import ManifestSyncStatus, ScanErrorKind


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


SYNC_STATUS_STYLE = {
    ManifestSyncStatus.SYNCED: UIStyle.GREEN.value,
    ManifestSyncStatus.REWRITTEN: UIStyle.YELLOW.value,
}

SCAN_ERROR_STYLE = {
    ScanErrorKind.MISSING: UIStyle.YELLOW.value,
    ScanErrorKind.IO: UIStyle.RED.value,
    ScanErrorKind.UNSUPPORTED: UIStyle.RED.value,
}
