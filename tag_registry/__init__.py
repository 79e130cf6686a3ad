# Tag registry package: item tagging over an external ownership ledger

from .errors import (
    TagRegistryError,
    AlreadyTagged,
    NotTagged,
    TokenNotBurned,
    Unauthorized,
    ItemNotFound,
    InvalidInput,
    OracleUnavailable,
)
from .models import (
    DEFAULT_ADMIN_ROLE,
    ZERO_ACCOUNT,
    Tag,
    normalize_account,
    parse_item_id,
)
from .events import EventLog, EventType
from .ownership import (
    OwnershipOracle,
    Owned,
    NotFound,
    InMemoryOwnershipLedger,
    HttpOwnershipOracle,
)
from .tag_store import TagStore
from .resolver import RepresentativeItemResolver, DefaultItemHook
from .roles import RoleAuthority
from .storage import RegistryStore
from .registry import TagRegistry
from .logging_config import (
    setup_logging,
    stop_logging,
    get_logger,
    ThreadSafeLoggingConfig,
)

__all__ = [
    "TagRegistryError",
    "AlreadyTagged",
    "NotTagged",
    "TokenNotBurned",
    "Unauthorized",
    "ItemNotFound",
    "InvalidInput",
    "OracleUnavailable",
    "DEFAULT_ADMIN_ROLE",
    "ZERO_ACCOUNT",
    "Tag",
    "normalize_account",
    "parse_item_id",
    "EventLog",
    "EventType",
    "OwnershipOracle",
    "Owned",
    "NotFound",
    "InMemoryOwnershipLedger",
    "HttpOwnershipOracle",
    "TagStore",
    "RepresentativeItemResolver",
    "DefaultItemHook",
    "RoleAuthority",
    "RegistryStore",
    "TagRegistry",
    "setup_logging",
    "stop_logging",
    "get_logger",
    "ThreadSafeLoggingConfig",
]
