"""genlayout package initialization."""

from importlib.metadata import version, PackageNotFoundError

from .api import load_members, run_layout
from .engine import LayoutEngine, compute_layout
from .graph import DuplicateMemberError
from .schemas import GenlayoutError, LayoutEdge, LayoutResult, Member, MemberRecordError

__all__ = [
    "__version__",
    "DuplicateMemberError",
    "GenlayoutError",
    "LayoutEdge",
    "LayoutEngine",
    "LayoutResult",
    "Member",
    "MemberRecordError",
    "compute_layout",
    "load_members",
    "run_layout",
]

try:
    __version__ = version("genlayout")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"
