"""Default context bootstrap (import side-effect)."""
from .api import set_context
from .bootstrap import build_context

set_context(build_context())
