from . import identity, list, logging, state  # noqa
from .computation import *  # noqa
from .errors import *  # noqa
from .functions import always, curry  # noqa
from .identity import Identity, identity_m  # noqa
from .immutable import Immutable  # noqa
from .let import Let, let  # noqa
from .list import ListOps, list_m  # noqa
from .logging import Traced  # noqa
from .monadic import *  # noqa
from .ops import *  # noqa
from .state import StateOps, state_m  # noqa

try:
    from . import hypothesis_strategies  # noqa
except ImportError:
    pass
