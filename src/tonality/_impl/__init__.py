from .errors import *  # noqa: F401, F403
from .diatonic import *  # noqa: F401, F403
from .note import *  # noqa: F401, F403
from .spelling import *  # noqa: F401, F403
from .key import *  # noqa: F401, F403
from .interval import *  # noqa: F401, F403
from .pitchset import *  # noqa: F401, F403
from .scale import *  # noqa: F401, F403

from . import errors, diatonic, note, spelling, key, interval, pitchset, scale

__all__ = [
    *errors.__all__,
    *diatonic.__all__,
    *note.__all__,
    *spelling.__all__,
    *key.__all__,
    *interval.__all__,
    *pitchset.__all__,
    *scale.__all__,
]
