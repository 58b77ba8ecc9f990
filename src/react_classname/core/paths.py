import re

from react_classname.models import TransformOptions

VENDOR_DIRECTORY = "node_modules"

_SEPARATORS_RE = re.compile(r"[\\/]")


def is_eligible(path: str, options: TransformOptions | None = None) -> bool:
    """Return False only for vendored paths when ``skip_node_modules`` is set."""
    if options is None or not options.skip_node_modules:
        return True
    return VENDOR_DIRECTORY not in _SEPARATORS_RE.split(str(path))
