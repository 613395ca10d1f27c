"""Registry bootstrap (import side-effect)."""
from .api import set_registry, use_kernel
from .bootstrap import DEFAULT_KERNEL, build_registry

set_registry(build_registry())
use_kernel(DEFAULT_KERNEL)
