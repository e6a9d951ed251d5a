from __future__ import annotations

from dirtree.domain.constants import VERSION as __version__

__all__ = ["__version__"]
