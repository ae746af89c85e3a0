from __future__ import annotations

from edgeping.api.origin import origin_from_headers

__all__ = ["origin_from_headers"]
