from dataclasses import dataclass

from ..constant import Platform


@dataclass
class GetProfileOptions:
    id: str
    platform: Platform


@dataclass
class ListOptions:
    """Every review of one profile on one platform, newest first."""

    business_profile_id: str
    platform: Platform


__all__ = [
    "GetProfileOptions",
    "ListOptions",
]
