"""Company name → registration code lookup."""

from sealforge.region.provider import RegionCodeProvider, is_valid_registration_number

__all__ = ["RegionCodeProvider", "is_valid_registration_number"]
