"""RegionCodeProvider — company name → 15-digit registration number, or "".

The number is the matched division code, an 8-digit serial and an
ISO 7064 MOD 11,10 check digit. The serial is a hash of the name, so the
same name always yields the same number.
"""

from __future__ import annotations

import hashlib
import logging

from sealforge.region.divisions import CITIES, DIVISION_SUFFIXES, GENERIC_PREFIXES, PROVINCES

logger = logging.getLogger(__name__)

SERIAL_DIGITS = 8


def mod11_10_check_digit(digits: str) -> int:
    """ISO 7064 MOD 11,10 check digit, as used by GB/T 17710 registration numbers."""
    p = 10
    for ch in digits:
        s = (p + int(ch)) % 10 or 10
        p = (s * 2) % 11
    return (11 - p) % 10


def is_valid_registration_number(number: str) -> bool:
    if len(number) != 15 or not number.isdigit():
        return False
    return mod11_10_check_digit(number[:-1]) == int(number[-1])


def _strip_suffix(text: str) -> str:
    for suffix in DIVISION_SUFFIXES:
        if text.startswith(suffix):
            return text[len(suffix):]
    return text


def _longest_prefix(text: str, table: dict[str, str]) -> str | None:
    best = None
    for key in table:
        if text.startswith(key) and (best is None or len(key) > len(best)):
            best = key
    return best


class RegionCodeProvider:
    """Prefix-based province/city lookup feeding a name-seeded serial."""

    def __init__(
        self,
        provinces: dict[str, str] | None = None,
        cities: dict[str, str] | None = None,
    ) -> None:
        self.provinces = dict(PROVINCES if provinces is None else provinces)
        self.cities = dict(CITIES if cities is None else cities)

    def division_code(self, company_name: str) -> str:
        """Most specific division code found at the start of the name, or ""."""
        text = company_name.strip()
        for prefix in GENERIC_PREFIXES:
            if text.startswith(prefix):
                text = text[len(prefix):]
                break

        province = _longest_prefix(text, self.provinces)
        if province is not None:
            rest = _strip_suffix(text[len(province):])
            city = _longest_prefix(rest, self.cities)
            if city is not None:
                return self.cities[city]
            return self.provinces[province]

        city = _longest_prefix(text, self.cities)
        if city is not None:
            return self.cities[city]
        return ""

    def serial(self, company_name: str) -> str:
        digest = hashlib.sha256(company_name.strip().encode("utf-8")).digest()
        value = int.from_bytes(digest[:8], "big") % 10**SERIAL_DIGITS
        return f"{value:0{SERIAL_DIGITS}d}"

    def __call__(self, company_name: str) -> str:
        division = self.division_code(company_name)
        if not division:
            logger.debug("No division prefix in %r", company_name)
            return ""
        body = division + self.serial(company_name)
        return body + str(mod11_10_check_digit(body))
