# src/shiprate/adapters/carriers/ups/codes.py
"""
UPS Wire Constants - Service Codes and Unit Labels

Maps UPS service codes to normalized ServiceLevel values and holds the
fixed codes/labels used when building UPS Rating API requests.

Files that USE this module:
- shiprate.adapters.carriers.ups.rating (request building, response parsing)
- tests.test_ups_rating (reverse lookup tests)

Files that this module USES:
- shiprate.domain.models (ServiceLevel, DimensionUnit, WeightUnit)
"""
import re
from typing import Dict, Iterable, List, Mapping, Optional

from shiprate.domain.models import DimensionUnit, ServiceLevel, WeightUnit

CARRIER_NAME = "UPS"

# Declaration order matters for the reverse lookup, see service_code_for().
UPS_SERVICE_CODES: Dict[str, ServiceLevel] = {
    # Domestic
    "03": ServiceLevel.GROUND,  # UPS Ground
    "02": ServiceLevel.TWO_DAY,  # UPS 2nd Day Air
    "01": ServiceLevel.NEXT_DAY,  # UPS Next Day Air
    "14": ServiceLevel.NEXT_DAY_EARLY_AM,  # UPS Next Day Air Early
    "13": ServiceLevel.NEXT_DAY,  # UPS Next Day Air Saver
    "12": ServiceLevel.THREE_DAY,  # UPS 3 Day Select
    # International
    "11": ServiceLevel.INTERNATIONAL_STANDARD,  # UPS Standard
    "07": ServiceLevel.INTERNATIONAL_EXPEDITED,  # UPS Worldwide Express
    "08": ServiceLevel.INTERNATIONAL_EXPEDITED,  # UPS Worldwide Expedited
    "54": ServiceLevel.INTERNATIONAL_EXPEDITED,  # UPS Worldwide Express Plus
    "65": ServiceLevel.INTERNATIONAL_EXPEDITED,  # UPS Worldwide Saver
}

# Customer Supplied Package
DEFAULT_PACKAGING_CODE = "02"
DEFAULT_PACKAGING_DESCRIPTION = "Package"

DIMENSION_UNIT_LABELS: Dict[DimensionUnit, str] = {
    DimensionUnit.IN: "Inches",
    DimensionUnit.CM: "Centimeters",
}

WEIGHT_UNIT_LABELS: Dict[WeightUnit, str] = {
    WeightUnit.LBS: "Pounds",
    WeightUnit.KGS: "Kilograms",
}

_CANONICAL_INDEX = re.compile(r"^(0|[1-9][0-9]*)$")
_MAX_INDEX = 2**32 - 2


def _is_canonical_index(key: str) -> bool:
    return bool(_CANONICAL_INDEX.match(key)) and int(key) <= _MAX_INDEX


def enumeration_order(keys: Iterable[str]) -> List[str]:
    """
    Order table keys the way the UPS integration has always visited them.

    Keys that are canonical non-negative integers (no leading zero) come
    first in ascending numeric order; every other key follows in its
    declaration order. For UPS_SERVICE_CODES this yields
    11, 12, 13, 14, 54, 65, 03, 02, 01, 07, 08.

    Args:
        keys: Table keys in declaration order

    Returns:
        Keys in enumeration order
    """
    keys = list(keys)
    indexes = sorted((k for k in keys if _is_canonical_index(k)), key=int)
    others = [k for k in keys if not _is_canonical_index(k)]
    return indexes + others


def service_code_for(
    level: ServiceLevel,
    table: Mapping[str, ServiceLevel] = UPS_SERVICE_CODES,
) -> Optional[str]:
    """
    Reverse lookup: first code in enumeration order mapping to `level`.

    NEXT_DAY resolves to "13" (Next Day Air Saver), not "01", because "13"
    is visited first. Existing integrations depend on that choice.

    Returns:
        The service code, or None when no code maps to `level`
    """
    for code in enumeration_order(table.keys()):
        if table[code] == level:
            return code
    return None


def service_level_for(
    code: str,
    table: Mapping[str, ServiceLevel] = UPS_SERVICE_CODES,
) -> ServiceLevel:
    """Map a UPS service code to a ServiceLevel, defaulting to GROUND."""
    return table.get(code, ServiceLevel.GROUND)
