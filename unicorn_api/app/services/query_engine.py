"""
Query engine for unicorn searches.

Query strings arrive as a flat mapping of string values.  They are
parsed once, by ``UnicornCriteria.from_query``, into a typed criteria
object; ``filter_unicorns`` then keeps the records that satisfy every
applied criterion.  Filtering never sorts, so the result is always an
order-preserving subsequence of the input.

Values that cannot be parsed (``weightLessThan=heavy``,
``vaccinated=maybe``) do not raise.  The criterion is recorded as
malformed and matches no record, which empties the whole result.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from unicorn_api.app.schemas.unicorn import Unicorn, normalize_gender

logger = logging.getLogger(__name__)

# Query string key -> UnicornCriteria attribute.
QUERY_KEYS = {
    "name": "name",
    "loves": "loves",
    "gender": "gender",
    "weightGreaterThan": "weight_greater_than",
    "weightLessThan": "weight_less_than",
    "vampiresExists": "vampires_exists",
    "vampiresGreaterThan": "vampires_greater_than",
    "vaccinated": "vaccinated",
}


# Plain decimal notation only: no "inf", "nan", "1_000" or non-ASCII digits.
_DECIMAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_decimal(text: str) -> float:
    if not _DECIMAL.fullmatch(text.strip()):
        raise ValueError(f"expected a number, got {text!r}")
    return float(text)


def _parse_integer(text: str) -> int:
    if not _INTEGER.fullmatch(text.strip()):
        raise ValueError(f"expected an integer, got {text!r}")
    return int(text)


def _parse_flag(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered not in ("true", "false"):
        raise ValueError(f"expected true or false, got {text!r}")
    return lowered == "true"


def _parse_loves(text: str) -> Tuple[str, ...]:
    return tuple(item.strip().lower() for item in text.split(",") if item.strip())


# Query string key -> parser for its non-blank value.  Only "name" keeps
# surrounding whitespace, since it is a substring match.
_PARSERS: Mapping[str, Callable[[str], object]] = {
    "name": str.lower,
    "loves": _parse_loves,
    "gender": normalize_gender,
    "weightGreaterThan": _parse_decimal,
    "weightLessThan": _parse_decimal,
    "vampiresExists": _parse_flag,
    "vampiresGreaterThan": _parse_integer,
    "vaccinated": _parse_flag,
}


@dataclass(frozen=True)
class UnicornCriteria:
    """Typed search criteria.  ``None`` means the criterion is not applied.

    ``malformed`` names the query keys whose values could not be
    parsed; any entry there makes every record fail.
    """

    name: Optional[str] = None
    loves: Optional[Tuple[str, ...]] = None
    gender: Optional[str] = None
    weight_greater_than: Optional[float] = None
    weight_less_than: Optional[float] = None
    vampires_exists: Optional[bool] = None
    vampires_greater_than: Optional[int] = None
    vaccinated: Optional[bool] = None
    malformed: FrozenSet[str] = frozenset()

    @classmethod
    def from_query(cls, params: Mapping[str, Optional[str]]) -> "UnicornCriteria":
        """Build criteria from raw query parameters.

        Unknown keys are ignored and empty values leave the criterion
        unapplied.
        """
        values = {}
        malformed = set()
        for key, attribute in QUERY_KEYS.items():
            raw = params.get(key)
            if raw is None:
                continue
            text = str(raw)
            if not text.strip():
                continue
            try:
                values[attribute] = _PARSERS[key](text)
            except ValueError:
                logger.warning("Ignoring malformed criterion %s=%r; nothing will match", key, raw)
                malformed.add(key)
        return cls(malformed=frozenset(malformed), **values)

    @property
    def is_empty(self) -> bool:
        return not self.malformed and all(
            getattr(self, attribute) is None for attribute in QUERY_KEYS.values()
        )


def _name(record: Unicorn, value: str) -> bool:
    return value in record.name.lower()


def _loves(record: Unicorn, value: Tuple[str, ...]) -> bool:
    loves = {love.lower() for love in record.loves}
    return all(love in loves for love in value)


def _gender(record: Unicorn, value: str) -> bool:
    return record.gender.lower() == value


def _weight_greater_than(record: Unicorn, value: float) -> bool:
    return record.weight > value


def _weight_less_than(record: Unicorn, value: float) -> bool:
    return record.weight < value


def _vampires_exists(record: Unicorn, value: bool) -> bool:
    return (record.vampires is not None) == value


def _vampires_greater_than(record: Unicorn, value: int) -> bool:
    return record.vampires is not None and record.vampires > value


def _vaccinated(record: Unicorn, value: bool) -> bool:
    return record.vaccinated == value


_PREDICATES: Tuple[Tuple[str, Callable[[Unicorn, object], bool]], ...] = (
    ("name", _name),
    ("loves", _loves),
    ("gender", _gender),
    ("weight_greater_than", _weight_greater_than),
    ("weight_less_than", _weight_less_than),
    ("vampires_exists", _vampires_exists),
    ("vampires_greater_than", _vampires_greater_than),
    ("vaccinated", _vaccinated),
)


def matches(record: Unicorn, criteria: UnicornCriteria) -> bool:
    """Return ``True`` if ``record`` satisfies every applied criterion."""
    if criteria.malformed:
        return False
    for attribute, predicate in _PREDICATES:
        value = getattr(criteria, attribute)
        if value is not None and not predicate(record, value):
            return False
    return True


def filter_unicorns(
    records: Iterable[Unicorn],
    criteria: Union[UnicornCriteria, Mapping[str, Optional[str]], None] = None,
) -> List[Unicorn]:
    """Return the records matching ``criteria`` in their original order.

    ``criteria`` may be a parsed ``UnicornCriteria``, the raw query
    mapping or ``None`` for no criteria.  Anything else is logged and
    treated as no criteria.
    """
    if isinstance(criteria, UnicornCriteria):
        pass
    elif isinstance(criteria, Mapping):
        criteria = UnicornCriteria.from_query(criteria)
    else:
        if criteria:
            logger.warning("Ignoring criteria of unsupported type %s", type(criteria).__name__)
        criteria = UnicornCriteria()
    return [record for record in records if matches(record, criteria)]
