"""Heuristic parser for OCR text of nutrition facts labels.

The label is read in two independent passes over the same lines: headline
rows ("Fett", "Kohlenhydrate", ...) that carry no number, and value lines
("10 g", "250 kcal") that end with a unit. Both lists keep the label's
top-to-bottom order, so they are walked in lockstep to pair rows with values.
"""

import logging
import re
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass

from calorie_hunter.domain.labels import NutritionFacts, RowKind, ValueLine

_logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(r"[0-9]+(?:[.,][0-9]+)?")

# " g", " kcal" and " kj" are covered by the bare suffixes.
_UNIT_SUFFIXES = ("g", "kcal", "kj")

_TRACKED_FIELDS = {
    RowKind.FAT: "fat",
    RowKind.CARBOHYDRATE: "carbs",
    RowKind.PROTEIN: "protein",
}


def _fold(text: str) -> str:
    """Lowercase and strip diacritics for keyword comparison."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def _keywords(*words: str) -> tuple[str, ...]:
    return tuple(_fold(word) for word in words)


_ENERGY_WORDS = _keywords("energie", "brennwert", "calorie")
_FAT_WORD = _fold("fett")
_SUB_ROW_WORD = _fold("davon")
_SATURATED_WORDS = _keywords(
    "gesättigt", "gesaettigt", "davon gesättigte", "davon gesaettigte"
)
_CARB_WORDS = _keywords("kohlenhydrat", "carbo")
_SUGAR_WORD = _fold("zucker")
_FIBER_WORDS = _keywords("ballaststoff", "fibre")
_PROTEIN_WORDS = _keywords("eiwei", "protein")
_SALT_WORD = _fold("salz")
_SERVING_WORDS = _keywords("100 g", "enthält")


def split_lines(text: str) -> list[str]:
    """Return trimmed, non-empty lines of the text."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def find_number(text: str) -> float | None:
    """Return the first decimal number in the text, accepting a comma separator."""
    match = _NUMBER_PATTERN.search(text)
    if match is None:
        return None
    return float(match.group(0).replace(",", "."))


def _contains_any(text: str, words: tuple[str, ...]) -> bool:
    return any(word in text for word in words)


def classify_row(line: str) -> RowKind | None:  # noqa: PLR0911
    """Classify a headline row; lines holding a number are value lines."""
    folded = _fold(line)
    if find_number(folded) is not None:
        return None

    if _contains_any(folded, _ENERGY_WORDS):
        return RowKind.ENERGY
    if _FAT_WORD in folded and _SUB_ROW_WORD not in folded:
        return RowKind.FAT
    if _contains_any(folded, _SATURATED_WORDS):
        return RowKind.SATURATED_FAT
    if _contains_any(folded, _CARB_WORDS):
        return RowKind.CARBOHYDRATE
    if _SUGAR_WORD in folded and _SUB_ROW_WORD in folded:
        return RowKind.SUGAR
    if _contains_any(folded, _FIBER_WORDS):
        return RowKind.FIBER
    if _contains_any(folded, _PROTEIN_WORDS):
        return RowKind.PROTEIN
    if _SALT_WORD in folded:
        return RowKind.SALT
    return RowKind.OTHER


def extract_value(line: str) -> ValueLine | None:
    """Return the amount on a line that ends with g, kcal or kJ."""
    value = find_number(line)
    if value is None:
        return None

    folded = _fold(line)
    if all(word in folded for word in _SERVING_WORDS):
        return None
    if not folded.endswith(_UNIT_SUFFIXES):
        return None

    return ValueLine(raw=line, value=value, is_kcal="kcal" in folded)


def align(
    row_order: Sequence[RowKind],
    values: Sequence[ValueLine],
    *,
    debug: bool = False,
) -> NutritionFacts:
    """Pair headline rows with value lines using a single forward cursor."""
    assigned: dict[str, float | int] = {}
    cursor = 0
    for row in row_order:
        if cursor >= len(values):
            break

        if row is RowKind.ENERGY and "calories" not in assigned:
            while cursor < len(values) and not values[cursor].is_kcal:
                cursor += 1
            if cursor >= len(values):
                break
            line = values[cursor]
            assigned["calories"] = int(line.value)
            if debug:
                _logger.info("calories <- %s (line: %r)", line.value, line.raw)
        elif row in _TRACKED_FIELDS and _TRACKED_FIELDS[row] not in assigned:
            field_name = _TRACKED_FIELDS[row]
            assigned[field_name] = values[cursor].value
            if debug:
                _logger.info("%s <- %s", field_name, values[cursor].value)
        elif debug:
            _logger.info("skip %s (value %s)", row.value, values[cursor].value)
        cursor += 1

    return NutritionFacts(**assigned)


def parse_nutrition_label(text: str, *, debug: bool = False) -> NutritionFacts:
    """Extract calories and macros from OCR text of a nutrition label."""
    lines = split_lines(text)

    row_order = [row for row in map(classify_row, lines) if row is not None]
    if debug:
        _logger.info("Row order detected: %s", [row.value for row in row_order])

    values = [value for value in map(extract_value, lines) if value is not None]
    if debug:
        _logger.info("Value lines kept: %s", [value.raw for value in values])

    facts = align(row_order, values, debug=debug)
    if debug:
        _logger.info(
            "Label parsed: calories=%s fat=%s carbs=%s protein=%s",
            facts.calories,
            facts.fat,
            facts.carbs,
            facts.protein,
        )
    return facts


@dataclass
class LabelParser:
    """Service wrapper around the label parser with a debug switch."""

    debug: bool = False

    def parse(self, text: str) -> NutritionFacts:
        """Parse OCR text into nutrition facts."""
        return parse_nutrition_label(text, debug=self.debug)
