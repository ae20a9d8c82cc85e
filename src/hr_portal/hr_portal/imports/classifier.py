from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Tuple

from ..common.validators import parse_enum
from ..core.enums import ImportTarget
from ..core.exceptions import AmbiguousImportTargetError, ValidationError

_RULES: Tuple[Tuple[ImportTarget, Callable[[str], bool]], ...] = (
    (ImportTarget.SAP_EMPLOYEES, lambda name: "sap" in name),
    (ImportTarget.HILAN_EMPLOYEES, lambda name: "hilan" in name and "interface" not in name),
    (ImportTarget.HILAN_ATTENDANCE, lambda name: "attendance" in name),
    (ImportTarget.HILAN_INTERFACE, lambda name: "hilaninterface" in name),
)


def candidate_targets(path: str | Path) -> Tuple[ImportTarget, ...]:
    name = Path(path).stem.lower()
    return tuple(target for target, matches in _RULES if matches(name))


def classify_target(path: str | Path, explicit=None) -> ImportTarget:
    """Pick the table a spreadsheet loads into from its file name.

    Matching is a substring test with no precedence between keywords: a name
    hitting several keywords needs ``explicit`` set to one of them.
    """

    file_name = Path(path).name
    candidates = candidate_targets(path)
    if not candidates:
        raise ValidationError(
            'Invalid file name. Must contain "sap", "hilan", "attendance", or "hilaninterface".'
        )

    if explicit is not None:
        chosen = parse_enum(ImportTarget, explicit, "Import target")
        if chosen not in candidates:
            raise ValidationError(f"Import target {chosen.value} does not match file name '{file_name}'")
        return chosen

    if len(candidates) > 1:
        raise AmbiguousImportTargetError(file_name, candidates)
    return candidates[0]
