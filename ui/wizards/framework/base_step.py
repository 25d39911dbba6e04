# -*- coding: utf-8 -*-
"""
Base Step - Declarative description of one wizard step.

A step is data, not a widget:
- FieldSpec: one input (name in the aggregate, label, kind, rules)
- StepDefinition: ordered fields plus the validation predicate
- StepValidationResult: outcome of validating a step

Widgets are produced from these definitions by step_renderer, so steps can
be validated without a display.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from services.translation_manager import tr
from utils.helpers import is_valid_email


FIELD_KINDS = ("text", "multiline", "choice", "bool", "int", "float", "date", "list", "groups")


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None
    fields: List[str] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []
        if self.fields is None:
            self.fields = []

    def add_error(self, message: str, field_name: Optional[str] = None):
        """Add an error message, optionally naming the offending field."""
        self.errors.append(message)
        self.is_valid = False
        if field_name and field_name not in self.fields:
            self.fields.append(field_name)

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @classmethod
    def valid(cls) -> 'StepValidationResult':
        return cls(is_valid=True, errors=[])


@dataclass
class FieldSpec:
    """
    One input of a step.

    Attributes:
        name: Key in the wizard aggregate
        label: Text shown next to the input
        kind: One of FIELD_KINDS
        required: Empty values fail validation (bool fields must be checked)
        choices: (value, label) pairs for "choice" fields
        placeholder: Hint shown inside empty inputs
        rules: Declarative checks: min_length, max_length, pattern, min, max, email
        group_fields: Fields of each group ("groups" kind)
        item_fields: Fields of each item inside a group ("groups" kind)
        items_key: Key of the item list inside a group
        group_label / item_label: Singular nouns used by the group editor
    """
    name: str
    label: str
    kind: str = "text"
    required: bool = False
    choices: Sequence[Tuple[Any, str]] = ()
    placeholder: str = ""
    rules: Dict[str, Any] = field(default_factory=dict)
    group_fields: List['FieldSpec'] = field(default_factory=list)
    item_fields: List['FieldSpec'] = field(default_factory=list)
    items_key: str = "items"
    group_label: str = ""
    item_label: str = ""

    def __post_init__(self):
        if self.kind not in FIELD_KINDS:
            raise ValueError(f"Unknown field kind '{self.kind}' for '{self.name}'")
        # Plain values are accepted as their own label
        self.choices = tuple(
            c if isinstance(c, tuple) else (c, str(c)) for c in self.choices
        )

    def choice_values(self) -> List[Any]:
        return [value for value, _ in self.choices]


def is_empty(spec: FieldSpec, value: Any) -> bool:
    """Check if a value counts as missing for a required field."""
    if spec.kind == "bool":
        return not value
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def check_field(spec: FieldSpec, value: Any) -> List[str]:
    """
    Validate one value against its field spec.

    Returns:
        List of error messages (empty when valid)
    """
    if is_empty(spec, value):
        if spec.required:
            return [tr("validation.required", field=spec.label)]
        return []

    errors = []
    rules = spec.rules

    if spec.kind in ("int", "float"):
        try:
            number = float(value)
        except (TypeError, ValueError):
            return [tr("validation.number", field=spec.label)]
        if "min" in rules and number < rules["min"]:
            errors.append(tr("validation.min", field=spec.label, min=rules["min"]))
        if "max" in rules and number > rules["max"]:
            errors.append(tr("validation.max", field=spec.label, max=rules["max"]))
        return errors

    if isinstance(value, str):
        text = value.strip()
        if "min_length" in rules and len(text) < rules["min_length"]:
            errors.append(tr("validation.min_length", field=spec.label,
                             min_length=rules["min_length"]))
        if "max_length" in rules and len(text) > rules["max_length"]:
            errors.append(tr("validation.max_length", field=spec.label,
                             max_length=rules["max_length"]))
        if "pattern" in rules and not re.match(rules["pattern"], text):
            errors.append(tr("validation.pattern", field=spec.label))
        if rules.get("email") and not is_valid_email(text):
            errors.append(tr("validation.email", field=spec.label))

    if spec.kind == "choice" and spec.choices and value not in spec.choice_values():
        errors.append(tr("validation.pattern", field=spec.label))

    if spec.kind == "date" and not isinstance(value, date):
        errors.append(tr("validation.pattern", field=spec.label))

    return errors


# Custom validators receive the aggregate and add errors to the result
StepValidator = Callable[[Dict[str, Any], StepValidationResult], None]


@dataclass
class StepDefinition:
    """
    One step of a wizard.

    validate() runs, in order: required checks, declarative rules of each
    field, then the optional custom validator. Nested group/item fields are
    checked for every row.
    """
    id: str
    label: str
    fields: List[FieldSpec] = field(default_factory=list)
    description: str = ""
    validator: Optional[StepValidator] = None

    def field_names(self) -> List[str]:
        return [spec.name for spec in self.fields]

    def get_field(self, name: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    def validate(self, aggregate: Dict[str, Any]) -> StepValidationResult:
        result = StepValidationResult.valid()

        for spec in self.fields:
            value = aggregate.get(spec.name)
            for message in check_field(spec, value):
                result.add_error(message, spec.name)
            if spec.kind == "groups" and isinstance(value, list):
                self._validate_groups(spec, value, result)

        if self.validator is not None:
            self.validator(aggregate, result)

        return result

    def _validate_groups(self, spec: FieldSpec, groups: List[Dict[str, Any]],
                         result: StepValidationResult):
        for group_no, group in enumerate(groups, start=1):
            for sub in spec.group_fields:
                for message in check_field(sub, group.get(sub.name)):
                    result.add_error(f"{spec.group_label or spec.label} {group_no}: {message}", spec.name)
            for item_no, item in enumerate(group.get(spec.items_key) or [], start=1):
                for sub in spec.item_fields:
                    for message in check_field(sub, item.get(sub.name)):
                        result.add_error(
                            f"{spec.group_label or spec.label} {group_no}, "
                            f"{spec.item_label or spec.items_key} {item_no}: {message}",
                            spec.name
                        )
