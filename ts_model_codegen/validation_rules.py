"""
Validation rule objects that generate decorator code.

Each rule describes the validation of one field (a category, an error
message and an optional input transform) and knows how to render itself
as class-validator / class-transformer decorators.
"""

import json
from abc import ABC
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ValidationRule(ABC):
    """Base class for all validation rules"""

    # Class-level cache for loaded string templates
    _string_templates: Dict[str, Dict[str, Any]] = {}

    # Validation category, e.g. "integer" or "string"
    category: str = ""

    # Kind of input transform applied before validation (None = no transform)
    transform_kind: Optional[str] = None

    def __init__(self, field_name: str, language: str = "typescript"):
        """
        Initialize a validation rule.

        Args:
            field_name: Name of the field being validated
            language: Target language (only 'typescript' ships templates)
        """
        self.field_name = field_name
        self.language = language

    @classmethod
    def _load_string_templates(cls, language: str) -> Dict[str, Any]:
        """
        Load string templates from JSON file for the given language.
        Results are cached to avoid repeated file I/O.
        """
        if language not in cls._string_templates:
            template_file = Path(__file__).parent / f"validation_rules_{language}.json"
            with open(template_file, "r", encoding="utf-8") as f:
                cls._string_templates[language] = json.load(f)
        return cls._string_templates[language]

    def get_string(self, key: str, **format_params) -> Union[str, List, Dict]:
        """
        Get a string template for this validation rule and format it.

        Args:
            key: The string key to retrieve (e.g., 'error_message', 'validator')
            **format_params: Parameters to format into the string template

        Returns:
            Formatted string, list, or dict depending on the template structure
        """
        templates = self._load_string_templates(self.language)
        class_name = self.__class__.__name__

        if class_name not in templates:
            raise KeyError(f"No string templates found for {class_name} in {self.language}")

        rule_templates = templates[class_name]

        if key not in rule_templates:
            raise KeyError(f"Key '{key}' not found in templates for {class_name}")

        return self._format_template(rule_templates[key], format_params)

    def _format_template(self, template, format_params: dict):
        """Recursively format a template that can be a string, list, or dict."""
        if isinstance(template, str):
            return template.format(**format_params)
        elif isinstance(template, list):
            return [self._format_template(item, format_params) for item in template]
        elif isinstance(template, dict):
            return {k: self._format_template(v, format_params) for k, v in template.items()}
        else:
            return template

    def get_template_params(self) -> Dict[str, Any]:
        """Rule-specific parameters for template formatting."""
        return {"field_name": self.field_name}

    @property
    def message(self) -> str:
        """The error message reported when validation fails."""
        return self._get_str("error_message")

    def _get_str(self, key: str) -> str:
        value = self.get_string(key, **self.get_template_params())
        if not isinstance(value, str):
            raise TypeError(f"Expected {key} to be a string, got {type(value)}")
        return value

    def generate_code(self) -> List[str]:
        """
        Generate decorator lines for this rule: the transform (if any)
        followed by the validator.
        """
        templates = self._load_string_templates(self.language)
        template = templates.get("_template", {})

        lines = []
        if self.transform_kind is not None:
            transform = templates["_transforms"][self.transform_kind]
            lines.append(template.get("transform_line", "@Transform({transform})").format(transform=transform))

        lines.append(
            template["validator_line"].format(
                validator=self._get_str("validator"),
                arguments=self._get_str("arguments"),
                error_message=self.message,
            )
        )
        return lines

    def to_dict(self) -> Dict[str, Any]:
        """Language independent description of the rule."""
        return {
            "category": self.category,
            "message": self.message,
            "transform_kind": self.transform_kind,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.field_name!r})"


class IntegerRule(ValidationRule):
    """Parses the input as an integer and validates it is a number"""

    category = "integer"
    transform_kind = "integer"


class DecimalRule(ValidationRule):
    """Parses the input as a float and validates it is a number"""

    category = "decimal"
    transform_kind = "decimal"


class BooleanRule(ValidationRule):
    """Parses 'true' / true as true and validates a boolean"""

    category = "boolean"
    transform_kind = "boolean"


class DateRule(ValidationRule):
    """Parses the input as a Date and validates an ISO8601 date"""

    category = "date"
    transform_kind = "date"


class StringRule(ValidationRule):
    """Validates a string, no transform"""

    category = "string"


class EnumRule(ValidationRule):
    """Validates that a field holds a member of an enum"""

    category = "enum"

    def __init__(self, field_name: str, enum_name: str, language: str = "typescript"):
        super().__init__(field_name, language)
        self.enum_name = enum_name

    def get_template_params(self) -> Dict[str, Any]:
        return {"field_name": self.field_name, "enum_name": self.enum_name}


# Validation rule class per common SQL type name
COMMON_TYPE_RULES = {
    "int": IntegerRule,
    "bigint": IntegerRule,
    "tinyint": IntegerRule,
    "smallint": IntegerRule,
    "float": DecimalRule,
    "real": DecimalRule,
    "decimal": DecimalRule,
    "boolean": BooleanRule,
    "date": DateRule,
    "timestamp": DateRule,
    "text": StringRule,
    "varchar": StringRule,
}
