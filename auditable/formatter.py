"""
Field formatter.

Formatting rules are declared per field on a tracked model:

    audit_formatted_fields = {
        "public": "boolean:Yes|No",
        "minimum": "string:Min: %s",
        "published_at": "datetime:%d/%m/%Y",
        "state": "options:0.Draft|1.Published",
        "notes": "is_empty:No notes|%s",
    }

The part before the first colon picks the rule, the rest is
its template. A broken rule is a configuration mistake, so
it raises FormatError instead of falling back.
"""

from datetime import datetime


class FormatError(ValueError):
    """Raised for an unknown or malformed formatting rule."""


DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _is_truthy(value) -> bool:
    # Stored values are strings, so "0" has to count as false too.
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _substitute(template: str, value) -> str:
    try:
        return template % (value,)
    except (TypeError, ValueError) as e:
        raise FormatError(f"Invalid template '{template}': {e}") from e


def _two_segments(template: str) -> tuple[str, str]:
    segments = template.split("|")
    if len(segments) != 2:
        raise FormatError(
            f"Template '{template}' must have exactly two '|' separated segments"
        )
    return segments[0], segments[1]


class FieldFormatter:
    """Applies a declared rule to a value."""

    RULES = ("boolean", "string", "is_empty", "datetime", "options")

    @classmethod
    def format(cls, key: str, value, rules: dict[str, str]):
        """
        Format value with the rule declared for key.

        Keys without a rule pass the value through unchanged.
        """
        rule = rules.get(key)
        if rule is None:
            return value

        kind, sep, template = rule.partition(":")
        if not sep:
            raise FormatError(
                f"Rule '{rule}' for '{key}' must look like '<kind>:<template>'"
            )

        if kind not in cls.RULES:
            raise FormatError(f"Unknown format rule '{kind}' for '{key}'")
        return getattr(cls, kind)(value, template)

    @staticmethod
    def boolean(value, template: str) -> str:
        """First segment for a truthy value, second for a falsy one."""
        yes, no = _two_segments(template)
        return yes if _is_truthy(value) else no

    @staticmethod
    def string(value, template: str) -> str:
        return _substitute(template or "%s", value)

    @staticmethod
    def is_empty(value, template: str) -> str:
        empty, filled = _two_segments(template)
        if value is None or value == "":
            return empty
        return _substitute(filled, value) if "%" in filled else filled

    @staticmethod
    def datetime(value, template: str):
        """Reformat a datetime; a value that doesn't parse is shown as stored."""
        if value is None or value == "":
            return value
        if isinstance(value, datetime):
            parsed = value
        else:
            try:
                parsed = datetime.fromisoformat(str(value))
            except ValueError:
                return value
        return parsed.strftime(template or DEFAULT_DATETIME_FORMAT)

    @staticmethod
    def options(value, template: str) -> str:
        labels = {}
        for option in template.split("|"):
            stored, sep, label = option.partition(".")
            if not sep:
                raise FormatError(
                    f"Option '{option}' must look like '<value>.<label>'"
                )
            labels[stored] = label
        return labels.get(str(value), "undefined")

