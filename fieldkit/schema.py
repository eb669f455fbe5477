"""Declarative validation schemas backed by pydantic.

A ``Schema`` is an immutable description of a validation rule. Builders
return new schemas, so a field's ``schema()`` can compose one from its
configuration on every call without side effects. Validation goes through a
``pydantic.TypeAdapter`` and each rule raises ``PydanticCustomError`` with the
toolkit's own code and message, so the issue list that comes back carries
exactly what callers surface to users.

Example:
    ```python
    name = Schema.string().min_length(2, "Too short").nullable()
    result = name.validate("a")
    assert not result.success
    assert result.first_issue.message == "Too short"
    ```
"""

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, time
from functools import cached_property
from typing import Annotated, Any, NoReturn

from pydantic import (
    AfterValidator,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    WrapValidator,
    create_model,
)
from pydantic_core import PydanticCustomError

from fieldkit.messages import message
from fieldkit.models.enums import IssueCode


@dataclass(frozen=True)
class SchemaIssue:
    """One validation failure."""

    message: str
    path: tuple[str | int, ...] = ()
    code: str = IssueCode.CUSTOM


@dataclass(frozen=True)
class SchemaResult:
    """Outcome of ``Schema.validate``: the parsed value or the ordered issues."""

    success: bool
    data: Any = None
    issues: tuple[SchemaIssue, ...] = ()

    @property
    def first_issue(self) -> SchemaIssue | None:
        return self.issues[0] if self.issues else None


def fail(code: str, text: str) -> NoReturn:
    """Abort the current rule with a validation issue."""
    raise PydanticCustomError(str(code), text)


def is_number(value: Any) -> bool:
    """True for real numbers, excluding booleans and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _type_guard(
    accepts: Callable[[Any], bool], text: str | None = None
) -> Callable[[Any], Any]:
    def guard(value: Any) -> Any:
        if value is None:
            fail(IssueCode.REQUIRED, message("required"))
        if not accepts(value):
            fail(IssueCode.INVALID_TYPE, text or message("invalid"))
        return value

    return guard


def _mapping_guard(value: Any) -> dict:
    if value is None:
        fail(IssueCode.REQUIRED, message("required"))
    if not isinstance(value, Mapping):
        fail(IssueCode.INVALID_TYPE, message("invalid"))
    return dict(value)


def _sequence_guard(value: Any) -> list:
    if value is None:
        fail(IssueCode.REQUIRED, message("required"))
    if not isinstance(value, (list, tuple)):
        fail(IssueCode.INVALID_TYPE, message("invalid"))
    return list(value)


class Schema:
    """Immutable validation rule."""

    def __init__(self, annotation: Any):
        self._annotation = annotation

    @property
    def annotation(self) -> Any:
        """The pydantic-validatable type this schema stands for."""
        return self._annotation

    @cached_property
    def _adapter(self) -> TypeAdapter:
        return TypeAdapter(self._annotation)

    def validate(self, value: Any) -> SchemaResult:
        """Validate ``value`` without raising."""
        try:
            data = self._adapter.validate_python(value)
        except ValidationError as exc:
            issues = tuple(
                SchemaIssue(
                    message=error["msg"],
                    path=tuple(error["loc"]),
                    code=error["type"],
                )
                for error in exc.errors(include_url=False)
            )
            return SchemaResult(success=False, issues=issues)
        return SchemaResult(success=True, data=data)

    def is_valid(self, value: Any) -> bool:
        return self.validate(value).success

    # ------------------------------------------------------------------
    # Base rules
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, accepts: Callable[[Any], bool], text: str | None = None) -> "Schema":
        """Schema accepting values for which ``accepts`` is true.

        ``None`` is reported as a missing value, anything else rejected by
        ``accepts`` as a type mismatch.
        """
        return cls(Annotated[Any, AfterValidator(_type_guard(accepts, text))])

    @classmethod
    def any(cls) -> "Schema":
        return cls(Any)

    @classmethod
    def string(cls) -> "Schema":
        return cls.of(lambda value: isinstance(value, str))

    @classmethod
    def number(cls) -> "Schema":
        return cls.of(is_number)

    @classmethod
    def boolean(cls) -> "Schema":
        return cls.of(lambda value: isinstance(value, bool))

    @classmethod
    def datetime(cls, text: str | None = None) -> "Schema":
        return cls.of(lambda value: isinstance(value, datetime), text)

    @classmethod
    def time(cls, text: str | None = None) -> "Schema":
        return cls.of(lambda value: isinstance(value, time), text)

    @classmethod
    def mapping(cls) -> "Schema":
        """Any mapping, validated into a plain ``dict``."""
        return cls(Annotated[Any, AfterValidator(_mapping_guard)])

    @classmethod
    def object_of(cls, shape: Mapping[str, "Schema"]) -> "Schema":
        """Object whose keys are validated by the child schemas in ``shape``.

        Missing keys are validated as ``None`` and unknown keys are dropped.
        Issue paths start with the child key.
        """
        keys = list(shape)
        definitions = {
            f"field_{index}": (schema.annotation, Field(default=None, alias=key))
            for index, (key, schema) in enumerate(shape.items())
        }
        model = create_model(
            "ObjectShape", __config__=ConfigDict(extra="ignore"), **definitions
        )

        def fill(value: Any) -> dict[str, Any]:
            # Every key is present so issue locations always use the key
            return {**dict.fromkeys(keys), **_mapping_guard(value)}

        def dump(instance: Any) -> dict[str, Any]:
            return {key: getattr(instance, f"field_{index}") for index, key in enumerate(keys)}

        return cls(Annotated[model, BeforeValidator(fill), AfterValidator(dump)])

    @classmethod
    def array_of(cls, item: "Schema") -> "Schema":
        """List whose entries are validated by ``item``; issue paths start with the index."""
        return cls(Annotated[list[item.annotation], BeforeValidator(_sequence_guard)])

    # ------------------------------------------------------------------
    # Refinements
    # ------------------------------------------------------------------

    def _with(self, *metadata: Any) -> "Schema":
        return Schema(Annotated[(self._annotation, *metadata)])

    def check(
        self,
        predicate: Callable[[Any], bool],
        text: str,
        code: str = IssueCode.CUSTOM,
    ) -> "Schema":
        """Reject values for which ``predicate`` is false."""

        def run(value: Any) -> Any:
            if not predicate(value):
                fail(code, text)
            return value

        return self._with(AfterValidator(run))

    def transform(self, fn: Callable[[Any], Any]) -> "Schema":
        """Replace the validated value with ``fn(value)``."""
        return self._with(AfterValidator(fn))

    def preprocess(self, fn: Callable[[Any], Any]) -> "Schema":
        """Feed ``fn(value)`` to this schema instead of the raw value."""

        def run(value: Any, handler: Callable[[Any], Any]) -> Any:
            return handler(fn(value))

        return self._with(WrapValidator(run))

    def nullable(self) -> "Schema":
        """Accept ``None`` as valid, skipping every other rule."""

        def run(value: Any, handler: Callable[[Any], Any]) -> Any:
            if value is None:
                return None
            return handler(value)

        return self._with(WrapValidator(run))

    def min_length(self, size: int, text: str) -> "Schema":
        return self.check(lambda value: len(value) >= size, text, IssueCode.TOO_SMALL)

    def max_length(self, size: int, text: str) -> "Schema":
        return self.check(lambda value: len(value) <= size, text, IssueCode.TOO_BIG)

    def minimum(self, bound: Any, text: str) -> "Schema":
        return self.check(lambda value: value >= bound, text, IssueCode.TOO_SMALL)

    def maximum(self, bound: Any, text: str) -> "Schema":
        return self.check(lambda value: value <= bound, text, IssueCode.TOO_BIG)

    def pattern(self, regex: "str | re.Pattern[str]", text: str) -> "Schema":
        compiled = re.compile(regex) if isinstance(regex, str) else regex
        return self.check(
            lambda value: compiled.search(value) is not None,
            text,
            IssueCode.INVALID_STRING,
        )

    def __repr__(self) -> str:
        return f"Schema({self._annotation!r})"
