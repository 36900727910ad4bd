"""Request body validation shared by commands and services."""

from typing import Any, ClassVar, Mapping, TypeVar, Union

from pydantic import BaseModel, ValidationError, model_validator

from src.domain.exceptions import DomainValidationError

RequestT = TypeVar("RequestT", bound=BaseModel)


class PatchRequest(BaseModel):
    """Base for update requests: every field optional, only set fields are written.

    A field that was sent as ``null`` must be listed in ``nullable_fields``;
    the other columns cannot be cleared.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_fields(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{name} cannot be null")
        return self


def validate_request(
    model: type[RequestT], body: Union[RequestT, Mapping[str, Any]]
) -> RequestT:
    """Return ``body`` as a validated ``model`` instance.

    Raises DomainValidationError with pydantic's error list when the body
    does not match the request model.
    """
    if isinstance(body, model):
        return body
    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise DomainValidationError(
            "Request body is not valid",
            e.errors(include_url=False, include_context=False),
        ) from e
