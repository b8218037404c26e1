from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


def _content_field(name: str, camel: str) -> Any:
    return Field(default="", validation_alias=AliasChoices(name, camel))


class WireMessage(BaseModel):
    """
    Base for request/response bodies.

    Decoding is permissive the way the JSON mapping of a schema-driven codec
    is: missing fields and explicit nulls take the zero value, unknown
    fields are ignored. Field names are snake_case on output; the
    lowerCamelCase spelling is accepted on input.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class LoadFileRequest(WireMessage):
    path: str = ""


class LoadFileResponse(WireMessage):
    json_content: str = _content_field("json_content", "jsonContent")


class SaveFileRequest(WireMessage):
    """
    `json_content` is the document itself. `elm_content`, when non-empty, is
    rendered source the editor wants written next to the document.
    """

    path: str = ""
    json_content: str = _content_field("json_content", "jsonContent")
    elm_content: str = _content_field("elm_content", "elmContent")


class SaveFileResponse(WireMessage):
    pass


class ErrorResponse(WireMessage):
    error: str
    detail: str = ""
