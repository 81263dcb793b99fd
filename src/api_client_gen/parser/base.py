"""Data models for Swagger operations.

The loader converts a Swagger document into these models; the generator
reads them and never mutates them.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Parameter(BaseModel):
    """A single operation parameter (path, query, header, cookie, or body)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")  # path / query / header / cookie / body
    required: bool = False
    description: str = ""
    type: str | None = None  # primitive type name, absent for body parameters
    schema_: dict | None = Field(default=None, alias="schema")  # body only

    @field_validator("required", mode="before")
    @classmethod
    def _null_required(cls, value):
        return False if value is None else value

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value):
        return "" if value is None else value


class Response(BaseModel):
    """One entry of an operation's response table."""

    model_config = ConfigDict(populate_by_name=True)

    description: str = ""
    schema_: dict | None = Field(default=None, alias="schema")

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value):
        return "" if value is None else value


class Operation(BaseModel):
    """A single API operation, the unit of client generation."""

    model_config = ConfigDict(populate_by_name=True)

    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str = ""
    parameters: list[Parameter] | None = None
    responses: dict[str, Response] = {}
    tags: list[str] = []

    @field_validator("summary", mode="before")
    @classmethod
    def _null_summary(cls, value):
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value):
        return [] if value is None else value

    @field_validator("responses", mode="before")
    @classmethod
    def _stringify_status_keys(cls, value):
        # YAML reads `200:` as an int key
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(status): resp if resp is not None else {} for status, resp in value.items()}
        return value


class SwaggerDocument(BaseModel):
    """The parts of a Swagger document the generator consumes."""

    model_config = ConfigDict(populate_by_name=True)

    swagger: str = "2.0"
    openapi: str | None = None  # set for OpenAPI 3 documents
    base_path: str = Field(default="", alias="basePath")
    paths: dict[str, dict] = {}
    parameters: dict[str, dict] = {}  # shared parameters, targets of `#/parameters/...`
    definitions: dict[str, dict] = {}
