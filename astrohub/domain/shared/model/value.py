from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable record; replaced wholesale, never mutated in place."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Patch(BaseModel):
    """Partial update. Only fields explicitly set are sent to the backend."""

    model_config = ConfigDict(populate_by_name=True)

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")
