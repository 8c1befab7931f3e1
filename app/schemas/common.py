from pydantic import BaseModel, ConfigDict


class CreatedByOut(BaseModel):
    id: int
    name: str | None = None
    email: str | None = None


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


def envelope(data=None, message: str | None = None, **extra) -> dict:
    """Build the `{success, message?, data?, count?}` response body"""
    body = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
        if isinstance(data, list):
            body["count"] = len(data)
    body.update(extra)
    return body
