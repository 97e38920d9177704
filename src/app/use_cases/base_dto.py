from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResponseModel(BaseModel):
    """
    Base for use case responses.

    Serialized with camelCase keys (signupToken, redirectUrl, ...) and an
    ok flag, matching what the portal frontend reads.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ok: bool = True
