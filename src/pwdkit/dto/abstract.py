from typing import Annotated, Optional

import annotated_types
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Count = Optional[Annotated[int, annotated_types.Ge(0)]]


class AbstractDTO(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )
