from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# JSON types are checked strictly: "80" is not a port, 1 is not a bool
Int = Optional[StrictInt]
Int64 = Optional[Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]]
Str = Optional[StrictStr]
Bool = Optional[StrictBool]
StrList = Optional[List[StrictStr]]


class EveModel(BaseModel):
    """
    Common base for every EVE object.
    - unknown keys are ignored (sensor output grows over time)
    - every field defaults to None; presence is tracked by model_fields_set
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
