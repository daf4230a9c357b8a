from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # Wire format is camelCase (firstName, lastName); Python side stays snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeFields(_CamelModel):
    """The four replaceable fields of a record, already validated and trimmed."""
    first_name: str
    last_name: str
    email: str
    position: str


class Employee(_CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    position: str
