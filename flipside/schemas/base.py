from datetime import datetime
from typing import Any, ClassVar, Mapping
from pydantic import BaseModel, ConfigDict, ValidationError

from flipside.schemas.state import FieldErrors, flatten_errors

DATE_FORMAT = "%Y-%m-%d"

def check_date(value: str) -> str:
    return datetime.strptime(value, DATE_FORMAT).date().isoformat()

class FormSchema(BaseModel):
    """Strict shape check shared by every record kind.

    Strings must arrive as strings and numbers as finite numbers; each schema
    lists the message shown for a bad value in ``error_messages``.
    """
    model_config = ConfigDict(strict=True, allow_inf_nan=False, extra="ignore")

    error_messages: ClassVar[dict[str, str]] = {}

    @classmethod
    def safe_parse(cls, data: Mapping[str, Any]) -> tuple[Any, FieldErrors | None]:
        try:
            return cls.model_validate(dict(data)), None
        except ValidationError as e:
            return None, flatten_errors(e, cls.error_messages)
