from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, BeforeValidator
from pydantic.alias_generators import to_camel

from wellness.helpers.validation import require_text, non_blank_text


class CamelModel(BaseModel):
    """Base for every wire schema: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True, use_enum_values=True
    )


# Trimmed text that must be present on create
RequiredText = Annotated[str, BeforeValidator(require_text)]
# Trimmed text that may be omitted on update but never blanked
UpdateText = Annotated[str, BeforeValidator(non_blank_text)]


class UpdateRequestBase(CamelModel):
    def changes(self) -> Dict[str, Any]:
        """Fields actually supplied by the client, nulls ignored."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ErrorResponse(BaseModel):
    error: str
    code: Optional[str] = None


def deleted_response(label: str, key: str, record: Any) -> Dict[str, Any]:
    return {'message': f'{label} deleted successfully', key: record}
