"""
Shared Module

Building blocks reused by every feature module:
- BaseModel: abstract SQLAlchemy model with UUID id and audit timestamps
- CamelModel: pydantic base that speaks camelCase on the wire
- YesNo: the Yes/No answer used by several forms
"""

import enum
import uuid
from datetime import datetime

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import Enum, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from academy_api.core.database import Base


class BaseModel(Base):
    """Abstract base with primary key and created/updated timestamps."""

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now(), nullable=False
    )


class CamelModel(PydanticBaseModel):
    """Snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class YesNo(str, enum.Enum):
    YES = "Yes"
    NO = "No"


def yes_no_type() -> Enum:
    """Column type for YesNo, stored by value ("Yes"/"No")."""
    return Enum(YesNo, name="yes_no", values_callable=lambda e: [m.value for m in e])


__all__ = ["BaseModel", "CamelModel", "YesNo", "yes_no_type"]
