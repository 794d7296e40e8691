from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON은 camelCase(fullName, createdAt ...), 파이썬 속성은 snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """부분 수정 요청 공통 베이스.

    - 보낸 필드만 반영 (changes() = exclude_unset)
    - 허용 목록에 없는 키는 조용히 버린다 (extra="ignore")
    - NOT NULL 컬럼에 null을 보내면 검증 오류
    """

    model_config = ConfigDict(extra="ignore")

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
