"""
공통 베이스 모델

API(JSON)는 camelCase, 파이썬 속성은 snake_case
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 별칭을 쓰는 베이스 모델 (snake_case로도 입력 가능)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
