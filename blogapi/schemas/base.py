from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    所有对外 schema 的基类：
    - 字段在 Python 侧用 snake_case，JSON 侧用 camelCase（userId、postsCategoryId ...）
    - 请求体两种写法都接受
    - 支持直接从 ORM 对象读取
    """

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict:
        """
        转成可直接 JSON 序列化的 dict：
        - camelCase 键
        - 未赋值的字段（没有 eager-load 的关联）不输出
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class CamelInput(CamelModel):
    """请求体基类：多余字段直接拒绝"""

    model_config = ConfigDict(extra="forbid")
