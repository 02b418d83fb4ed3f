from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterUserRequest(BaseModel):
    """ユーザー登録リクエストモデル"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str = Field(
        ...,
        pattern=EMAIL_PATTERN,
        description="メールアドレス",
        examples=["taro@example.com"],
    )
    name: str = Field(..., min_length=1, description="表示名")
    password: str = Field(..., min_length=1, description="パスワード")
    national_id: str = Field(..., min_length=1, description="身分証番号")


class LoginUserRequest(BaseModel):
    """ログインリクエストモデル"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)
