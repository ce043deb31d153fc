from pydantic import BaseModel, ConfigDict, EmailStr, Field

class UserBase(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    email: EmailStr

class UserCreate(UserBase):
    password: str = Field(min_length=6)

class User(UserBase):
    id: int
    model_config = ConfigDict(from_attributes=True)

# 회원가입 응답에만 인증 토큰을 포함합니다.
class UserWithToken(User):
    authentication_token: str

class SignIn(BaseModel):
    email: EmailStr
    password: str

class Token(BaseModel):
    email: EmailStr
    authentication_token: str
