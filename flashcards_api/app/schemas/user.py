"""
Pydantic models for signup and login.

Clients use camelCase keys (``userName``, ``userId``); the models keep
snake_case attributes and declare the wire names as aliases.  FastAPI
serialises responses by alias.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Signup payload.

    The display name is accepted as ``userName`` (what the web client
    sends) or ``name``.
    """

    name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("userName", "name"),
        examples=["Ann"],
    )
    email: str = Field(..., min_length=3, examples=["ann@example.com"])
    password: str = Field(..., min_length=1, examples=["correct horse"])


class UserLogin(BaseModel):
    email: str
    password: str


class UserRead(BaseModel):
    """Identity returned after signup."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName")
    user_id: int = Field(..., alias="userId")


class LoginResult(UserRead):
    """Identity plus the session token also set as cookie."""

    token: str
