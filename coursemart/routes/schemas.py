from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class CourseRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    price: float | None = None
    image_link: str | None = Field(default=None, alias='imageLink')
    published: bool | None = None

    class Config:
        populate_by_name = True

    def to_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class CourseResponse(BaseModel):
    id: int
    title: str | None = None
    description: str | None = None
    price: float | None = None
    image_link: str | None = Field(default=None, serialization_alias='imageLink')
    published: bool | None = None

    class Config:
        from_attributes = True


def serialize_course(course) -> dict:
    return CourseResponse.model_validate(course).model_dump(by_alias=True)
