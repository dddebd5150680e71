from pydantic import BaseModel, Field

class ProfessionalCreate(BaseModel):
    name: str = Field(min_length=1)

class ProfessionalOut(BaseModel):
    professional_id: str
    name: str
    is_active: bool
