"""
Pydantic schemas for media uploads
"""
from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """File upload response - serialized as {"filePath": ...}"""
    file_path: str = Field(..., alias="filePath")

    class Config:
        populate_by_name = True
