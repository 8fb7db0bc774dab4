from app.schemas.base import CamelModel


class ExtractionResponse(CamelModel):
    status: str
    text: str
