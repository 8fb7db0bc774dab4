from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Attachment(Base):
    """File attached to an assignment; its text is extracted on demand."""
    __tablename__ = "attachments"

    id = Column(Integer, primary_key=True, index=True)
    assignment_id = Column(Integer, ForeignKey("assignments.id"), nullable=False, index=True)
    filename = Column(String, nullable=False)
    url = Column(String, nullable=False)  # Where the file is downloaded from
    mime = Column(String)  # application/pdf, text/html, ...
    extracted_text = Column(Text)  # Extracted text content
    extraction_status = Column(String, default="pending")  # pending, processing, completed, failed

    # Relationships
    assignment = relationship("Assignment", back_populates="attachments")

    def __repr__(self):
        return f"<Attachment(id={self.id}, filename='{self.filename}', assignment_id={self.assignment_id})>"
