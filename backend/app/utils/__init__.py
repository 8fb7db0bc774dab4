from .auth import get_password_hash, verify_password, create_access_token, get_current_user, get_session
from .pdf_parser import parse_pdf, parse_pdf_document, parse_text_document
from .html_to_text import html_to_text
from .safe_json import safe_json
from .urgency import get_urgency_info

__all__ = [
    "get_password_hash", "verify_password", "create_access_token", "get_current_user", "get_session",
    "parse_pdf", "parse_pdf_document", "parse_text_document", "html_to_text",
    "safe_json", "get_urgency_info",
]
