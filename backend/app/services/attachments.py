import httpx

from app.utils.pdf_parser import extension_for, parse_text_document

DOWNLOAD_TIMEOUT_SECONDS = 15.0
MAX_STORED_TEXT = 100_000
MAX_RETURNED_TEXT = 10_000


async def download_file(url: str) -> bytes:
    """Fetch an attachment's bytes, raising httpx.HTTPError on failure."""
    async with httpx.AsyncClient(follow_redirects=True) as client:
        response = await client.get(
            url,
            headers={"User-Agent": "AssignmentCopilot/1.0"},
            timeout=DOWNLOAD_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        return response.content


def extract_text(file_content: bytes, filename: str, mime: str = "") -> str:
    """Route a file to the matching text extractor by MIME type or extension."""
    return parse_text_document(file_content, extension_for(filename, mime))
