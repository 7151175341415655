"""
Upload Validation Module

Boundary checks that run before a document reaches the ranking pipeline:

1. ACCESS: the upload exists and can be read completely
2. FORMAT: declared content type is text/*, size within the limit
3. SNIFF: content carries no known binary signature (python-magic)

Once a document passes, the pipeline accepts any byte sequence, so every
failure a user can see comes from this module.
"""

import logging
from typing import Optional, Union

import magic
from fastapi import HTTPException, UploadFile, status

logger = logging.getLogger(__name__)

MISSING_FILE_MESSAGE = "Error receiving file"
INVALID_FORMAT_MESSAGE = "Invalid file format. Please upload a text document (.txt)"
READ_FAILURE_MESSAGE = "Error reading file"


class AccessError(HTTPException):
    """Upload missing, or could not be opened or fully read"""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )


class FormatRejection(HTTPException):
    """Upload is not an acceptable text document"""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )


class ValidatedDocument:
    """Document bytes that passed all boundary checks"""

    def __init__(
        self,
        filename: str,
        content: bytes,
        declared_type: str,
        detected_type: Optional[str] = None,
    ):
        self.filename = filename
        self.content = content
        self.declared_type = declared_type
        self.detected_type = detected_type


class UploadValidator:
    """
    Validates uploaded documents before ranking.

    - Declared content type must start with "text/"
    - Size limit (the whole document is held in memory)
    - Magic bytes detection: only a recognized binary signature is rejected
      (a PNG renamed to .txt is still a PNG)
    """

    # Non-text/* MIME types libmagic reports for harmless text payloads.
    # "application/octet-stream" means no signature matched (e.g. text with a NUL byte)
    TEXT_COMPATIBLE_MIME = {
        "application/x-empty",
        "inode/x-empty",
        "application/octet-stream",
        "application/json",
        "application/xml",
        "application/csv",
        "application/javascript",
    }

    def __init__(self, max_document_size: int, content_sniffing: bool = True):
        """
        Args:
            max_document_size: Largest accepted document in bytes
            content_sniffing: Check magic bytes in addition to the declared type
        """
        self.max_document_size = max_document_size
        self.content_sniffing = content_sniffing
        self.mime_detector = magic.Magic(mime=True) if content_sniffing else None

    def check_declared_type(self, filename: str, content_type: Optional[str]) -> str:
        """
        Reject uploads whose declared content type is not text/*.

        Returns:
            The declared content type, lowercased

        Raises:
            FormatRejection: Missing or non-text content type
        """
        declared = (content_type or "").strip().lower()
        if not declared.startswith("text/"):
            logger.warning(f"Rejected '{filename}': declared content type '{content_type}'")
            raise FormatRejection(
                f"{INVALID_FORMAT_MESSAGE}\n"
                f"Received content type: {content_type or 'none'}"
            )
        return declared

    async def read_upload(self, upload: Union[UploadFile, str, None]) -> ValidatedDocument:
        """
        Check and read an uploaded file.

        Steps run in order: presence, declared type, read, size, magic bytes.

        Args:
            upload: Multipart file part (None when the form has no file,
                str when "file" was sent as a plain form field)

        Returns:
            ValidatedDocument with the complete content

        Raises:
            AccessError: No file part, or reading failed
            FormatRejection: Not text, too large, or binary content
        """
        # A plain form field named "file" is not a file part
        if upload is None or isinstance(upload, str) or not upload.filename:
            logger.warning("Rejected upload: no file part in request")
            raise AccessError(MISSING_FILE_MESSAGE)

        declared = self.check_declared_type(upload.filename, upload.content_type)

        try:
            # One byte past the limit is enough to detect oversize documents
            content = await upload.read(self.max_document_size + 1)
        except Exception as e:
            logger.warning(f"Failed to read '{upload.filename}': {e}")
            raise AccessError(READ_FAILURE_MESSAGE)

        return self.validate(upload.filename, declared, content)

    def validate(self, filename: str, declared_type: str, content: bytes) -> ValidatedDocument:
        """
        Size and content checks on already-read bytes.

        Raises:
            FormatRejection: Too large or binary content
        """
        if len(content) > self.max_document_size:
            limit_mb = self.max_document_size / 1024 / 1024
            logger.warning(f"Rejected '{filename}': larger than {self.max_document_size} bytes")
            raise FormatRejection(
                f"File '{filename}' is too large.\n"
                f"Maximum allowed: {limit_mb:.1f}MB ({self.max_document_size} bytes)."
            )

        detected = None
        if self.mime_detector is not None and content:
            detected = self._detect_mime_type(content)
            if not self._is_text_compatible(detected):
                logger.warning(f"Rejected '{filename}': declared {declared_type}, detected {detected}")
                raise FormatRejection(
                    f"Format mismatch in '{filename}':\n"
                    f"  Declared: {declared_type}\n"
                    f"  Actual content: {detected}\n"
                    f"{INVALID_FORMAT_MESSAGE}"
                )

        return ValidatedDocument(
            filename=filename,
            content=content,
            declared_type=declared_type,
            detected_type=detected,
        )

    def _detect_mime_type(self, content: bytes) -> str:
        """Detect MIME type from file content (first 2KB)"""
        return self.mime_detector.from_buffer(content[:2048])

    def _is_text_compatible(self, mime_type: str) -> bool:
        return mime_type.startswith("text/") or mime_type in self.TEXT_COMPATIBLE_MIME
