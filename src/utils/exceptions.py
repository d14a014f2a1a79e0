from fastapi import HTTPException, status


class TranscriptTooLongError(HTTPException):
    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail={
                "message": "Transcript is too long",
                "length": length,
                "max_length": max_length,
            },
        )
