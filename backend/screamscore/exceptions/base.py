from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class AdminRequiredError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Admin privileges are required for this action"
