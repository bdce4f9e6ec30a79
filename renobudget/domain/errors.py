
class AppError(Exception):
    status_code = 400
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message

class BadRequest(AppError):
    status_code = 400

class InvalidConfiguration(AppError):
    """A (tier, project_type) pair is missing from a coefficient table."""
    status_code = 422

    def __init__(self, tier: str, project_type: str, table: str = "budget"):
        super().__init__(
            f"No {table} coefficient for project type {project_type!r} in tier {tier!r}"
        )
        self.tier = tier
        self.project_type = project_type
        self.table = table
