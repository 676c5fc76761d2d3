"""Driver error status model."""

from pydantic import BaseModel, ConfigDict

SUCCESS_CODE = "00000"
GENERAL_ERROR_CODE = "HY000"


class ErrorStatus(BaseModel):
    """Three-part error status reported by a driver after an execute.

    ``code`` is an SQLSTATE class code, ``subcode`` the driver-specific error
    number (empty when there is none) and ``message`` the driver's text.
    """

    model_config = ConfigDict(frozen=True)

    code: str = SUCCESS_CODE
    subcode: str = ""
    message: str = ""

    @classmethod
    def ok(cls) -> "ErrorStatus":
        """Return the status for a statement that succeeded."""
        return cls()

    @property
    def is_error(self) -> bool:
        """Whether this status describes a real error.

        MySQL drivers report ``HY000`` with no error number for successful
        INSERT/UPDATE/DELETE statements; that is not an error.
        """
        if self.code == SUCCESS_CODE:
            return False
        if self.code == GENERAL_ERROR_CODE and not self.subcode:
            return False
        return True

    def format(self) -> str:
        """Render the status the way it is written to the statement log."""
        return f"MySQL ERROR {self.code} ({self.subcode}): {self.message}"
