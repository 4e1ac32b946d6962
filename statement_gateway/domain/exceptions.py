"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidStatementConfigError(DomainException):
    """Statement configuration is inconsistent or incomplete"""

    pass


class UnknownTemplateError(DomainException):
    """No bank template registered under the requested id"""

    def __init__(self, template_id: str):
        super().__init__(f"Unknown bank template: {template_id}")
        self.template_id = template_id


class HolidayAPIError(DomainException):
    """Holiday calendar service returned an error or is unavailable"""

    pass
