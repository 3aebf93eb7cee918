# exceptions.py


class EmployeeManagerError(Exception):
    """Base class for every error raised by employee_manager."""


class StorageError(EmployeeManagerError):
    """A record file could not be created, written or deleted."""


class MalformedRecord(EmployeeManagerError):
    """A stored record could not be parsed."""


class ValidationError(EmployeeManagerError):
    """Interactive input was rejected; the prompt asks again."""


class ConfigError(EmployeeManagerError):
    pass
