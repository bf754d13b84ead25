from .error_code import ErrorCode as ErrorCode
