from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    """サービス名未指定の場合は POWERTOOLS_SERVICE_NAME を使用する"""
    return Logger(service=service_name)
