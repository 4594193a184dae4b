import os

from aws_lambda_powertools import Logger

SERVICE_NAME = os.getenv("POWERTOOLS_SERVICE_NAME", "reservation-service")


def get_logger(service_name: str = SERVICE_NAME) -> Logger:
    return Logger(service=service_name)
