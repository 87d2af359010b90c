"""
Entry point da AWS Lambda (handler: lambda_function.lambda_handler)
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler

__all__ = ['lambda_handler']
