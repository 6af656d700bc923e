"""AWS client accessors"""
from .clients import get_dynamodb_resource

__all__ = ["get_dynamodb_resource"]
