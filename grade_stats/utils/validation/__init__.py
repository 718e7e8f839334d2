"""Validation utilities - Path identifier parsing"""
from .validation_utils import ValidationUtils
