"""Utility functions for weekledger."""

from weekledger.utils.date_parser import parse_date
from weekledger.utils.amount_parser import parse_amount
from weekledger.utils.logging_config import get_logger, setup_logging

__all__ = ["parse_date", "parse_amount", "get_logger", "setup_logging"]
