"""
Frontend: reading text into token trees and printing them back.
"""

from .parser import Parser, parse_token_stream
from .printer import render

__all__ = ["Parser", "parse_token_stream", "render"]
